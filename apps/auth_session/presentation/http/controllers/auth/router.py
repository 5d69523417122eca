"""Auth Router.

인증 세션 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.auth_session.presentation.http.controllers.auth.logout import router as logout_router
from apps.auth_session.presentation.http.controllers.auth.me import router as me_router
from apps.auth_session.presentation.http.controllers.auth.refresh import (
    router as refresh_router,
)
from apps.auth_session.presentation.http.controllers.auth.sessions import (
    router as sessions_router,
)

router = APIRouter()

router.include_router(refresh_router)
router.include_router(logout_router)
router.include_router(sessions_router)
router.include_router(me_router)
