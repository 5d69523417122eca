"""Logout Controller.

로그아웃 엔드포인트입니다.
"""

from fastapi import APIRouter, Cookie, Depends, Response

from apps.auth_session.application.session.commands import RevokeAllSessionsInteractor
from apps.auth_session.application.token.commands import LogoutInteractor
from apps.auth_session.application.token.dto import AuthenticatedUser, LogoutRequest
from apps.auth_session.presentation.http.auth import get_current_user
from apps.auth_session.presentation.http.auth.cookie_params import (
    ACCESS_COOKIE_NAME,
    REFRESH_COOKIE_NAME,
    clear_auth_cookies,
)
from apps.auth_session.presentation.http.schemas import (
    LogoutAllData,
    LogoutData,
    SuccessResponse,
)
from apps.auth_session.setup.config import Settings
from apps.auth_session.setup.dependencies import (
    get_app_settings,
    get_logout_interactor,
    get_revoke_all_sessions_interactor,
)

router = APIRouter()


@router.post(
    "/logout",
    response_model=SuccessResponse[LogoutData],
    summary="로그아웃",
)
async def logout(
    response: Response,
    access_token: str | None = Cookie(None, alias=ACCESS_COOKIE_NAME),
    refresh_token: str | None = Cookie(None, alias=REFRESH_COOKIE_NAME),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
    settings: Settings = Depends(get_app_settings),
) -> SuccessResponse[LogoutData]:
    """현재 기기 세션을 폐기하고 쿠키를 삭제합니다.

    토큰이 없거나 무효해도 실패하지 않습니다.
    """
    await interactor.execute(
        LogoutRequest(access_token=access_token, refresh_token=refresh_token)
    )

    clear_auth_cookies(response, settings)

    return SuccessResponse(data=LogoutData())


@router.post(
    "/logout/all",
    response_model=SuccessResponse[LogoutAllData],
    summary="모든 기기에서 로그아웃",
)
async def logout_all(
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    interactor: RevokeAllSessionsInteractor = Depends(get_revoke_all_sessions_interactor),
    settings: Settings = Depends(get_app_settings),
) -> SuccessResponse[LogoutAllData]:
    """사용자의 모든 기기 세션을 폐기합니다."""
    revoked = await interactor.execute(user.user_id)

    clear_auth_cookies(response, settings)

    return SuccessResponse(data=LogoutAllData(revoked_sessions=revoked))
