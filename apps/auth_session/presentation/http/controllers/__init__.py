"""HTTP Controllers."""

from apps.auth_session.presentation.http.controllers.api_v1_router import (
    router as api_v1_router,
)
from apps.auth_session.presentation.http.controllers.root_router import router as root_router

__all__ = ["root_router", "api_v1_router"]
