"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.

    @router.get("/me")
    async def me(user: AuthenticatedUser = Depends(get_current_user)): ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from fastapi import Depends, Request, Response

from apps.auth_session.application.token.dto import AuthenticatedUser
from apps.auth_session.presentation.http.auth.guard import AuthGuard, AuthMode
from apps.auth_session.setup.config import Settings
from apps.auth_session.setup.dependencies import (
    get_app_settings,
    get_device_parser,
    get_refresh_tokens_interactor,
    get_token_lifecycle,
)

if TYPE_CHECKING:
    from apps.auth_session.application.token.commands import RefreshTokensInteractor
    from apps.auth_session.application.token.services import TokenLifecycleManager


def get_auth_guard(
    lifecycle: "TokenLifecycleManager" = Depends(get_token_lifecycle),
    refresh_interactor: "RefreshTokensInteractor" = Depends(get_refresh_tokens_interactor),
    settings: Settings = Depends(get_app_settings),
    device_parser=Depends(get_device_parser),
) -> AuthGuard:
    """AuthGuard 제공자."""
    return AuthGuard(lifecycle, refresh_interactor, settings, device_parser)


def authenticate(
    mode: AuthMode = AuthMode.MANDATORY,
) -> Callable[..., Awaitable[AuthenticatedUser | None]]:
    """인증 모드별 의존성 생성."""

    async def dependency(
        request: Request,
        response: Response,
        guard: AuthGuard = Depends(get_auth_guard),
    ) -> AuthenticatedUser | None:
        return await guard.authenticate(request, response, mode)

    return dependency


get_current_user = authenticate(AuthMode.MANDATORY)
get_optional_user = authenticate(AuthMode.OPTIONAL)
