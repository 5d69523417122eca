"""Cookie Parameters.

인증 쿠키 설정을 관리합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi import Response

    from apps.auth_session.application.token.dto import TokenPair
    from apps.auth_session.setup.config import Settings

# Cookie names (프론트엔드와 일치해야 함)
ACCESS_COOKIE_NAME = "accessToken"
REFRESH_COOKIE_NAME = "refreshToken"

COOKIE_PATH = "/"


def get_cookie_params(settings: "Settings") -> dict[str, Any]:
    """쿠키 공통 파라미터."""
    params: dict[str, Any] = {
        "path": COOKIE_PATH,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.cookie_samesite,
    }
    if settings.cookie_domain:
        params["domain"] = settings.cookie_domain
    return params


def _max_age(expires_at: int) -> int:
    return max(expires_at - int(time.time()), 1)


def set_access_cookie(
    response: "Response",
    settings: "Settings",
    *,
    access_token: str,
    expires_at: int,
) -> None:
    """Access 토큰 쿠키만 설정 (sliding renewal)."""
    response.set_cookie(
        key=ACCESS_COOKIE_NAME,
        value=access_token,
        max_age=_max_age(expires_at),
        **get_cookie_params(settings),
    )


def set_auth_cookies(response: "Response", settings: "Settings", tokens: "TokenPair") -> None:
    """인증 쿠키 설정 (발급 / rotation)."""
    set_access_cookie(
        response,
        settings,
        access_token=tokens.access_token,
        expires_at=tokens.access_expires_at,
    )
    response.set_cookie(
        key=REFRESH_COOKIE_NAME,
        value=tokens.refresh_token,
        max_age=_max_age(tokens.refresh_expires_at),
        **get_cookie_params(settings),
    )


def get_logout_cookies(settings: "Settings") -> dict[str, dict[str, Any]]:
    """두 인증 쿠키를 지우는 파라미터 (max_age=0)."""
    params = {**get_cookie_params(settings), "max_age": 0, "expires": 0}
    return {
        ACCESS_COOKIE_NAME: dict(params),
        REFRESH_COOKIE_NAME: dict(params),
    }


def clear_auth_cookies(response: "Response", settings: "Settings") -> None:
    """인증 쿠키 삭제."""
    for name, params in get_logout_cookies(settings).items():
        response.set_cookie(key=name, value="", **params)
