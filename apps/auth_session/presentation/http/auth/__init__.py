"""Auth HTTP Components.

쿠키 관리, 요청 메타데이터, 인증 가드를 담당합니다.
"""

from apps.auth_session.presentation.http.auth.cookie_params import (
    ACCESS_COOKIE_NAME,
    REFRESH_COOKIE_NAME,
    clear_auth_cookies,
    get_cookie_params,
    get_logout_cookies,
    set_access_cookie,
    set_auth_cookies,
)
from apps.auth_session.presentation.http.auth.dependencies import (
    authenticate,
    get_current_user,
    get_optional_user,
)
from apps.auth_session.presentation.http.auth.guard import AuthGuard, AuthMode

__all__ = [
    "ACCESS_COOKIE_NAME",
    "REFRESH_COOKIE_NAME",
    "AuthGuard",
    "AuthMode",
    "authenticate",
    "clear_auth_cookies",
    "get_cookie_params",
    "get_current_user",
    "get_logout_cookies",
    "get_optional_user",
    "set_access_cookie",
    "set_auth_cookies",
]
