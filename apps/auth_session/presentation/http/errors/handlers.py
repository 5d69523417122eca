"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.

응답 형식:
    {"success": false, "error": {"code": "...", "message": "..."}}

401 응답은 항상 두 인증 쿠키를 지우고 같은 안내 메시지를 반환합니다.
재사용 / 메타데이터 불일치 등 내부 사유는 로그에만 남깁니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.auth_session.application.common.exceptions import (
    ApplicationError,
    StoreUnavailableError,
)
from apps.auth_session.domain.exceptions.auth import (
    InvalidTokenError,
    MissingTokenError,
    SessionExpiredError,
    TokenExpiredError,
    UnauthorizedRotationError,
)
from apps.auth_session.domain.exceptions.base import DomainError
from apps.auth_session.domain.exceptions.session import SessionNotFoundError
from apps.auth_session.presentation.http.auth.cookie_params import clear_auth_cookies

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "세션이 만료되었습니다. 다시 로그인해주세요."
STORE_UNAVAILABLE_MESSAGE = "일시적인 오류가 발생했습니다. 잠시 후 다시 시도해주세요."


def error_body(code: str, message: str) -> dict:
    """에러 응답 envelope."""
    return {"success": False, "error": {"code": code, "message": message}}


def _unauthorized(request: Request, code: str) -> JSONResponse:
    response = JSONResponse(status_code=401, content=error_body(code, SESSION_EXPIRED_MESSAGE))
    clear_auth_cookies(response, request.app.state.settings)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(MissingTokenError)
    async def missing_token_handler(request: Request, exc: MissingTokenError):
        logger.info("Missing auth cookie", extra={"path": request.url.path})
        return _unauthorized(request, "MISSING_TOKEN")

    @app.exception_handler(SessionExpiredError)
    async def session_expired_handler(request: Request, exc: SessionExpiredError):
        logger.warning(
            "Session expired",
            extra={"path": request.url.path, "reason": exc.reason},
        )
        return _unauthorized(request, "SESSION_EXPIRED")

    @app.exception_handler(UnauthorizedRotationError)
    async def unauthorized_rotation_handler(request: Request, exc: UnauthorizedRotationError):
        logger.warning(
            "Refresh token rejected",
            extra={"path": request.url.path, "reason": exc.reason},
        )
        return _unauthorized(request, "SESSION_EXPIRED")

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(request: Request, exc: InvalidTokenError):
        logger.warning(
            "Invalid token",
            extra={"path": request.url.path, "reason": exc.message},
        )
        return _unauthorized(request, "SESSION_EXPIRED")

    @app.exception_handler(TokenExpiredError)
    async def token_expired_handler(request: Request, exc: TokenExpiredError):
        logger.info("Token expired", extra={"path": request.url.path})
        return _unauthorized(request, "SESSION_EXPIRED")

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
        return JSONResponse(
            status_code=404,
            content=error_body("SESSION_NOT_FOUND", exc.message),
        )

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error(
            "Key-value store unavailable",
            extra={"path": request.url.path, "operation": exc.operation, "reason": exc.reason},
        )
        return JSONResponse(
            status_code=503,
            content=error_body("STORE_UNAVAILABLE", STORE_UNAVAILABLE_MESSAGE),
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content=error_body("DOMAIN_ERROR", exc.message),
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        logger.error("Unhandled application error", extra={"error": exc.message})
        return JSONResponse(
            status_code=500,
            content=error_body("APPLICATION_ERROR", "Internal error"),
        )
