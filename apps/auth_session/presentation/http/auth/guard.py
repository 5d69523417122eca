"""Auth Guard.

요청 단위 인증 게이트입니다.

    extract → (public? pass) → (optional? try, pass regardless) → mandatory: validate-or-401

인증된 모든 요청에서 sliding renewal을 시도하고, access 등록이 없으면
refresh 쿠키로 rotation합니다. 실패 시 SessionExpiredError를 던지고
쿠키 삭제는 예외 핸들러가 담당합니다.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from apps.auth_session.application.common.exceptions import StoreUnavailableError
from apps.auth_session.application.token.dto import AuthenticatedUser, RefreshTokensRequest
from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.exceptions.auth import (
    InvalidTokenError,
    MissingTokenError,
    SessionExpiredError,
    TokenExpiredError,
    UnauthorizedRotationError,
)
from apps.auth_session.domain.exceptions.base import DomainError
from apps.auth_session.presentation.http.auth.cookie_params import (
    ACCESS_COOKIE_NAME,
    REFRESH_COOKIE_NAME,
    set_access_cookie,
    set_auth_cookies,
)
from apps.auth_session.presentation.http.auth.metadata import build_session_metadata

if TYPE_CHECKING:
    from fastapi import Request, Response

    from apps.auth_session.application.token.commands import RefreshTokensInteractor
    from apps.auth_session.application.token.services import TokenLifecycleManager
    from apps.auth_session.domain.value_objects.session_metadata import SessionMetadata
    from apps.auth_session.presentation.http.auth.metadata import DeviceInfoParser
    from apps.auth_session.setup.config import Settings

logger = logging.getLogger(__name__)


class AuthMode(str, Enum):
    """라우트 인증 모드."""

    PUBLIC = "public"
    OPTIONAL = "optional"
    MANDATORY = "mandatory"


class AuthGuard:
    """쿠키 기반 인증 가드.

    Collaborators:
        - TokenLifecycleManager: 검증, 등록 확인, sliding renewal
        - RefreshTokensInteractor: access 등록이 없을 때 rotation
    """

    def __init__(
        self,
        lifecycle: "TokenLifecycleManager",
        refresh_interactor: "RefreshTokensInteractor",
        settings: "Settings",
        device_parser: "DeviceInfoParser | None" = None,
    ) -> None:
        self._lifecycle = lifecycle
        self._refresh_interactor = refresh_interactor
        self._settings = settings
        self._device_parser = device_parser

    async def authenticate(
        self,
        request: "Request",
        response: "Response",
        mode: AuthMode = AuthMode.MANDATORY,
    ) -> AuthenticatedUser | None:
        """요청을 인증합니다.

        Returns:
            인증된 사용자. PUBLIC이거나 OPTIONAL에서 인증 실패 시 None.

        Raises:
            MissingTokenError: MANDATORY에서 access 쿠키 없음
            SessionExpiredError: MANDATORY에서 세션 복구 불가
            StoreUnavailableError: MANDATORY에서 저장소 장애
        """
        if mode is AuthMode.PUBLIC:
            return None

        if mode is AuthMode.OPTIONAL:
            if not request.cookies.get(ACCESS_COOKIE_NAME):
                return None
            try:
                return await self._resolve(request, response)
            except DomainError as e:
                logger.info("Optional auth skipped", extra={"reason": e.message})
                return None
            except StoreUnavailableError as e:
                logger.warning("Optional auth skipped: store unavailable", extra={"reason": e.message})
                return None

        return await self._resolve(request, response)

    async def _resolve(self, request: "Request", response: "Response") -> AuthenticatedUser:
        access_token = request.cookies.get(ACCESS_COOKIE_NAME)
        if not access_token:
            raise MissingTokenError(ACCESS_COOKIE_NAME)

        metadata = build_session_metadata(request, self._device_parser)

        try:
            claims = self._lifecycle.decode(access_token, TokenType.ACCESS)
        except TokenExpiredError:
            return await self._rotate(request, response, metadata)
        except InvalidTokenError as e:
            raise SessionExpiredError(f"Invalid access token: {e.message}") from e

        if not await self._lifecycle.is_access_valid(claims.token_id, claims.user_id):
            return await self._rotate(request, response, metadata)

        renewed = await self._lifecycle.sliding_renewal(claims, metadata)
        if renewed is not None:
            set_access_cookie(
                response,
                self._settings,
                access_token=renewed.token,
                expires_at=renewed.expires_at,
            )

        return AuthenticatedUser(
            user_id=claims.user_id,
            role=claims.role,
            token_id=claims.token_id,
        )

    async def _rotate(
        self,
        request: "Request",
        response: "Response",
        metadata: "SessionMetadata",
    ) -> AuthenticatedUser:
        refresh_token = request.cookies.get(REFRESH_COOKIE_NAME)
        if not refresh_token:
            raise SessionExpiredError("Access token revoked and no refresh token present")

        try:
            result = await self._refresh_interactor.execute(
                RefreshTokensRequest(refresh_token=refresh_token, metadata=metadata)
            )
        except (InvalidTokenError, TokenExpiredError, UnauthorizedRotationError) as e:
            raise SessionExpiredError(f"Rotation failed: {e.message}") from e

        set_auth_cookies(response, self._settings, result.tokens)
        logger.info(
            "Session rotated by guard",
            extra={"user_id": result.user_id, "device_id": result.device_id},
        )
        return AuthenticatedUser(
            user_id=result.user_id,
            role=result.role,
            token_id=result.tokens.token_id,
        )
