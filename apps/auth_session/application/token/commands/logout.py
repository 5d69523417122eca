"""Logout Command.

로그아웃 Use Case입니다.

Architecture:
    - UseCase(지휘자): LogoutInteractor
    - Services(연주자): TokenLifecycleManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.auth_session.application.token.dto import LogoutRequest
from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.exceptions.auth import InvalidTokenError, TokenExpiredError

if TYPE_CHECKING:
    from apps.auth_session.application.token.services import TokenLifecycleManager

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor (지휘자).

    Workflow:
        1. Refresh 토큰이 있으면 그 기기의 세션 폐기
        2. 없거나 무효하면 Access 토큰의 token_id로 세션 폐기

    Note:
        토큰이 유효하지 않아도 예외를 발생시키지 않습니다.
        저장소 장애(StoreUnavailableError)는 그대로 전파합니다.
        클라이언트 쿠키 삭제는 Presentation 레이어에서 처리합니다.
    """

    def __init__(self, lifecycle: "TokenLifecycleManager") -> None:
        self._lifecycle = lifecycle

    async def execute(self, request: LogoutRequest) -> bool:
        """로그아웃을 처리합니다.

        Returns:
            세션이 실제로 폐기되었으면 True
        """
        # 1. Refresh 토큰 처리
        if request.refresh_token:
            try:
                claims = self._lifecycle.decode(request.refresh_token, TokenType.REFRESH)
            except (InvalidTokenError, TokenExpiredError) as e:
                logger.info("Ignoring unusable refresh token on logout", extra={"reason": e.message})
            else:
                if claims.device_id and await self._lifecycle.invalidate_device_session(
                    claims.user_id, claims.device_id
                ):
                    logger.info(
                        "User logged out",
                        extra={"user_id": claims.user_id, "device_id": claims.device_id},
                    )
                    return True

        # 2. Access 토큰 처리
        if request.access_token:
            try:
                claims = self._lifecycle.decode(request.access_token, TokenType.ACCESS)
            except (InvalidTokenError, TokenExpiredError) as e:
                logger.info("Ignoring unusable access token on logout", extra={"reason": e.message})
            else:
                revoked = await self._lifecycle.invalidate_session_by_token(
                    claims.user_id, claims.token_id
                )
                logger.info(
                    "User logged out",
                    extra={"user_id": claims.user_id, "token_id": claims.token_id},
                )
                return revoked

        return False
