"""RefreshTokens Command.

토큰 갱신(rotation) Use Case입니다.

Architecture:
    - UseCase(지휘자): RefreshTokensInteractor
    - Services(연주자): TokenLifecycleManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.auth_session.application.token.dto import (
    RefreshTokensRequest,
    RefreshTokensResponse,
)
from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.exceptions.auth import UnauthorizedRotationError

if TYPE_CHECKING:
    from apps.auth_session.application.token.services import TokenLifecycleManager

logger = logging.getLogger(__name__)


class RefreshTokensInteractor:
    """토큰 갱신 Interactor (지휘자).

    Workflow:
        1. Refresh 토큰 검증 (서명 / 만료 / type)
        2. 토큰에 담긴 기기 확인
        3. Rotation (등록 확인 → 메타데이터 비교 → 단일 사용 삭제 → 재발급)

    Dependencies:
        Services (연주자):
            - lifecycle: 토큰 검증, rotation
    """

    def __init__(self, lifecycle: "TokenLifecycleManager") -> None:
        self._lifecycle = lifecycle

    async def execute(self, request: RefreshTokensRequest) -> RefreshTokensResponse:
        """토큰을 갱신합니다.

        Args:
            request: 토큰 갱신 요청 DTO

        Returns:
            새 토큰 쌍을 담은 응답 DTO

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            UnauthorizedRotationError: 재사용 / 메타데이터 불일치 / 세션 없음
        """
        # 1. Refresh 토큰 검증
        claims = self._lifecycle.decode(request.refresh_token, TokenType.REFRESH)

        # 2. 기기 확인
        if not claims.device_id:
            raise UnauthorizedRotationError("Refresh token carries no device")

        # 3. Rotation
        tokens = await self._lifecycle.rotate(
            user_id=claims.user_id,
            device_id=claims.device_id,
            old_token_id=claims.token_id,
            role=claims.role,
            metadata=request.metadata,
        )

        logger.info(
            "Session refreshed",
            extra={"user_id": claims.user_id, "device_id": claims.device_id},
        )

        return RefreshTokensResponse(
            user_id=claims.user_id,
            role=claims.role,
            device_id=claims.device_id,
            tokens=tokens,
        )
