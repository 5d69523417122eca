"""Token Claims Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """검증된 토큰 클레임.

    Attributes:
        user_id: sub 클레임 (불투명 식별자)
        role: 사용자 권한
        token_type: access / refresh
        token_id: jti 클레임. 같은 쌍의 access/refresh 토큰이 공유합니다.
        issued_at: iat (Unix timestamp)
        expires_at: exp (Unix timestamp)
        device_id: did 클레임 (refresh 토큰에만 존재)
    """

    user_id: str
    role: UserRole
    token_type: TokenType
    token_id: str
    issued_at: int
    expires_at: int
    device_id: str | None = None

    def remaining_seconds(self, now: float) -> int:
        """만료까지 남은 시간(초). 이미 만료되었으면 0 이하."""
        return int(self.expires_at - now)
