"""TokenCodec Port.

Bearer 토큰 서명/검증을 위한 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.enums.user_role import UserRole
from apps.auth_session.domain.value_objects.token_claims import TokenClaims


@dataclass(frozen=True, slots=True)
class SignedToken:
    """서명된 토큰과 만료 시각."""

    token: str
    token_id: str
    expires_at: int


class TokenCodec(Protocol):
    """토큰 코덱 인터페이스.

    구현체:
        - JwtTokenCodec (infrastructure/security/)

    비즈니스 판단은 하지 않습니다. 서명/형식/만료만 검사합니다.
    """

    def issue(
        self,
        *,
        user_id: str,
        role: UserRole,
        token_type: TokenType,
        token_id: str,
        ttl_seconds: int,
        device_id: str | None = None,
    ) -> SignedToken:
        """토큰 서명.

        access/refresh는 서로 다른 secret으로 서명됩니다.
        """
        ...

    def verify(self, token: str, expected_type: TokenType) -> TokenClaims:
        """토큰 검증.

        Raises:
            InvalidTokenError: 서명/형식 오류 또는 type 불일치
            TokenExpiredError: 만료
        """
        ...
