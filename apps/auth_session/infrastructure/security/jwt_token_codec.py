"""JWT Token Codec.

TokenCodec 포트의 구현체입니다.
access / refresh 토큰은 서로 다른 secret으로 서명합니다.
"""

from __future__ import annotations

import time
from typing import Any, Callable

from jose import JWTError, jwt

from apps.auth_session.application.token.ports import SignedToken
from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.enums.user_role import UserRole
from apps.auth_session.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)
from apps.auth_session.domain.value_objects.token_claims import TokenClaims

# exp / nbf는 _check_lifetime에서 주입된 clock 기준으로 검사
_TIME_CLAIMS_CHECKED_BY_CODEC = {
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
}


class JwtTokenCodec:
    """JWT 토큰 코덱.

    TokenCodec 구현체.
    """

    def __init__(
        self,
        *,
        access_secret: str,
        refresh_secret: str,
        algorithm: str = "HS256",
        issuer: str = "fit-date-auth",
        audience: str = "fit-date-api",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secrets = {
            TokenType.ACCESS: access_secret,
            TokenType.REFRESH: refresh_secret,
        }
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._clock = clock

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
        """토큰 서명."""
        now = int(self._clock())
        expires_at = now + ttl_seconds

        payload: dict[str, Any] = {
            "sub": user_id,
            "role": role.value,
            "type": token_type.value,
            "jti": token_id,
            "iat": now,
            "nbf": now,
            "exp": expires_at,
            "iss": self._issuer,
            "aud": self._audience,
        }
        if device_id is not None:
            payload["did"] = device_id

        token = jwt.encode(payload, self._secrets[token_type], algorithm=self._algorithm)
        return SignedToken(token=token, token_id=token_id, expires_at=expires_at)

    def _check_lifetime(self, payload: dict[str, Any]) -> None:
        """exp / nbf 검사 (issue와 같은 clock 기준)."""
        expires_at = payload.get("exp")
        not_before = payload.get("nbf")
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            raise InvalidTokenError("Missing or malformed exp claim")

        now = int(self._clock())
        if expires_at <= now:
            raise TokenExpiredError()
        if isinstance(not_before, int) and not_before > now:
            raise InvalidTokenError("Token not yet valid")

    def verify(self, token: str, expected_type: TokenType) -> TokenClaims:
        """토큰 검증.

        Raises:
            InvalidTokenError: 서명/형식 오류
            TokenTypeMismatchError: type 클레임 불일치
            TokenExpiredError: 만료
        """
        try:
            payload = jwt.decode(
                token,
                self._secrets[expected_type],
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options=_TIME_CLAIMS_CHECKED_BY_CODEC,
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        self._check_lifetime(payload)

        actual_type = payload.get("type")
        if actual_type != expected_type.value:
            raise TokenTypeMismatchError(expected=expected_type.value, actual=str(actual_type))

        try:
            return TokenClaims(
                user_id=str(payload["sub"]),
                role=UserRole(payload["role"]),
                token_type=expected_type,
                token_id=payload["jti"],
                issued_at=payload["iat"],
                expires_at=payload["exp"],
                device_id=payload.get("did"),
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed claims: {e}") from e
