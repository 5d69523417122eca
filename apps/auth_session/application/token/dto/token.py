"""Token DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from apps.auth_session.domain.enums.user_role import UserRole
from apps.auth_session.domain.value_objects.session_metadata import SessionMetadata


@dataclass(frozen=True, slots=True)
class TokenPair:
    """발급된 토큰 쌍. 두 토큰은 같은 token_id를 공유합니다."""

    access_token: str
    refresh_token: str
    token_id: str
    access_expires_at: int
    refresh_expires_at: int


@dataclass(frozen=True, slots=True)
class IssueTokensRequest:
    """토큰 발급 요청 (로그인 성공 직후)."""

    user_id: str
    role: UserRole
    metadata: SessionMetadata


@dataclass(frozen=True, slots=True)
class RefreshTokensRequest:
    """토큰 갱신 요청."""

    refresh_token: str
    metadata: SessionMetadata


@dataclass(frozen=True, slots=True)
class RefreshTokensResponse:
    """토큰 갱신 응답."""

    user_id: str
    role: UserRole
    device_id: str
    tokens: TokenPair


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    """로그아웃 요청."""

    access_token: str | None = None
    refresh_token: str | None = None


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """인증된 요청 주체. 하위 핸들러로 전달됩니다."""

    user_id: str
    role: UserRole
    token_id: str
