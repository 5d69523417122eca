"""Token DTOs."""

from apps.auth_session.application.token.dto.token import (
    AuthenticatedUser,
    IssueTokensRequest,
    LogoutRequest,
    RefreshTokensRequest,
    RefreshTokensResponse,
    TokenPair,
)

__all__ = [
    "AuthenticatedUser",
    "IssueTokensRequest",
    "LogoutRequest",
    "RefreshTokensRequest",
    "RefreshTokensResponse",
    "TokenPair",
]
