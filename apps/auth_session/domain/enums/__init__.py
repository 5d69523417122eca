"""Domain Enums."""

from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.enums.user_role import UserRole

__all__ = ["TokenType", "UserRole"]
