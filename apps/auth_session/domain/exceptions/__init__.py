"""Domain Exceptions."""

from apps.auth_session.domain.exceptions.auth import (
    InvalidTokenError,
    MissingTokenError,
    SessionExpiredError,
    TokenExpiredError,
    TokenTypeMismatchError,
    UnauthorizedRotationError,
)
from apps.auth_session.domain.exceptions.base import DomainError
from apps.auth_session.domain.exceptions.session import SessionNotFoundError
from apps.auth_session.domain.exceptions.validation import InvalidDurationError

__all__ = [
    "DomainError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenTypeMismatchError",
    "MissingTokenError",
    "UnauthorizedRotationError",
    "SessionExpiredError",
    "SessionNotFoundError",
    "InvalidDurationError",
]
