"""Domain Value Objects."""

from apps.auth_session.domain.value_objects.duration import parse_duration
from apps.auth_session.domain.value_objects.session_metadata import (
    DeviceInfo,
    SessionMetadata,
)
from apps.auth_session.domain.value_objects.token_claims import TokenClaims

__all__ = ["parse_duration", "DeviceInfo", "SessionMetadata", "TokenClaims"]
