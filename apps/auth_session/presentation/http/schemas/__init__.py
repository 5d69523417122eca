"""HTTP Schemas (Pydantic Models)."""

from apps.auth_session.presentation.http.schemas.auth import (
    DeviceResponse,
    LogoutAllData,
    LogoutData,
    MeResponse,
    SessionResponse,
    TokenData,
)
from apps.auth_session.presentation.http.schemas.common import (
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    SuccessResponse,
)

__all__ = [
    "DeviceResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "LogoutAllData",
    "LogoutData",
    "MeResponse",
    "SessionResponse",
    "SuccessResponse",
    "TokenData",
]
