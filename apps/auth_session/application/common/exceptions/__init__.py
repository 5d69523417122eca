"""Application Exceptions."""

from apps.auth_session.application.common.exceptions.base import ApplicationError
from apps.auth_session.application.common.exceptions.config import ConfigurationError
from apps.auth_session.application.common.exceptions.gateway import StoreUnavailableError

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "StoreUnavailableError",
]
