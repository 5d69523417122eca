"""HTTP Error Handling."""

from apps.auth_session.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
