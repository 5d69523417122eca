"""Session Services."""

from apps.auth_session.application.session.services.session_store import SessionStore

__all__ = ["SessionStore"]
