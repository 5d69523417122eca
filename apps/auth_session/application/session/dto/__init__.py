"""Session DTOs."""

from apps.auth_session.application.session.dto.session import SessionView

__all__ = ["SessionView"]
