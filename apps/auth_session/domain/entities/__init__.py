"""Domain Entities."""

from apps.auth_session.domain.entities.session_record import SessionRecord

__all__ = ["SessionRecord"]
