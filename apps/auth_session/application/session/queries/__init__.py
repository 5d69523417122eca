"""Session Queries."""

from apps.auth_session.application.session.queries.list_sessions import (
    ListSessionsQueryService,
)

__all__ = ["ListSessionsQueryService"]
