"""ListSessions Query.

사용자의 활성 세션 목록 Query Service입니다.

Architecture:
    - QueryService: ListSessionsQueryService
    - Services(연주자): SessionStore
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.auth_session.application.session.dto import SessionView

if TYPE_CHECKING:
    from apps.auth_session.application.session.services import SessionStore


class ListSessionsQueryService:
    """세션 목록 Query Service.

    요청한 토큰의 세션은 current=True로 표시합니다.
    """

    def __init__(self, session_store: "SessionStore") -> None:
        self._session_store = session_store

    async def execute(
        self,
        user_id: str,
        current_token_id: str | None = None,
    ) -> list[SessionView]:
        """활성 세션 목록 (최근 활동 순)."""
        records = await self._session_store.list_sessions(user_id)
        return [
            SessionView(
                device_id=record.device_id,
                ip=record.ip,
                user_agent=record.user_agent,
                created_at=record.created_at,
                last_active_at=record.last_active_at,
                device=record.device,
                current=record.token_id == current_token_id,
            )
            for record in records
        ]
