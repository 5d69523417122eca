"""RevokeAllSessions Command.

모든 기기에서 로그아웃 Use Case입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.auth_session.application.token.services import TokenLifecycleManager


class RevokeAllSessionsInteractor:
    """전체 세션 폐기 Interactor (지휘자)."""

    def __init__(self, lifecycle: "TokenLifecycleManager") -> None:
        self._lifecycle = lifecycle

    async def execute(self, user_id: str) -> int:
        """사용자의 모든 세션을 폐기하고 폐기된 기기 수를 반환합니다."""
        return await self._lifecycle.invalidate_all_sessions_for_user(user_id)
