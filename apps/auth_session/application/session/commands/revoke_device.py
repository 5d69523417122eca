"""RevokeDeviceSession Command.

특정 기기 세션 강제 로그아웃 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.auth_session.domain.exceptions.session import SessionNotFoundError

if TYPE_CHECKING:
    from apps.auth_session.application.token.services import TokenLifecycleManager

logger = logging.getLogger(__name__)


class RevokeDeviceSessionInteractor:
    """기기 세션 폐기 Interactor (지휘자)."""

    def __init__(self, lifecycle: "TokenLifecycleManager") -> None:
        self._lifecycle = lifecycle

    async def execute(self, user_id: str, device_id: str) -> None:
        """기기 세션을 폐기합니다.

        Raises:
            SessionNotFoundError: 해당 기기에 세션이 없음
        """
        if not await self._lifecycle.invalidate_device_session(user_id, device_id):
            raise SessionNotFoundError(device_id)
        logger.info("Device session revoked", extra={"user_id": user_id, "device_id": device_id})
