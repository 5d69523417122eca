"""Session DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from apps.auth_session.domain.value_objects.session_metadata import DeviceInfo


@dataclass(frozen=True, slots=True)
class SessionView:
    """세션 목록 항목.

    token_id는 노출하지 않습니다.
    """

    device_id: str
    ip: str | None
    user_agent: str | None
    created_at: datetime
    last_active_at: datetime
    device: DeviceInfo | None
    current: bool
