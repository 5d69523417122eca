"""SessionRecord Entity.

(user, device) 하나에 대한 인증 바인딩입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from apps.auth_session.domain.value_objects.session_metadata import (
    DeviceInfo,
    SessionMetadata,
)


@dataclass(slots=True)
class SessionRecord:
    """세션 레코드.

    같은 (user_id, device_id)에 대해 활성 레코드는 최대 하나입니다.
    token_id는 현재 유효한 리프레시 토큰을 가리킵니다.
    """

    user_id: str
    device_id: str
    token_id: str
    ip: str | None
    user_agent: str | None
    created_at: datetime
    last_active_at: datetime
    is_active: bool = True
    device: DeviceInfo | None = None

    @property
    def index_member(self) -> str:
        """사용자별 세션 인덱스에 저장되는 멤버 값."""
        return f"{self.device_id}:{self.token_id}"

    def age_seconds(self, now: datetime) -> float:
        """로그인 이후 경과 시간(초)."""
        return (now - self.created_at).total_seconds()

    def is_bound_to(self, metadata: SessionMetadata) -> bool:
        """저장된 (ip, user_agent)와 요청 메타데이터가 일치하는지."""
        return self.ip == metadata.ip and self.user_agent == metadata.user_agent

    def deactivated(self, now: datetime) -> "SessionRecord":
        """비활성화된 사본 반환."""
        return replace(self, is_active=False, last_active_at=now)

    @classmethod
    def open(
        cls,
        *,
        user_id: str,
        token_id: str,
        metadata: SessionMetadata,
        now: datetime,
        created_at: datetime | None = None,
    ) -> "SessionRecord":
        """새 세션 레코드 생성.

        created_at을 넘기면 rotation 이전 로그인 시각을 이어받습니다.
        """
        return cls(
            user_id=user_id,
            device_id=metadata.device_id,
            token_id=token_id,
            ip=metadata.ip,
            user_agent=metadata.user_agent,
            created_at=created_at or now,
            last_active_at=now,
            is_active=True,
            device=metadata.device,
        )
