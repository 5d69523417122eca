"""Test Factories.

테스트용 Fake 구현과 공통 설정값.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from apps.auth_session.application.common.exceptions import StoreUnavailableError
from apps.auth_session.domain.entities.session_record import SessionRecord
from apps.auth_session.domain.value_objects.session_metadata import SessionMetadata

ACCESS_SECRET = "test-access-secret"
REFRESH_SECRET = "test-refresh-secret"

ACCESS_TTL = 30 * 60
REFRESH_TTL = 7 * 24 * 60 * 60
RENEWAL_WINDOW = 5 * 60
SESSION_MAX_AGE = 30 * 24 * 60 * 60
DEACTIVATION_GRACE = 30


class FakeClock:
    """수동으로 진행시키는 시계."""

    def __init__(self, start: float) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryKeyValueStore:
    """KeyValueStore 인메모리 구현 (TTL 지원).

    available=False면 모든 호출이 StoreUnavailableError,
    suspend=True면 모든 호출이 한 번씩 양보하여 asyncio.gather로 경쟁 상태를 만들 수 있습니다.
    """

    def __init__(self, clock: FakeClock) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[object, float]] = {}
        self.available = True
        self.suspend = False

    async def _enter(self, operation: str) -> None:
        if self.suspend:
            await asyncio.sleep(0)
        if not self.available:
            raise StoreUnavailableError(operation, "connection refused")

    def _live(self, key: str):
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    def ttl(self, key: str) -> float | None:
        """남은 TTL (테스트 확인용)."""
        if self._live(key) is None:
            return None
        return self._entries[key][1] - self._clock()

    async def get(self, key: str) -> str | None:
        await self._enter("get")
        value = self._live(key)
        return value if isinstance(value, str) else None

    async def set(self, key, value, ttl_seconds, *, only_if_exists=False) -> bool:
        await self._enter("set")
        if only_if_exists and self._live(key) is None:
            return False
        self._entries[key] = (value, self._clock() + ttl_seconds)
        return True

    async def delete(self, *keys: str) -> int:
        await self._enter("delete")
        removed = 0
        for key in keys:
            if self._live(key) is not None:
                del self._entries[key]
                removed += 1
        return removed

    async def exists(self, key: str) -> bool:
        await self._enter("exists")
        return self._live(key) is not None

    async def keys_with_prefix(self, prefix: str) -> list[str]:
        await self._enter("scan")
        return [
            key
            for key in list(self._entries)
            if key.startswith(prefix) and self._live(key) is not None
        ]

    async def add_to_set(self, key: str, member: str, ttl_seconds: int) -> None:
        await self._enter("sadd")
        members = set(self._live(key) or ())
        members.add(member)
        self._entries[key] = (members, self._clock() + ttl_seconds)

    async def remove_from_set(self, key: str, *members: str) -> None:
        await self._enter("srem")
        current = self._live(key)
        if current is None:
            return
        remaining = set(current) - set(members)
        if remaining:
            self._entries[key] = (remaining, self._entries[key][1])
        else:
            del self._entries[key]

    async def set_members(self, key: str) -> set[str]:
        await self._enter("smembers")
        return set(self._live(key) or ())

    async def ping(self) -> bool:
        await self._enter("ping")
        return True


def create_session_record(
    *,
    user_id: str = "u1",
    device_id: str = "d1",
    token_id: str = "tok-1",
    ip: str | None = "203.0.113.7",
    user_agent: str | None = "test-agent",
    created_at: datetime | None = None,
    last_active_at: datetime | None = None,
    is_active: bool = True,
) -> SessionRecord:
    """테스트용 SessionRecord 생성."""
    now = datetime.now(timezone.utc)
    return SessionRecord(
        user_id=user_id,
        device_id=device_id,
        token_id=token_id,
        ip=ip,
        user_agent=user_agent,
        created_at=created_at or now,
        last_active_at=last_active_at or created_at or now,
        is_active=is_active,
    )


def metadata_for(record: SessionRecord) -> SessionMetadata:
    """레코드와 일치하는 요청 메타데이터."""
    return SessionMetadata(
        device_id=record.device_id,
        ip=record.ip,
        user_agent=record.user_agent,
    )
