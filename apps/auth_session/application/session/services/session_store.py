"""SessionStore - 기기 단위 세션 레코드 관리.

(user, device) → SessionRecord 매핑을 Key-Value 저장소에 보관합니다.
레코드 TTL은 리프레시 토큰 수명과 같고, 사용자별 세션 인덱스(Set)를 함께 갱신하여
"모든 세션 로그아웃"이 전체 키 스캔 없이 O(사용자 세션 수)로 동작하게 합니다.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.auth_session.application.common.keys import (
    StoreKeys,
    index_member,
    split_index_member,
)
from apps.auth_session.domain.entities.session_record import SessionRecord
from apps.auth_session.domain.value_objects.session_metadata import (
    DeviceInfo,
    SessionMetadata,
)

if TYPE_CHECKING:
    from apps.auth_session.application.common.ports import KeyValueStore

logger = logging.getLogger(__name__)


def serialize_session(record: SessionRecord) -> str:
    """SessionRecord → JSON."""
    device = None
    if record.device is not None:
        device = {
            "device_type": record.device.device_type,
            "browser": record.device.browser,
            "os": record.device.os,
        }
    return json.dumps(
        {
            "user_id": record.user_id,
            "device_id": record.device_id,
            "token_id": record.token_id,
            "ip": record.ip,
            "user_agent": record.user_agent,
            "created_at": record.created_at.isoformat(),
            "last_active_at": record.last_active_at.isoformat(),
            "is_active": record.is_active,
            "device": device,
        }
    )


def deserialize_session(value: str) -> SessionRecord:
    """JSON → SessionRecord."""
    data = json.loads(value)
    device = data.get("device")
    return SessionRecord(
        user_id=data["user_id"],
        device_id=data["device_id"],
        token_id=data["token_id"],
        ip=data.get("ip"),
        user_agent=data.get("user_agent"),
        created_at=datetime.fromisoformat(data["created_at"]),
        last_active_at=datetime.fromisoformat(data["last_active_at"]),
        is_active=data.get("is_active", False),
        device=DeviceInfo(**device) if device else None,
    )


class SessionStore:
    """기기 단위 세션 저장소.

    Responsibilities:
        - 세션 레코드 생성 / 조회 / 비활성화
        - 요청 메타데이터(ip, user-agent)와 저장된 값 비교
        - 사용자별 세션 인덱스 유지

    Collaborators:
        - KeyValueStore: 세션 레코드와 인덱스 저장
    """

    def __init__(
        self,
        kv_store: "KeyValueStore",
        *,
        ttl_seconds: int,
        max_age_seconds: int,
        deactivation_grace_seconds: int,
        strict_client_binding: bool = True,
        keys: StoreKeys | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._kv = kv_store
        self._ttl = ttl_seconds
        self._max_age = max_age_seconds
        self._grace = deactivation_grace_seconds
        self._strict_client_binding = strict_client_binding
        self._keys = keys or StoreKeys()
        self._clock = clock

    def _now(self) -> datetime:
        return datetime.fromtimestamp(self._clock(), tz=timezone.utc)

    async def create(
        self,
        *,
        user_id: str,
        token_id: str,
        metadata: SessionMetadata,
        created_at: datetime | None = None,
    ) -> SessionRecord:
        """새 세션 레코드를 기록합니다.

        같은 키의 이전 레코드는 덮어쓰고, 기기의 현재 세션 포인터를 이 token_id로 옮깁니다.
        이전 세션 정리는 호출자(TokenLifecycleManager) 책임입니다.

        Args:
            user_id: 사용자 ID
            token_id: 현재 유효한 리프레시 토큰 ID
            metadata: 요청 메타데이터 (device_id 포함)
            created_at: rotation 시 이어받을 최초 로그인 시각

        Returns:
            저장된 SessionRecord
        """
        record = SessionRecord.open(
            user_id=user_id,
            token_id=token_id,
            metadata=metadata,
            now=self._now(),
            created_at=created_at,
        )
        await self._kv.set(
            self._keys.session(user_id, record.device_id, token_id),
            serialize_session(record),
            self._ttl,
        )
        await self._kv.add_to_set(
            self._keys.user_sessions(user_id),
            record.index_member,
            self._ttl,
        )
        # 기기의 현재 세션 포인터는 마지막에 기록 (동시 발급 시 마지막 기록이 이김)
        await self._kv.set(
            self._keys.device_session(user_id, record.device_id),
            token_id,
            self._ttl,
        )
        return record

    async def get(self, user_id: str, device_id: str, token_id: str) -> SessionRecord | None:
        """세션 레코드 조회."""
        value = await self._kv.get(self._keys.session(user_id, device_id, token_id))
        if not value:
            return None
        return deserialize_session(value)

    async def find_token_ids(self, user_id: str, device_id: str) -> list[str]:
        """인덱스에서 기기에 묶인 token_id 목록을 찾습니다."""
        members = await self._kv.set_members(self._keys.user_sessions(user_id))
        return sorted(
            token_id
            for member_device_id, token_id in map(split_index_member, members)
            if member_device_id == device_id
        )

    async def find_device_id(self, user_id: str, token_id: str) -> str | None:
        """token_id가 속한 기기를 인덱스에서 찾습니다."""
        members = await self._kv.set_members(self._keys.user_sessions(user_id))
        for member in members:
            device_id, member_token_id = split_index_member(member)
            if member_token_id == token_id:
                return device_id
        return None

    async def current_token_id(self, user_id: str, device_id: str) -> str | None:
        """기기의 현재 세션 token_id (포인터)."""
        return await self._kv.get(self._keys.device_session(user_id, device_id))

    def is_valid(self, record: SessionRecord | None, metadata: SessionMetadata) -> bool:
        """레코드가 요청 메타데이터에 대해 유효한지 판단합니다.

        없음 / 비활성 / 최대 세션 수명 초과 / (ip, user-agent) 불일치 시 False.
        strict_client_binding이 꺼져 있으면 불일치는 경고만 남깁니다.
        """
        if record is None:
            logger.info("Session not found", extra={"device_id": metadata.device_id})
            return False

        log_extra = {"user_id": record.user_id, "device_id": record.device_id}

        if not record.is_active:
            logger.info("Session inactive", extra=log_extra)
            return False

        if record.age_seconds(self._now()) > self._max_age:
            logger.info("Session exceeded max age", extra=log_extra)
            return False

        if not record.is_bound_to(metadata):
            if self._strict_client_binding:
                logger.warning("Session client metadata mismatch", extra=log_extra)
                return False
            logger.info("Session client metadata changed (allowed)", extra=log_extra)

        return True

    async def validate(
        self,
        user_id: str,
        device_id: str,
        metadata: SessionMetadata,
        *,
        token_id: str | None = None,
    ) -> bool:
        """세션 유효성 확인.

        token_id를 생략하면 기기의 현재 세션을 기준으로 합니다.
        token_id가 현재 세션 포인터와 다르면 (더 나중에 발급된 세션이 있으면) 무효입니다.
        """
        current_token_id = await self.current_token_id(user_id, device_id)
        if token_id is not None and token_id != current_token_id:
            logger.info(
                "Session superseded",
                extra={"user_id": user_id, "device_id": device_id, "token_id": token_id},
            )
            return False

        record = None
        if current_token_id is not None:
            record = await self.get(user_id, device_id, current_token_id)
        return self.is_valid(record, metadata)

    async def current(self, user_id: str, device_id: str) -> SessionRecord | None:
        """기기의 현재 활성 세션."""
        token_id = await self.current_token_id(user_id, device_id)
        if token_id is None:
            return None
        record = await self.get(user_id, device_id, token_id)
        if record is None or not record.is_active:
            return None
        return record

    async def deactivate(
        self,
        user_id: str,
        device_id: str,
        token_ids: list[str] | None = None,
    ) -> list[SessionRecord]:
        """기기의 세션을 비활성화합니다.

        즉시 삭제하지 않고 is_active=False로 짧은 유예 TTL 동안 남겨둡니다
        (처리 중인 요청용). 인덱스에서는 바로 제거합니다.

        Args:
            token_ids: 비활성화할 세션. 생략하면 인덱스에 있는 기기의 모든 세션

        Returns:
            비활성화된 레코드 목록
        """
        now = self._now()
        index_key = self._keys.user_sessions(user_id)
        deactivated: list[SessionRecord] = []

        if token_ids is None:
            token_ids = await self.find_token_ids(user_id, device_id)

        for token_id in token_ids:
            record = await self.get(user_id, device_id, token_id)
            if record is not None and record.is_active:
                record = record.deactivated(now)
                await self._kv.set(
                    self._keys.session(user_id, device_id, token_id),
                    serialize_session(record),
                    self._grace,
                )
                deactivated.append(record)
            await self._kv.remove_from_set(index_key, index_member(device_id, token_id))

        return deactivated

    async def remove(self, user_id: str, device_id: str, token_id: str) -> None:
        """세션 레코드를 즉시 삭제합니다 (rotation 시 단일 사용 보장)."""
        await self._kv.delete(self._keys.session(user_id, device_id, token_id))
        await self._kv.remove_from_set(
            self._keys.user_sessions(user_id),
            index_member(device_id, token_id),
        )

    async def list_sessions(self, user_id: str) -> list[SessionRecord]:
        """사용자의 모든 활성 세션 (최근 활동 순).

        TTL로 사라진 레코드를 가리키는 인덱스 멤버는 이때 정리합니다.
        """
        index_key = self._keys.user_sessions(user_id)
        members = await self._kv.set_members(index_key)

        records: list[SessionRecord] = []
        stale: list[str] = []
        for member in sorted(members):
            device_id, token_id = split_index_member(member)
            record = await self.get(user_id, device_id, token_id)
            if record is None or not record.is_active:
                stale.append(member)
                continue
            records.append(record)

        if stale:
            await self._kv.remove_from_set(index_key, *stale)

        return sorted(records, key=lambda r: r.last_active_at, reverse=True)
