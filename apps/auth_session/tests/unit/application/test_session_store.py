"""SessionStore 단위 테스트."""

import json
from datetime import timedelta

import pytest

from apps.auth_session.application.session.services import SessionStore
from apps.auth_session.application.session.services.session_store import (
    deserialize_session,
    serialize_session,
)
from apps.auth_session.domain.value_objects.session_metadata import SessionMetadata
from apps.auth_session.tests.unit.factories import (
    DEACTIVATION_GRACE,
    REFRESH_TTL,
    SESSION_MAX_AGE,
    create_session_record,
)


class TestSessionStore:
    """SessionStore 테스트."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, session_store, kv_store, store_keys, metadata) -> None:
        """레코드 생성 후 조회."""
        # Act
        created = await session_store.create(user_id="u1", token_id="t1", metadata=metadata)
        fetched = await session_store.get("u1", "d1", "t1")

        # Assert
        assert fetched == created
        assert fetched.device.device_type == "mobile"
        assert kv_store.ttl(store_keys.session("u1", "d1", "t1")) == pytest.approx(REFRESH_TTL)
        assert await kv_store.set_members(store_keys.user_sessions("u1")) == {"d1:t1"}

    @pytest.mark.asyncio
    async def test_get_missing(self, session_store) -> None:
        assert await session_store.get("u1", "d1", "nope") is None

    @pytest.mark.asyncio
    async def test_validate_matching_metadata(self, session_store, metadata) -> None:
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)

        assert await session_store.validate("u1", "d1", metadata) is True
        assert await session_store.validate("u1", "d1", metadata, token_id="t1") is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "changes",
        [{"ip": "198.51.100.1"}, {"user_agent": "Other/1.0"}],
    )
    async def test_validate_metadata_mismatch(self, session_store, metadata, changes) -> None:
        """ip 또는 user-agent가 다르면 만료 전이어도 무효."""
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)
        presented = SessionMetadata(
            device_id="d1",
            ip=changes.get("ip", metadata.ip),
            user_agent=changes.get("user_agent", metadata.user_agent),
        )

        assert await session_store.validate("u1", "d1", presented) is False

    @pytest.mark.asyncio
    async def test_validate_mismatch_allowed_when_not_strict(
        self,
        kv_store,
        store_keys,
        clock,
        metadata,
    ) -> None:
        """strict_client_binding=False면 불일치를 허용."""
        store = SessionStore(
            kv_store,
            ttl_seconds=REFRESH_TTL,
            max_age_seconds=SESSION_MAX_AGE,
            deactivation_grace_seconds=DEACTIVATION_GRACE,
            strict_client_binding=False,
            keys=store_keys,
            clock=clock,
        )
        await store.create(user_id="u1", token_id="t1", metadata=metadata)
        moved = SessionMetadata(device_id="d1", ip="198.51.100.1", user_agent=metadata.user_agent)

        assert await store.validate("u1", "d1", moved) is True

    @pytest.mark.asyncio
    async def test_validate_absent(self, session_store, metadata) -> None:
        assert await session_store.validate("u1", "d1", metadata) is False

    def test_is_valid_rejects_over_max_age(self, session_store, clock) -> None:
        """최대 세션 수명 초과."""
        record = create_session_record(ip="1.1.1.1", user_agent="ua")
        record.created_at = record.created_at - timedelta(seconds=SESSION_MAX_AGE + 1)
        clock.now = record.last_active_at.timestamp()
        presented = SessionMetadata(device_id="d1", ip="1.1.1.1", user_agent="ua")

        assert session_store.is_valid(record, presented) is False

    def test_is_valid_rejects_inactive(self, session_store) -> None:
        record = create_session_record(ip="1.1.1.1", user_agent="ua", is_active=False)
        presented = SessionMetadata(device_id="d1", ip="1.1.1.1", user_agent="ua")

        assert session_store.is_valid(record, presented) is False

    @pytest.mark.asyncio
    async def test_deactivate_keeps_grace_record(
        self,
        session_store,
        kv_store,
        store_keys,
        clock,
        metadata,
    ) -> None:
        """비활성화는 짧은 유예 TTL 동안 is_active=False로 남긴다."""
        # Arrange
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)

        # Act
        deactivated = await session_store.deactivate("u1", "d1")

        # Assert
        assert [r.token_id for r in deactivated] == ["t1"]
        record = await session_store.get("u1", "d1", "t1")
        assert record is not None
        assert record.is_active is False
        assert kv_store.ttl(store_keys.session("u1", "d1", "t1")) == pytest.approx(DEACTIVATION_GRACE)
        assert await session_store.find_token_ids("u1", "d1") == []
        assert await session_store.validate("u1", "d1", metadata, token_id="t1") is False

        clock.advance(DEACTIVATION_GRACE + 1)
        assert await session_store.get("u1", "d1", "t1") is None

    @pytest.mark.asyncio
    async def test_remove(self, session_store, kv_store, store_keys, metadata) -> None:
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)

        await session_store.remove("u1", "d1", "t1")

        assert await session_store.get("u1", "d1", "t1") is None
        assert await kv_store.set_members(store_keys.user_sessions("u1")) == set()

    @pytest.mark.asyncio
    async def test_pointer_follows_latest_create(self, session_store, kv_store, store_keys, metadata) -> None:
        """기기의 현재 세션은 마지막으로 기록된 token_id."""
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)
        await session_store.create(user_id="u1", token_id="t2", metadata=metadata)

        assert await session_store.current_token_id("u1", "d1") == "t2"
        assert kv_store.ttl(store_keys.device_session("u1", "d1")) == pytest.approx(REFRESH_TTL)
        assert (await session_store.current("u1", "d1")).token_id == "t2"
        assert await session_store.validate("u1", "d1", metadata, token_id="t2") is True
        assert await session_store.validate("u1", "d1", metadata, token_id="t1") is False

    @pytest.mark.asyncio
    async def test_deactivate_selected_tokens(self, session_store, metadata) -> None:
        """token_ids를 주면 그 세션만 비활성화."""
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)
        await session_store.create(user_id="u1", token_id="t2", metadata=metadata)

        deactivated = await session_store.deactivate("u1", "d1", ["t1"])

        assert [r.token_id for r in deactivated] == ["t1"]
        assert await session_store.find_token_ids("u1", "d1") == ["t2"]
        assert (await session_store.get("u1", "d1", "t2")).is_active is True
        assert await session_store.deactivate("u1", "d1", ["t1"]) == []

    @pytest.mark.asyncio
    async def test_find_device_id(self, session_store, metadata) -> None:
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)

        assert await session_store.find_device_id("u1", "t1") == "d1"
        assert await session_store.find_device_id("u1", "t2") is None

    @pytest.mark.asyncio
    async def test_list_sessions_orders_and_prunes(
        self,
        session_store,
        kv_store,
        store_keys,
        clock,
        metadata,
    ) -> None:
        """최근 활동 순 정렬, 사라진 레코드의 인덱스 멤버 정리."""
        # Arrange
        await session_store.create(user_id="u1", token_id="t1", metadata=metadata)
        clock.advance(60)
        laptop = SessionMetadata(device_id="d2", ip="10.0.0.2", user_agent="laptop")
        await session_store.create(user_id="u1", token_id="t2", metadata=laptop)
        await kv_store.add_to_set(store_keys.user_sessions("u1"), "d3:gone", REFRESH_TTL)

        # Act
        sessions = await session_store.list_sessions("u1")

        # Assert
        assert [s.device_id for s in sessions] == ["d2", "d1"]
        assert "d3:gone" not in await kv_store.set_members(store_keys.user_sessions("u1"))


def test_session_json_round_trip() -> None:
    """저장 형식은 JSON이며 datetime은 ISO 문자열."""
    record = create_session_record()

    raw = serialize_session(record)

    assert json.loads(raw)["created_at"] == record.created_at.isoformat()
    assert deserialize_session(raw) == record
