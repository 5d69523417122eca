"""SessionRecord 엔티티 단위 테스트."""

from datetime import datetime, timedelta, timezone

from apps.auth_session.domain.entities.session_record import SessionRecord
from apps.auth_session.domain.value_objects.session_metadata import (
    DeviceInfo,
    SessionMetadata,
)


class TestSessionRecord:
    """SessionRecord 테스트."""

    def _metadata(self, **overrides) -> SessionMetadata:
        values = {
            "device_id": "d1",
            "ip": "10.0.0.1",
            "user_agent": "agent/1.0",
            "device": DeviceInfo(device_type="desktop", browser="chrome", os="macos"),
        }
        values.update(overrides)
        return SessionMetadata(**values)

    def test_open_copies_metadata(self) -> None:
        """메타데이터로 활성 레코드 생성."""
        # Arrange
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)

        # Act
        record = SessionRecord.open(
            user_id="u1", token_id="t1", metadata=self._metadata(), now=now
        )

        # Assert
        assert record.device_id == "d1"
        assert record.ip == "10.0.0.1"
        assert record.user_agent == "agent/1.0"
        assert record.device.browser == "chrome"
        assert record.created_at == now
        assert record.last_active_at == now
        assert record.is_active is True
        assert record.index_member == "d1:t1"

    def test_open_carries_created_at(self) -> None:
        """rotation 시 최초 로그인 시각 유지."""
        started = datetime(2024, 1, 1, tzinfo=timezone.utc)
        now = started + timedelta(days=3)

        record = SessionRecord.open(
            user_id="u1",
            token_id="t2",
            metadata=self._metadata(),
            now=now,
            created_at=started,
        )

        assert record.created_at == started
        assert record.last_active_at == now
        assert record.age_seconds(now) == 3 * 24 * 60 * 60

    def test_is_bound_to(self) -> None:
        """ip, user-agent 모두 일치해야 한다."""
        now = datetime.now(timezone.utc)
        record = SessionRecord.open(
            user_id="u1", token_id="t1", metadata=self._metadata(), now=now
        )

        assert record.is_bound_to(self._metadata())
        assert not record.is_bound_to(self._metadata(ip="10.0.0.2"))
        assert not record.is_bound_to(self._metadata(user_agent="agent/2.0"))

    def test_deactivated_returns_copy(self) -> None:
        """비활성화는 원본을 바꾸지 않는다."""
        now = datetime.now(timezone.utc)
        record = SessionRecord.open(
            user_id="u1", token_id="t1", metadata=self._metadata(), now=now
        )

        later = now + timedelta(minutes=1)
        inactive = record.deactivated(later)

        assert record.is_active is True
        assert inactive.is_active is False
        assert inactive.last_active_at == later
        assert inactive.token_id == record.token_id
