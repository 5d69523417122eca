"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
Key-Value 저장소는 TTL을 흉내 내는 인메모리 구현으로 대체합니다.
"""

from __future__ import annotations

import time

import pytest

from apps.auth_session.application.common.keys import StoreKeys
from apps.auth_session.application.session.services import SessionStore
from apps.auth_session.application.token.services import TokenLifecycleManager
from apps.auth_session.domain.value_objects.session_metadata import (
    DeviceInfo,
    SessionMetadata,
)
from apps.auth_session.infrastructure.security import JwtTokenCodec
from apps.auth_session.tests.unit.factories import (
    ACCESS_SECRET,
    ACCESS_TTL,
    DEACTIVATION_GRACE,
    REFRESH_SECRET,
    REFRESH_TTL,
    RENEWAL_WINDOW,
    SESSION_MAX_AGE,
    FakeClock,
    InMemoryKeyValueStore,
)


# ============================================================
# Infrastructure Fixtures
# ============================================================


@pytest.fixture
def clock() -> FakeClock:
    """현재 시각에서 시작하는 수동 시계."""
    return FakeClock(time.time())


@pytest.fixture
def kv_store(clock: FakeClock) -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore(clock)


@pytest.fixture
def store_keys() -> StoreKeys:
    return StoreKeys()


@pytest.fixture
def codec() -> JwtTokenCodec:
    return JwtTokenCodec(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


# ============================================================
# Service Fixtures
# ============================================================


@pytest.fixture
def session_store(
    kv_store: InMemoryKeyValueStore,
    store_keys: StoreKeys,
    clock: FakeClock,
) -> SessionStore:
    return SessionStore(
        kv_store,
        ttl_seconds=REFRESH_TTL,
        max_age_seconds=SESSION_MAX_AGE,
        deactivation_grace_seconds=DEACTIVATION_GRACE,
        keys=store_keys,
        clock=clock,
    )


@pytest.fixture
def lifecycle(
    codec: JwtTokenCodec,
    kv_store: InMemoryKeyValueStore,
    session_store: SessionStore,
    store_keys: StoreKeys,
    clock: FakeClock,
) -> TokenLifecycleManager:
    return TokenLifecycleManager(
        codec,
        kv_store,
        session_store,
        access_ttl_seconds=ACCESS_TTL,
        refresh_ttl_seconds=REFRESH_TTL,
        renewal_window_seconds=RENEWAL_WINDOW,
        keys=store_keys,
        clock=clock,
    )


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def user_id() -> str:
    return "u1"


@pytest.fixture
def metadata() -> SessionMetadata:
    """기기 d1의 요청 메타데이터."""
    return SessionMetadata(
        device_id="d1",
        ip="203.0.113.7",
        user_agent="Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148 Safari/604.1",
        device=DeviceInfo(device_type="mobile", browser="safari", os="ios"),
    )
