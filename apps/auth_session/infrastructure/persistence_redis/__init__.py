"""Redis Persistence Layer."""

from apps.auth_session.infrastructure.persistence_redis.adapters import RedisKeyValueStore
from apps.auth_session.infrastructure.persistence_redis.client import (
    build_async_client,
    open_redis,
)

__all__ = ["build_async_client", "open_redis", "RedisKeyValueStore"]
