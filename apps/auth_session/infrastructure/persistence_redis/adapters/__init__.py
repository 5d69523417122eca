"""Redis Adapters."""

from apps.auth_session.infrastructure.persistence_redis.adapters.key_value_store_redis import (
    RedisKeyValueStore,
)

__all__ = ["RedisKeyValueStore"]
