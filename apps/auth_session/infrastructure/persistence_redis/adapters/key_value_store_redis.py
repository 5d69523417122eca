"""Redis Key-Value Store.

KeyValueStore 포트의 구현체입니다.
연결 실패 / 타임아웃은 StoreUnavailableError로 변환합니다.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from redis.exceptions import ConnectionError, TimeoutError

from apps.auth_session.application.common.exceptions import StoreUnavailableError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (ConnectionError, TimeoutError) as e:
        logger.error(
            "Redis operation failed",
            extra={"operation": operation, "error": str(e)},
        )
        raise StoreUnavailableError(operation, str(e)) from e


class RedisKeyValueStore:
    """Redis 기반 Key-Value 저장소.

    KeyValueStore 구현체.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def get(self, key: str) -> str | None:
        with _store_errors("get"):
            return await self._redis.get(key)

    async def set(
        self,
        key: str,
        value: str,
        ttl_seconds: int,
        *,
        only_if_exists: bool = False,
    ) -> bool:
        with _store_errors("set"):
            result = await self._redis.set(key, value, ex=ttl_seconds, xx=only_if_exists)
        return bool(result)

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        with _store_errors("delete"):
            return int(await self._redis.delete(*keys))

    async def exists(self, key: str) -> bool:
        with _store_errors("exists"):
            return await self._redis.exists(key) > 0

    async def keys_with_prefix(self, prefix: str) -> list[str]:
        """SCAN으로 prefix 키 조회 (KEYS 명령은 쓰지 않음)."""
        with _store_errors("scan"):
            return [key async for key in self._redis.scan_iter(match=f"{prefix}*")]

    async def add_to_set(self, key: str, member: str, ttl_seconds: int) -> None:
        with _store_errors("sadd"):
            await self._redis.sadd(key, member)
            await self._redis.expire(key, ttl_seconds)

    async def remove_from_set(self, key: str, *members: str) -> None:
        if not members:
            return
        with _store_errors("srem"):
            await self._redis.srem(key, *members)

    async def set_members(self, key: str) -> set[str]:
        with _store_errors("smembers"):
            return set(await self._redis.smembers(key))

    async def ping(self) -> bool:
        with _store_errors("ping"):
            return bool(await self._redis.ping())
