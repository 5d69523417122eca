"""Redis Client Lifecycle.

세션/토큰 상태 저장용 Redis 클라이언트를 만들고 닫습니다.
모듈 전역 클라이언트는 두지 않습니다. 애플리케이션 lifespan이 열고 닫습니다.

일시적 장애(ConnectionError, TimeoutError)는 지수 백오프로 3회까지 재시도하고,
그래도 실패하면 어댑터가 StoreUnavailableError로 바꿉니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, RedisError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

MAX_RETRIES = 3

# 인증 경로의 모든 요청이 저장소를 왕복하므로 timeout은 짧게 유지
CONNECTION_OPTIONS: dict[str, Any] = {
    "encoding": "utf-8",
    "decode_responses": True,
    "health_check_interval": 30,
    "socket_keepalive": True,
    "socket_connect_timeout": 5.0,
    "socket_timeout": 5.0,
    "max_connections": 50,
    "retry_on_error": [ConnectionError, TimeoutError],
}


def build_async_client(redis_url: str, **overrides: Any) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성.

    Args:
        redis_url: redis://host:port/db
        overrides: CONNECTION_OPTIONS 중 바꿀 값 (예: max_connections)
    """
    import redis.asyncio as aioredis

    options = {**CONNECTION_OPTIONS, **overrides}
    return aioredis.from_url(
        redis_url,
        retry=Retry(ExponentialBackoff(), retries=MAX_RETRIES),
        **options,
    )


@asynccontextmanager
async def open_redis(redis_url: str) -> AsyncIterator["aioredis.Redis"]:
    """Redis 클라이언트를 열고, 블록이 끝나면 반드시 닫습니다.

    시작 시 연결을 확인하지만 실패해도 프로세스는 계속 뜹니다.
    (readiness probe가 503을 반환)
    """
    client = build_async_client(redis_url)
    try:
        try:
            await client.ping()
            logger.info("Redis connected")
        except RedisError as e:
            logger.warning("Redis not reachable at startup", extra={"error": str(e)})
        yield client
    finally:
        await client.aclose()
        logger.info("Redis connection closed")
