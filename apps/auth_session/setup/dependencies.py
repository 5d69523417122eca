"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
Redis 클라이언트는 lifespan에서 열어 app.state에 보관합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from apps.auth_session.setup.config import Settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.auth_session.application.common.keys import StoreKeys
    from apps.auth_session.application.common.ports import KeyValueStore
    from apps.auth_session.application.session.services import SessionStore
    from apps.auth_session.application.token.ports import TokenCodec
    from apps.auth_session.application.token.services import TokenLifecycleManager


# ============================================================
# Infrastructure Dependencies
# ============================================================


def get_app_settings(request: Request) -> Settings:
    """create_app에 전달된 Settings 제공자."""
    return request.app.state.settings


def get_redis(request: Request) -> "aioredis.Redis":
    """lifespan에서 연 Redis 클라이언트 제공자."""
    return request.app.state.redis


def get_kv_store(redis: "aioredis.Redis" = Depends(get_redis)) -> "KeyValueStore":
    """KeyValueStore 제공자."""
    from apps.auth_session.infrastructure.persistence_redis import RedisKeyValueStore

    return RedisKeyValueStore(redis)


def get_store_keys(settings: Settings = Depends(get_app_settings)) -> "StoreKeys":
    """키 생성기 제공자."""
    from apps.auth_session.application.common.keys import StoreKeys

    return StoreKeys(settings.redis_key_prefix)


def get_token_codec(settings: Settings = Depends(get_app_settings)) -> "TokenCodec":
    """TokenCodec 제공자."""
    from apps.auth_session.infrastructure.security import JwtTokenCodec

    return JwtTokenCodec(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


def get_device_parser():
    """User-Agent 해석기 제공자."""
    from apps.auth_session.infrastructure.device import UserAgentDeviceParser

    return UserAgentDeviceParser()


# ============================================================
# Service Dependencies (연주자)
# ============================================================


def get_session_store(
    kv_store: "KeyValueStore" = Depends(get_kv_store),
    keys: "StoreKeys" = Depends(get_store_keys),
    settings: Settings = Depends(get_app_settings),
) -> "SessionStore":
    """SessionStore 제공자."""
    from apps.auth_session.application.session.services import SessionStore

    return SessionStore(
        kv_store,
        ttl_seconds=settings.refresh_token_ttl_seconds,
        max_age_seconds=settings.session_max_age_seconds,
        deactivation_grace_seconds=settings.session_deactivation_grace_seconds,
        strict_client_binding=settings.strict_client_binding,
        keys=keys,
    )


def get_token_lifecycle(
    codec: "TokenCodec" = Depends(get_token_codec),
    kv_store: "KeyValueStore" = Depends(get_kv_store),
    session_store: "SessionStore" = Depends(get_session_store),
    keys: "StoreKeys" = Depends(get_store_keys),
    settings: Settings = Depends(get_app_settings),
) -> "TokenLifecycleManager":
    """TokenLifecycleManager 제공자."""
    from apps.auth_session.application.token.services import TokenLifecycleManager

    return TokenLifecycleManager(
        codec,
        kv_store,
        session_store,
        access_ttl_seconds=settings.access_token_ttl_seconds,
        refresh_ttl_seconds=settings.refresh_token_ttl_seconds,
        renewal_window_seconds=settings.sliding_renewal_window_seconds,
        keys=keys,
    )


# ============================================================
# UseCase Dependencies (지휘자)
# ============================================================


def get_issue_tokens_interactor(
    lifecycle: "TokenLifecycleManager" = Depends(get_token_lifecycle),
):
    """IssueTokensInteractor 제공자."""
    from apps.auth_session.application.token.commands import IssueTokensInteractor

    return IssueTokensInteractor(lifecycle)


def get_refresh_tokens_interactor(
    lifecycle: "TokenLifecycleManager" = Depends(get_token_lifecycle),
):
    """RefreshTokensInteractor 제공자."""
    from apps.auth_session.application.token.commands import RefreshTokensInteractor

    return RefreshTokensInteractor(lifecycle)


def get_logout_interactor(
    lifecycle: "TokenLifecycleManager" = Depends(get_token_lifecycle),
):
    """LogoutInteractor 제공자."""
    from apps.auth_session.application.token.commands import LogoutInteractor

    return LogoutInteractor(lifecycle)


def get_revoke_device_session_interactor(
    lifecycle: "TokenLifecycleManager" = Depends(get_token_lifecycle),
):
    """RevokeDeviceSessionInteractor 제공자."""
    from apps.auth_session.application.session.commands import RevokeDeviceSessionInteractor

    return RevokeDeviceSessionInteractor(lifecycle)


def get_revoke_all_sessions_interactor(
    lifecycle: "TokenLifecycleManager" = Depends(get_token_lifecycle),
):
    """RevokeAllSessionsInteractor 제공자."""
    from apps.auth_session.application.session.commands import RevokeAllSessionsInteractor

    return RevokeAllSessionsInteractor(lifecycle)


def get_list_sessions_query(
    session_store: "SessionStore" = Depends(get_session_store),
):
    """ListSessionsQueryService 제공자."""
    from apps.auth_session.application.session.queries import ListSessionsQueryService

    return ListSessionsQueryService(session_store)
