"""Auth Session API Application Entry Point.

Clean Architecture 기반 세션/토큰 생명주기 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.auth_session.infrastructure.persistence_redis import open_redis
from apps.auth_session.presentation.http.controllers import root_router
from apps.auth_session.presentation.http.errors import register_exception_handlers
from apps.auth_session.setup.config import Settings, ensure_configured, get_settings
from apps.auth_session.setup.logging import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "https://fit-date.co.kr",
    "https://www.fit-date.co.kr",
    "http://localhost:3000",
    "http://localhost:5173",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리.

    Redis 클라이언트는 여기서 열고, 종료 시 반드시 닫습니다.
    """
    settings: Settings = app.state.settings
    logger.info("Starting Auth Session API", extra={"environment": settings.environment})

    async with open_redis(settings.redis_url) as redis:
        app.state.redis = redis
        yield

    logger.info("Shutting down Auth Session API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리.

    Raises:
        ConfigurationError: secret 누락 또는 TTL 설정 모순
    """
    settings = settings or get_settings()

    # 로깅 설정
    setup_logging(settings)

    # 설정 검사 (요청 시점이 아니라 시작 시점에 실패)
    ensure_configured(settings)

    app = FastAPI(
        title=settings.app_name,
        description="세션 / 토큰 생명주기 서비스 (Clean Architecture)",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or DEFAULT_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.auth_session.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
