"""Health Controller.

Liveness / Readiness 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from apps.auth_session.application.common.ports import KeyValueStore
from apps.auth_session.presentation.http.errors.handlers import error_body
from apps.auth_session.presentation.http.schemas import HealthResponse
from apps.auth_session.setup.dependencies import get_kv_store

SERVICE_NAME = "auth-session-api"

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Liveness")
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", service=SERVICE_NAME)


@router.get("/ready", response_model=HealthResponse, summary="Readiness")
async def ready(kv_store: KeyValueStore = Depends(get_kv_store)):
    """Key-Value 저장소 연결 확인. 실패 시 503."""
    if not await kv_store.ping():
        return JSONResponse(
            status_code=503,
            content=error_body("STORE_UNAVAILABLE", "Key-value store not ready"),
        )
    return HealthResponse(status="ready", service=SERVICE_NAME)
