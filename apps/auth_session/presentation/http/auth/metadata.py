"""Request Metadata.

HTTP 요청에서 세션 메타데이터(device_id, ip, user-agent)를 추출합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from apps.auth_session.domain.value_objects.session_metadata import (
    DeviceInfo,
    SessionMetadata,
)

if TYPE_CHECKING:
    from fastapi import Request

DEVICE_ID_HEADER = "X-Device-Id"
DEFAULT_DEVICE_ID = "default"
MAX_DEVICE_ID_LENGTH = 128


class DeviceInfoParser(Protocol):
    """User-Agent → DeviceInfo."""

    def parse(self, user_agent: str | None) -> DeviceInfo: ...


def get_client_ip(request: "Request") -> str | None:
    """클라이언트 IP.

    X-Forwarded-For의 첫 번째 값, 없으면 소켓 peer 주소.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client is not None:
        return request.client.host
    return None


def get_device_id(request: "Request") -> str:
    """요청 헤더의 기기 ID. 키 구분자(:)는 허용하지 않습니다."""
    raw = (request.headers.get(DEVICE_ID_HEADER) or "").strip()
    device_id = raw.replace(":", "-")[:MAX_DEVICE_ID_LENGTH]
    return device_id or DEFAULT_DEVICE_ID


def build_session_metadata(
    request: "Request",
    device_parser: DeviceInfoParser | None = None,
) -> SessionMetadata:
    """요청 → SessionMetadata."""
    user_agent = request.headers.get("User-Agent")
    return SessionMetadata(
        device_id=get_device_id(request),
        ip=get_client_ip(request),
        user_agent=user_agent,
        device=device_parser.parse(user_agent) if device_parser else None,
    )
