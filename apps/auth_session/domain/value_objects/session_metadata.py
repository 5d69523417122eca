"""Session Metadata Value Objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """User-Agent에서 미리 해석된 기기 정보 (감사 기록용)."""

    device_type: str = "unknown"
    browser: str = "unknown"
    os: str = "unknown"


@dataclass(frozen=True, slots=True)
class SessionMetadata:
    """요청 단위 클라이언트 메타데이터.

    세션 생성 시 저장되고, rotation 시 저장된 값과 비교됩니다.
    """

    device_id: str
    ip: str | None = None
    user_agent: str | None = None
    device: DeviceInfo | None = None
