"""세션 관련 도메인 예외."""

from apps.auth_session.domain.exceptions.base import DomainError


class SessionNotFoundError(DomainError):
    """해당 기기의 활성 세션이 없음."""

    def __init__(self, device_id: str) -> None:
        self.device_id = device_id
        super().__init__(f"Session not found for device: {device_id}")
