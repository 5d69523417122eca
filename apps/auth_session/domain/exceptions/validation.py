"""Validation 관련 도메인 예외."""

from apps.auth_session.domain.exceptions.base import DomainError


class InvalidDurationError(DomainError, ValueError):
    """해석할 수 없는 기간 문자열 ("30m", "7d" 형식이 아님)."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid duration: {value!r}")
