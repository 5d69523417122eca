"""Configuration Exceptions."""

from __future__ import annotations

from apps.auth_session.application.common.exceptions.base import ApplicationError


class ConfigurationError(ApplicationError):
    """필수 설정 누락 또는 모순. 프로세스 시작 시점에만 발생합니다."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))
