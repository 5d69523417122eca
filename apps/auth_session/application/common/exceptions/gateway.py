"""Gateway Exceptions."""

from __future__ import annotations

from apps.auth_session.application.common.exceptions.base import ApplicationError


class StoreUnavailableError(ApplicationError):
    """Key-Value 저장소에 접근할 수 없음.

    "유효하지 않음"이 아니라 "판단할 수 없음"입니다.
    인증 실패로 취급해 사용자를 로그아웃시키면 안 됩니다.
    """

    def __init__(self, operation: str, reason: str = "") -> None:
        self.operation = operation
        self.reason = reason
        message = f"Key-value store unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
