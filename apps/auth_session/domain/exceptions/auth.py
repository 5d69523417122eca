"""토큰 / 인증 관련 도메인 예외."""

from apps.auth_session.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """서명, 형식, 클레임이 올바르지 않은 토큰."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(DomainError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class TokenTypeMismatchError(InvalidTokenError):
    """기대한 종류(access/refresh)와 다른 토큰."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Token type mismatch: expected {expected}, got {actual}")


class MissingTokenError(DomainError):
    """필수 인증 쿠키가 없음."""

    def __init__(self, cookie_name: str = "accessToken") -> None:
        self.cookie_name = cookie_name
        super().__init__(f"Missing token: {cookie_name}")


class UnauthorizedRotationError(DomainError):
    """리프레시 토큰 rotation 거부.

    재사용된 토큰, 메타데이터 불일치, 세션 없음 중 하나입니다.
    세션에 치명적이며 재시도하지 않습니다 (재로그인 필요).
    """

    def __init__(self, reason: str = "Refresh token rejected") -> None:
        self.reason = reason
        super().__init__(reason)


class SessionExpiredError(DomainError):
    """세션 만료. 클라이언트는 다시 로그인해야 합니다."""

    def __init__(self, reason: str = "Session expired") -> None:
        self.reason = reason
        super().__init__(reason)
