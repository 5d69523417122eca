"""Application Settings.

env_prefix="AUTH_" 사용으로 AUTH_ACCESS_TOKEN_SECRET 등의 환경변수 매핑.
기간 값은 "30m", "7d" 같은 문자열이며 로드 시점에 검증됩니다.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.auth_session.application.common.exceptions import ConfigurationError
from apps.auth_session.domain.value_objects.duration import parse_duration


class Settings(BaseSettings):
    """애플리케이션 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        AUTH_ACCESS_TOKEN_SECRET → access_token_secret
        AUTH_ACCESS_TOKEN_TTL=30m → access_token_ttl
    """

    # Service
    app_name: str = "Auth Session API"
    service_name: str = "auth-session-api"
    service_version: str = "1.0.0"
    environment: str = "local"
    api_v1_prefix: str = "/api/v1"

    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_key_prefix: str = ""

    # JWT
    access_token_secret: str = ""
    refresh_token_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "api.fit-date.co.kr/api/v1/auth"
    jwt_audience: str = "fit-date-api"

    # Token / Session lifetimes
    access_token_ttl: str = "30m"
    refresh_token_ttl: str = "7d"
    sliding_renewal_window: str = "5m"
    session_max_age: str = "30d"
    session_deactivation_grace: str = "30s"
    strict_client_binding: bool = True

    # Cookie
    cookie_domain: Optional[str] = ".fit-date.co.kr"
    cookie_secure: bool = True
    cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    # CORS (콤마 구분)
    cors_origins: str = ""

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator(
        "access_token_ttl",
        "refresh_token_ttl",
        "sliding_renewal_window",
        "session_max_age",
        "session_deactivation_grace",
    )
    @classmethod
    def _validate_duration(cls, value: str) -> str:
        """기간 문법 검증 (잘못된 값은 기본값으로 대체하지 않음)."""
        parse_duration(value)
        return value

    @field_validator("cookie_domain", mode="before")
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환 (host-only 쿠키)."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def access_token_ttl_seconds(self) -> int:
        return parse_duration(self.access_token_ttl)

    @property
    def refresh_token_ttl_seconds(self) -> int:
        return parse_duration(self.refresh_token_ttl)

    @property
    def sliding_renewal_window_seconds(self) -> int:
        return parse_duration(self.sliding_renewal_window)

    @property
    def session_max_age_seconds(self) -> int:
        return parse_duration(self.session_max_age)

    @property
    def session_deactivation_grace_seconds(self) -> int:
        return parse_duration(self.session_deactivation_grace)

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def ensure_configured(settings: Settings) -> None:
    """시작 시점 설정 검사.

    Raises:
        ConfigurationError: secret 누락, 또는 TTL 순서가 모순될 때
    """
    problems: list[str] = []

    if not settings.access_token_secret.strip():
        problems.append("AUTH_ACCESS_TOKEN_SECRET is required")
    if not settings.refresh_token_secret.strip():
        problems.append("AUTH_REFRESH_TOKEN_SECRET is required")

    if settings.access_token_ttl_seconds >= settings.refresh_token_ttl_seconds:
        problems.append("access token TTL must be shorter than refresh token TTL")
    if settings.sliding_renewal_window_seconds >= settings.access_token_ttl_seconds:
        problems.append("sliding renewal window must be shorter than access token TTL")

    if problems:
        raise ConfigurationError(problems)


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()
