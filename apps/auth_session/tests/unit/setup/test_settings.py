"""Settings 단위 테스트."""

import pytest
from pydantic import ValidationError

from apps.auth_session.application.common.exceptions import ConfigurationError
from apps.auth_session.setup.config import Settings, ensure_configured


def make_settings(**overrides) -> Settings:
    values = {
        "access_token_secret": "a-secret",
        "refresh_token_secret": "r-secret",
    }
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    """환경변수 / 기간 값 로딩 테스트."""

    def test_defaults(self) -> None:
        settings = make_settings()

        assert settings.access_token_ttl_seconds == 30 * 60
        assert settings.refresh_token_ttl_seconds == 7 * 24 * 60 * 60
        assert settings.sliding_renewal_window_seconds == 5 * 60
        assert settings.session_deactivation_grace_seconds == 30

    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("AUTH_ACCESS_TOKEN_TTL", "15m")
        monkeypatch.setenv("AUTH_STRICT_CLIENT_BINDING", "false")

        settings = make_settings()

        assert settings.access_token_ttl_seconds == 15 * 60
        assert settings.strict_client_binding is False

    @pytest.mark.parametrize("value", ["", "0m", "30x", "-5m", "m"])
    def test_invalid_duration(self, value: str) -> None:
        """잘못된 기간 문자열은 기본값으로 대체하지 않고 실패한다."""
        with pytest.raises(ValidationError):
            make_settings(access_token_ttl=value)

    def test_empty_cookie_domain(self) -> None:
        assert make_settings(cookie_domain="").cookie_domain is None

    def test_cors_origin_list(self) -> None:
        settings = make_settings(cors_origins="https://a.example, ,https://b.example")

        assert settings.cors_origin_list == ["https://a.example", "https://b.example"]


class TestEnsureConfigured:
    """시작 시점 설정 검사 테스트."""

    def test_valid(self) -> None:
        ensure_configured(make_settings())

    def test_missing_secrets(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ensure_configured(make_settings(access_token_secret="", refresh_token_secret=" "))

        assert exc_info.value.problems == [
            "AUTH_ACCESS_TOKEN_SECRET is required",
            "AUTH_REFRESH_TOKEN_SECRET is required",
        ]

    def test_access_not_shorter_than_refresh(self) -> None:
        with pytest.raises(ConfigurationError):
            ensure_configured(make_settings(access_token_ttl="7d", refresh_token_ttl="7d"))

    def test_window_not_shorter_than_access(self) -> None:
        with pytest.raises(ConfigurationError):
            ensure_configured(make_settings(access_token_ttl="5m", sliding_renewal_window="5m"))
