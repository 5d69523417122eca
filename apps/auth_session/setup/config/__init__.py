"""Configuration."""

from apps.auth_session.setup.config.settings import Settings, ensure_configured, get_settings

__all__ = ["Settings", "ensure_configured", "get_settings"]
