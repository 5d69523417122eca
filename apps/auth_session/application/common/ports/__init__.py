"""Application Ports (Gateway Interfaces)."""

from apps.auth_session.application.common.ports.key_value_store import KeyValueStore

__all__ = ["KeyValueStore"]
