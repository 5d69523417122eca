"""Device Metadata Enrichment."""

from apps.auth_session.infrastructure.device.user_agent_parser import UserAgentDeviceParser

__all__ = ["UserAgentDeviceParser"]
