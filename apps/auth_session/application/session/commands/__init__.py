"""Session Commands."""

from apps.auth_session.application.session.commands.revoke_all import (
    RevokeAllSessionsInteractor,
)
from apps.auth_session.application.session.commands.revoke_device import (
    RevokeDeviceSessionInteractor,
)

__all__ = ["RevokeAllSessionsInteractor", "RevokeDeviceSessionInteractor"]
