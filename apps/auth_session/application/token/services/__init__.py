"""Token Application Services.

토큰 발급, 회전, 폐기 비즈니스 로직을 캡슐화합니다.
"""

from apps.auth_session.application.token.services.token_lifecycle import (
    TokenLifecycleManager,
)

__all__ = ["TokenLifecycleManager"]
