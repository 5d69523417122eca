"""IssueTokens Command.

로그인 성공 직후 토큰 쌍을 발급하는 Use Case입니다.
자격 증명 확인(비밀번호 / OAuth)은 호출자 책임입니다.

Architecture:
    - UseCase(지휘자): IssueTokensInteractor
    - Services(연주자): TokenLifecycleManager
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.auth_session.application.token.dto import IssueTokensRequest, TokenPair
    from apps.auth_session.application.token.services import TokenLifecycleManager


class IssueTokensInteractor:
    """토큰 발급 Interactor (지휘자)."""

    def __init__(self, lifecycle: "TokenLifecycleManager") -> None:
        self._lifecycle = lifecycle

    async def execute(self, request: "IssueTokensRequest") -> "TokenPair":
        """토큰 쌍을 발급합니다.

        같은 기기의 이전 세션은 폐기됩니다.
        """
        return await self._lifecycle.issue(
            user_id=request.user_id,
            role=request.role,
            metadata=request.metadata,
        )
