"""Token Commands.

토큰 관련 유스케이스(Command)입니다.
"""

from apps.auth_session.application.token.commands.issue import IssueTokensInteractor
from apps.auth_session.application.token.commands.logout import LogoutInteractor
from apps.auth_session.application.token.commands.refresh import RefreshTokensInteractor

__all__ = ["IssueTokensInteractor", "LogoutInteractor", "RefreshTokensInteractor"]
