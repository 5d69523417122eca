"""Sessions Controller.

활성 세션 조회 / 기기 세션 폐기 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, status

from apps.auth_session.application.session.commands import RevokeDeviceSessionInteractor
from apps.auth_session.application.session.queries import ListSessionsQueryService
from apps.auth_session.application.token.dto import AuthenticatedUser
from apps.auth_session.presentation.http.auth import get_current_user
from apps.auth_session.presentation.http.schemas import SessionResponse, SuccessResponse
from apps.auth_session.setup.dependencies import (
    get_list_sessions_query,
    get_revoke_device_session_interactor,
)

router = APIRouter()


@router.get(
    "/sessions",
    response_model=SuccessResponse[list[SessionResponse]],
    summary="활성 세션 목록",
)
async def list_sessions(
    user: AuthenticatedUser = Depends(get_current_user),
    query: ListSessionsQueryService = Depends(get_list_sessions_query),
) -> SuccessResponse[list[SessionResponse]]:
    """현재 사용자의 활성 세션 목록 (최근 활동 순)."""
    sessions = await query.execute(user.user_id, current_token_id=user.token_id)
    return SuccessResponse(data=[SessionResponse.model_validate(s) for s in sessions])


@router.delete(
    "/sessions/{device_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="기기 세션 강제 로그아웃",
)
async def revoke_session(
    device_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    interactor: RevokeDeviceSessionInteractor = Depends(get_revoke_device_session_interactor),
) -> None:
    """기기 세션을 폐기합니다. 세션이 없으면 404."""
    await interactor.execute(user.user_id, device_id)
