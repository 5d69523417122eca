"""Me Controller."""

from fastapi import APIRouter, Depends

from apps.auth_session.application.session.queries import ListSessionsQueryService
from apps.auth_session.application.token.dto import AuthenticatedUser
from apps.auth_session.presentation.http.auth import get_current_user
from apps.auth_session.presentation.http.schemas import MeResponse, SuccessResponse
from apps.auth_session.setup.dependencies import get_list_sessions_query

router = APIRouter()


@router.get(
    "/me",
    response_model=SuccessResponse[MeResponse],
    summary="현재 사용자",
)
async def me(
    user: AuthenticatedUser = Depends(get_current_user),
    query: ListSessionsQueryService = Depends(get_list_sessions_query),
) -> SuccessResponse[MeResponse]:
    """인증된 사용자와 현재 기기."""
    sessions = await query.execute(user.user_id, current_token_id=user.token_id)
    device_id = next((s.device_id for s in sessions if s.current), None)
    return SuccessResponse(
        data=MeResponse(user_id=user.user_id, role=user.role, device_id=device_id)
    )
