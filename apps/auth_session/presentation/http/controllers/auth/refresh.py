"""Refresh Controller.

토큰 갱신 엔드포인트입니다.
"""

from fastapi import APIRouter, Cookie, Depends, Request, Response

from apps.auth_session.application.token.commands import RefreshTokensInteractor
from apps.auth_session.application.token.dto import RefreshTokensRequest
from apps.auth_session.domain.exceptions.auth import MissingTokenError
from apps.auth_session.presentation.http.auth.cookie_params import (
    REFRESH_COOKIE_NAME,
    set_auth_cookies,
)
from apps.auth_session.presentation.http.auth.metadata import build_session_metadata
from apps.auth_session.presentation.http.schemas import SuccessResponse, TokenData
from apps.auth_session.setup.config import Settings
from apps.auth_session.setup.dependencies import (
    get_app_settings,
    get_device_parser,
    get_refresh_tokens_interactor,
)

router = APIRouter()


@router.post(
    "/refresh",
    response_model=SuccessResponse[TokenData],
    summary="토큰 갱신",
)
async def refresh(
    request: Request,
    response: Response,
    refresh_token: str | None = Cookie(None, alias=REFRESH_COOKIE_NAME),
    interactor: RefreshTokensInteractor = Depends(get_refresh_tokens_interactor),
    settings: Settings = Depends(get_app_settings),
    device_parser=Depends(get_device_parser),
) -> SuccessResponse[TokenData]:
    """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

    이전 리프레시 토큰은 즉시 무효화됩니다 (단일 사용).
    실패 시 두 쿠키가 삭제되고 401이 반환됩니다.
    """
    if not refresh_token:
        raise MissingTokenError(REFRESH_COOKIE_NAME)

    result = await interactor.execute(
        RefreshTokensRequest(
            refresh_token=refresh_token,
            metadata=build_session_metadata(request, device_parser),
        )
    )

    set_auth_cookies(response, settings, result.tokens)

    return SuccessResponse(
        data=TokenData(
            access_expires_at=result.tokens.access_expires_at,
            refresh_expires_at=result.tokens.refresh_expires_at,
        )
    )
