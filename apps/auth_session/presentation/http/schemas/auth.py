"""Auth HTTP Schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from apps.auth_session.domain.enums.user_role import UserRole


class TokenData(BaseModel):
    """토큰 갱신 응답 데이터 (토큰 자체는 쿠키로 전달)."""

    access_expires_at: int = Field(..., description="Access 토큰 만료 (Unix timestamp)")
    refresh_expires_at: int = Field(..., description="Refresh 토큰 만료 (Unix timestamp)")


class LogoutData(BaseModel):
    """로그아웃 응답 데이터."""

    message: str = Field(default="Successfully logged out", description="결과 메시지")


class LogoutAllData(BaseModel):
    """전체 로그아웃 응답 데이터."""

    revoked_sessions: int = Field(..., description="폐기된 기기 세션 수")


class DeviceResponse(BaseModel):
    """기기 정보."""

    device_type: str
    browser: str
    os: str

    model_config = {"from_attributes": True}


class SessionResponse(BaseModel):
    """활성 세션 항목."""

    device_id: str = Field(..., description="기기 ID")
    ip: str | None = Field(None, description="로그인 IP")
    user_agent: str | None = Field(None, description="User-Agent")
    created_at: datetime = Field(..., description="최초 로그인 시각")
    last_active_at: datetime = Field(..., description="마지막 활동 시각")
    device: DeviceResponse | None = Field(None, description="기기 정보")
    current: bool = Field(default=False, description="현재 요청의 세션 여부")

    model_config = {"from_attributes": True}


class MeResponse(BaseModel):
    """현재 사용자."""

    user_id: str = Field(..., description="사용자 ID")
    role: UserRole = Field(..., description="권한")
    device_id: str | None = Field(None, description="현재 기기 ID")
