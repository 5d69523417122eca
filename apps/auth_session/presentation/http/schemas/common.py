"""Common HTTP Schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """성공 응답 래퍼."""

    success: bool = Field(default=True, description="성공 여부")
    data: DataT = Field(..., description="응답 데이터")


class ErrorDetail(BaseModel):
    """에러 상세."""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="사용자 안내 메시지")


class ErrorResponse(BaseModel):
    """에러 응답."""

    success: bool = Field(default=False, description="성공 여부")
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check 응답."""

    status: str = Field(..., description="상태")
    service: str = Field(..., description="서비스 이름")
