"""
Gaming center info and retention DTOs
"""
from typing import Optional

from pydantic import Field

from lounge.schemas.common import CamelModel, EpochDatetime


class GamingCenterInfoUpdate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    address: str = ""
    phone: str = ""
    email: Optional[str] = Field(None, max_length=255)
    hours: str = ""
    timezone: Optional[str] = None


class GamingCenterInfoResponse(CamelModel):
    id: str
    name: str
    description: str
    address: str
    phone: str
    email: Optional[str] = None
    hours: str
    timezone: str
    updated_at: EpochDatetime


class RetentionConfigUpdate(CamelModel):
    booking_history_days: Optional[int] = Field(None, ge=1)
    activity_logs_days: Optional[int] = Field(None, ge=1)
    expenses_days: Optional[int] = Field(None, ge=1)


class RetentionConfigResponse(CamelModel):
    id: str
    booking_history_days: int
    activity_logs_days: int
    expenses_days: int
    updated_at: EpochDatetime


class RetentionCleanupResponse(CamelModel):
    success: bool = True
    booking_history_deleted: int
    activity_logs_deleted: int
    expenses_deleted: int
