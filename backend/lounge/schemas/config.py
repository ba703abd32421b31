"""
Device, pricing and happy hours DTOs
"""
from typing import List, Optional

from pydantic import Field

from lounge.schemas.common import CamelModel

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class DeviceConfigCreate(CamelModel):
    """Create or replace the seats of a category"""
    category: str = Field(..., min_length=1, max_length=50)
    count: int = Field(..., ge=0)
    seats: List[str] = []


class DeviceConfigResponse(CamelModel):
    id: str
    category: str
    count: int
    seats: List[str] = []


class PricingEntry(CamelModel):
    duration: str = Field(..., min_length=1, max_length=50)
    price: str
    person_count: int = Field(1, ge=1)


class PricingReplaceRequest(CamelModel):
    """Replaces every price row of one category"""
    category: str = Field(..., min_length=1, max_length=50)
    configs: List[PricingEntry]


class PricingResponse(CamelModel):
    id: str
    category: str
    duration: str
    price: str
    person_count: int


class HappyHoursEntry(CamelModel):
    start_time: str = Field(..., pattern=HHMM_PATTERN)
    end_time: str = Field(..., pattern=HHMM_PATTERN)
    enabled: bool = True


class HappyHoursReplaceRequest(CamelModel):
    category: str = Field(..., min_length=1, max_length=50)
    configs: List[HappyHoursEntry]


class HappyHoursResponse(CamelModel):
    id: str
    category: str
    start_time: str
    end_time: str
    enabled: bool


class HappyHoursActiveResponse(CamelModel):
    active: bool
    category: Optional[str] = None
