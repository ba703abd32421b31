"""
Expense DTOs
"""
from typing import Optional

from pydantic import Field

from lounge.schemas.common import CamelModel, EpochDatetime


class ExpenseCreate(CamelModel):
    category: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    amount: str
    date: EpochDatetime


class ExpenseUpdate(CamelModel):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    amount: Optional[str] = None
    date: Optional[EpochDatetime] = None


class ExpenseResponse(CamelModel):
    id: str
    category: str
    description: str
    amount: str
    date: EpochDatetime
    created_at: EpochDatetime
