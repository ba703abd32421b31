"""
Food item DTOs
"""
from typing import Literal, Optional

from pydantic import Field

from lounge.schemas.common import CamelModel, EpochDatetime


class FoodItemBase(CamelModel):
    """Food item fields"""
    name: str = Field(..., min_length=1, max_length=100)
    price: str
    cost_price: Optional[str] = None
    current_stock: int = Field(0, ge=0)
    min_stock_level: int = Field(10, ge=0)
    in_inventory: bool = False
    category: str = Field("trackable", max_length=50)
    supplier: Optional[str] = Field(None, max_length=200)
    expiry_date: Optional[EpochDatetime] = None


class FoodItemCreate(FoodItemBase):
    pass


class FoodItemUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[str] = None
    cost_price: Optional[str] = None
    current_stock: Optional[int] = Field(None, ge=0)
    min_stock_level: Optional[int] = Field(None, ge=0)
    in_inventory: Optional[bool] = None
    category: Optional[str] = Field(None, max_length=50)
    supplier: Optional[str] = Field(None, max_length=200)
    expiry_date: Optional[EpochDatetime] = None


class FoodItemResponse(FoodItemBase):
    id: str


class StockAdjust(CamelModel):
    """Stock adjustment, subtraction never goes below zero"""
    quantity: int = Field(..., ge=0)
    type: Literal["add", "subtract"]
