"""
Booking DTOs
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from lounge.schemas.common import CamelModel, EpochDatetime

BookingStatus = Literal["upcoming", "running", "paused", "completed", "expired"]
PaymentStatus = Literal["unpaid", "pending", "paid"]


class BookingFields(CamelModel):
    """Optional booking fields shared by create and response"""
    booking_code: Optional[str] = Field(None, max_length=50)
    group_id: Optional[str] = None
    group_code: Optional[str] = None
    whatsapp_number: Optional[str] = None
    booking_type: List[str] = []
    paused_remaining_time: Optional[int] = None
    person_count: int = 1
    payment_method: Optional[str] = None
    cash_amount: Optional[str] = None
    upi_amount: Optional[str] = None
    payment_status: PaymentStatus = "unpaid"
    last_payment_action: Optional[Dict[str, Any]] = None
    food_orders: List[Dict[str, Any]] = []
    original_price: Optional[str] = None
    discount_applied: Optional[str] = None
    bonus_hours_applied: Optional[str] = None
    promotion_details: Optional[Dict[str, Any]] = None
    is_promotional_discount: Optional[bool] = False
    is_promotional_bonus: Optional[bool] = False
    manual_discount_percentage: Optional[int] = None
    manual_free_hours: Optional[str] = None
    discount: Optional[str] = None
    bonus: Optional[str] = None


class BookingCreate(BookingFields):
    """Create booking request"""
    category: str = Field(..., min_length=1, max_length=50)
    seat_number: int
    seat_name: str = Field(..., min_length=1, max_length=50)
    customer_name: str = Field(..., min_length=1, max_length=200)
    start_time: EpochDatetime
    end_time: EpochDatetime
    price: str
    status: BookingStatus


class BookingUpdate(CamelModel):
    """Partial booking update; only fields present in the body are written"""
    booking_code: Optional[str] = None
    group_id: Optional[str] = None
    group_code: Optional[str] = None
    category: Optional[str] = None
    seat_number: Optional[int] = None
    seat_name: Optional[str] = None
    customer_name: Optional[str] = None
    whatsapp_number: Optional[str] = None
    start_time: Optional[EpochDatetime] = None
    end_time: Optional[EpochDatetime] = None
    price: Optional[str] = None
    status: Optional[BookingStatus] = None
    booking_type: Optional[List[str]] = None
    paused_remaining_time: Optional[int] = None
    person_count: Optional[int] = None
    payment_method: Optional[str] = None
    cash_amount: Optional[str] = None
    upi_amount: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    last_payment_action: Optional[Dict[str, Any]] = None
    food_orders: Optional[List[Dict[str, Any]]] = None
    original_price: Optional[str] = None
    discount_applied: Optional[str] = None
    bonus_hours_applied: Optional[str] = None
    promotion_details: Optional[Dict[str, Any]] = None
    is_promotional_discount: Optional[bool] = None
    is_promotional_bonus: Optional[bool] = None
    manual_discount_percentage: Optional[int] = None
    manual_free_hours: Optional[str] = None
    discount: Optional[str] = None
    bonus: Optional[str] = None


class BookingResponse(BookingFields):
    """Booking as returned to clients"""
    id: str
    category: str
    seat_number: int
    seat_name: str
    customer_name: str
    start_time: EpochDatetime
    end_time: EpochDatetime
    price: str
    status: str
    payment_status: str = "unpaid"
    food_orders: List[Dict[str, Any]] = []
    created_at: EpochDatetime


class BookingHistoryResponse(BookingResponse):
    booking_id: str
    archived_at: EpochDatetime


class ChangeSeatRequest(CamelModel):
    new_seat_name: Optional[str] = None


class PaymentMethodRequest(CamelModel):
    booking_ids: List[str] = []
    payment_method: Optional[str] = None


class PaymentStatusRequest(CamelModel):
    booking_ids: List[str] = []
    payment_status: Optional[str] = None
    payment_method: Optional[str] = None


class SplitPaymentRequest(CamelModel):
    booking_ids: List[str] = []
    cash_amount: Optional[Any] = None
    upi_amount: Optional[Any] = None


class BulkUpdateResponse(CamelModel):
    success: bool = True
    count: int


class BulkPaymentResponse(BulkUpdateResponse):
    bookings: List[BookingResponse] = []


class AvailableSeats(CamelModel):
    category: str
    seats: List[int]
