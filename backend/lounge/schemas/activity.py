"""
Activity log, notification and payment log DTOs
"""
from typing import Optional

from lounge.schemas.common import CamelModel, EpochDatetime


class ActivityLogResponse(CamelModel):
    id: str
    user_id: str
    username: str
    user_role: str
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    details: Optional[str] = None
    created_at: EpochDatetime


class NotificationResponse(CamelModel):
    id: str
    type: str
    title: str
    message: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    activity_log_id: Optional[str] = None
    is_read: bool
    created_at: EpochDatetime


class PaymentLogResponse(CamelModel):
    id: str
    booking_id: str
    seat_name: str
    customer_name: str
    amount: str
    payment_method: Optional[str] = None
    payment_status: str
    user_id: str
    username: str
    previous_status: Optional[str] = None
    previous_method: Optional[str] = None
    created_at: EpochDatetime
