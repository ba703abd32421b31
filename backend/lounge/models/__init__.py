"""
Database models
"""
from lounge.models.user import User
from lounge.models.booking import Booking, BookingHistory
from lounge.models.device_config import DeviceConfig
from lounge.models.pricing import PricingConfig, HappyHoursPricing, HappyHoursConfig
from lounge.models.food_item import FoodItem
from lounge.models.expense import Expense
from lounge.models.activity_log import ActivityLog
from lounge.models.notification import Notification
from lounge.models.payment_log import PaymentLog
from lounge.models.device_maintenance import DeviceMaintenance
from lounge.models.gaming_center_info import GamingCenterInfo
from lounge.models.retention_config import RetentionConfig
from lounge.models.session import SessionRecord

__all__ = [
    "User",
    "Booking",
    "BookingHistory",
    "DeviceConfig",
    "PricingConfig",
    "HappyHoursPricing",
    "HappyHoursConfig",
    "FoodItem",
    "Expense",
    "ActivityLog",
    "Notification",
    "PaymentLog",
    "DeviceMaintenance",
    "GamingCenterInfo",
    "RetentionConfig",
    "SessionRecord",
]
