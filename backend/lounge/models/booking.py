"""
Booking and booking history models
"""
from sqlalchemy import Column, Integer, String, Boolean, BigInteger, JSON, Index
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms

ACTIVE_STATUSES = ("running", "paused", "upcoming")
OCCUPYING_STATUSES = ("running", "paused")
FINISHED_STATUSES = ("completed", "expired")


class BookingColumns:
    """Columns shared by live bookings and their archived copies"""

    booking_code = Column(String(50), comment="Human readable code, BK-...")
    group_id = Column(String(36))
    group_code = Column(String(50))
    category = Column(String(50), nullable=False, comment="Device category, e.g. PC")
    seat_number = Column(Integer, nullable=False)
    seat_name = Column(String(50), nullable=False)
    customer_name = Column(String(200), nullable=False)
    whatsapp_number = Column(String(50))
    start_time = Column(BigInteger, nullable=False, comment="Epoch ms")
    end_time = Column(BigInteger, nullable=False, comment="Epoch ms")
    price = Column(String(20), nullable=False, comment="Decimal as text")
    status = Column(String(20), nullable=False, comment="upcoming/running/paused/completed/expired")
    booking_type = Column(JSON, nullable=False, default=list)
    paused_remaining_time = Column(BigInteger)
    person_count = Column(Integer, nullable=False, default=1)
    payment_method = Column(String(20), comment="cash/upi_online/split")
    cash_amount = Column(String(20))
    upi_amount = Column(String(20))
    payment_status = Column(String(20), nullable=False, default="unpaid")
    last_payment_action = Column(JSON)
    food_orders = Column(JSON, nullable=False, default=list)
    original_price = Column(String(20))
    discount_applied = Column(String(20))
    bonus_hours_applied = Column(String(20))
    promotion_details = Column(JSON)
    is_promotional_discount = Column(Boolean, default=False)
    is_promotional_bonus = Column(Boolean, default=False)
    manual_discount_percentage = Column(Integer)
    manual_free_hours = Column(String(20))
    discount = Column(String(20))
    bonus = Column(String(20))
    created_at = Column(BigInteger, nullable=False, default=now_ms)


# column names copied verbatim when a booking is archived
BOOKING_FIELDS = [name for name, value in vars(BookingColumns).items() if isinstance(value, Column)]


class Booking(BookingColumns, Base):
    """Live bookings"""
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=new_id)

    __table_args__ = (
        Index("idx_bookings_booking_code", "booking_code", unique=True),
        Index("idx_bookings_category_status", "category", "status"),
        Index("idx_bookings_start_time", "start_time"),
    )


class BookingHistory(BookingColumns, Base):
    """Archived bookings"""
    __tablename__ = "booking_history"

    id = Column(String(36), primary_key=True, default=new_id)
    booking_id = Column(String(36), nullable=False, comment="Original booking id")
    archived_at = Column(BigInteger, nullable=False, default=now_ms)

    __table_args__ = (
        Index("idx_booking_history_start_time", "start_time"),
        Index("idx_booking_history_archived_at", "archived_at"),
    )
