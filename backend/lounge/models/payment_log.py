"""
Payment log model
"""
from sqlalchemy import Column, String, BigInteger, Index
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class PaymentLog(Base):
    """Payment status and method changes per booking"""
    __tablename__ = "payment_logs"

    id = Column(String(36), primary_key=True, default=new_id)
    booking_id = Column(String(36), nullable=False)
    seat_name = Column(String(50), nullable=False)
    customer_name = Column(String(200), nullable=False)
    amount = Column(String(20), nullable=False)
    payment_method = Column(String(20))
    payment_status = Column(String(20), nullable=False)
    user_id = Column(String(36), nullable=False)
    username = Column(String(100), nullable=False)
    previous_status = Column(String(20))
    previous_method = Column(String(20))
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    __table_args__ = (
        Index("idx_payment_logs_created_at", "created_at"),
        Index("idx_payment_logs_booking_id", "booking_id"),
    )
