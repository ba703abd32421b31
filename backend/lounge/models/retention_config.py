"""
Retention config model
"""
from sqlalchemy import Column, Integer, String, BigInteger
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms

KEEP_FOREVER_DAYS = 36500


class RetentionConfig(Base):
    """Retention windows in days, single row"""
    __tablename__ = "retention_config"

    id = Column(String(36), primary_key=True, default=new_id)
    booking_history_days = Column(Integer, nullable=False, default=KEEP_FOREVER_DAYS)
    activity_logs_days = Column(Integer, nullable=False, default=KEEP_FOREVER_DAYS)
    expenses_days = Column(Integer, nullable=False, default=KEEP_FOREVER_DAYS)
    updated_at = Column(BigInteger, nullable=False, default=now_ms, onupdate=now_ms)
