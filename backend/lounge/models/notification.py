"""
Notification model
"""
from sqlalchemy import Column, String, Text, Boolean, BigInteger, Index
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class Notification(Base):
    """Notifications shown to admins"""
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=new_id)
    type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    entity_type = Column(String(50))
    entity_id = Column(String(36))
    activity_log_id = Column(String(36))
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    __table_args__ = (
        Index("idx_notifications_created_at", "created_at"),
    )
