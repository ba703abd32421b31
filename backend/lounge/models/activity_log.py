"""
Activity log model
"""
from sqlalchemy import Column, String, Text, BigInteger, Index
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class ActivityLog(Base):
    """Append-only audit trail of staff actions"""
    __tablename__ = "activity_logs"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), nullable=False)
    username = Column(String(100), nullable=False)
    user_role = Column(String(20), nullable=False)
    action = Column(String(50), nullable=False, comment="create/update/delete/...")
    entity_type = Column(String(50))
    entity_id = Column(String(36))
    details = Column(Text)
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    __table_args__ = (
        Index("idx_activity_logs_created_at", "created_at"),
        Index("idx_activity_logs_user_id", "user_id"),
    )
