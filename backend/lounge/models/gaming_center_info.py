"""
Gaming center info model
"""
from sqlalchemy import Column, String, Text, BigInteger
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class GamingCenterInfo(Base):
    """Venue details, single row"""
    __tablename__ = "gaming_center_info"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255))
    hours = Column(String(200), nullable=False)
    timezone = Column(String(50), nullable=False, default="Asia/Kolkata")
    updated_at = Column(BigInteger, nullable=False, default=now_ms, onupdate=now_ms)
