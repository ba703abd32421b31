"""
Device maintenance model
"""
from sqlalchemy import Column, Integer, String, Text, Float, BigInteger
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class DeviceMaintenance(Base):
    """Usage counters per seat"""
    __tablename__ = "device_maintenance"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(String(50), nullable=False)
    seat_name = Column(String(50), nullable=False)
    last_maintenance_date = Column(BigInteger)
    total_usage_hours = Column(Float, nullable=False, default=0)
    total_sessions = Column(Integer, nullable=False, default=0)
    issues_reported = Column(Integer, nullable=False, default=0)
    maintenance_notes = Column(Text)
    status = Column(String(20), nullable=False, default="healthy")
    created_at = Column(BigInteger, nullable=False, default=now_ms)
    updated_at = Column(BigInteger, nullable=False, default=now_ms, onupdate=now_ms)
