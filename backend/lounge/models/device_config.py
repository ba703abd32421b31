"""
Device configuration model
"""
from sqlalchemy import Column, Integer, String, JSON
from lounge.db.database import Base, new_id


class DeviceConfig(Base):
    """Bookable seats per device category"""
    __tablename__ = "device_configs"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(String(50), nullable=False, unique=True, comment="PC, PS5, ...")
    count = Column(Integer, nullable=False, default=0)
    seats = Column(JSON, nullable=False, default=list, comment="Ordered seat names")
