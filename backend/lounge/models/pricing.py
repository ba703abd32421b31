"""
Pricing and happy hours models
"""
from sqlalchemy import Column, Integer, String, Boolean, Index
from lounge.db.database import Base, new_id


class PricingConfig(Base):
    """Regular price list"""
    __tablename__ = "pricing_configs"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(String(50), nullable=False)
    duration = Column(String(50), nullable=False, comment="Label, e.g. '1 hour'")
    price = Column(String(20), nullable=False)
    person_count = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        Index("idx_pricing_configs_category", "category"),
    )


class HappyHoursPricing(Base):
    """Price list used while happy hours are active"""
    __tablename__ = "happy_hours_pricing"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(String(50), nullable=False)
    duration = Column(String(50), nullable=False)
    price = Column(String(20), nullable=False)
    person_count = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        Index("idx_happy_hours_pricing_category", "category"),
    )


class HappyHoursConfig(Base):
    """Happy hours window per category"""
    __tablename__ = "happy_hours_configs"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(String(50), nullable=False)
    start_time = Column(String(5), nullable=False, comment="HH:MM")
    end_time = Column(String(5), nullable=False, comment="HH:MM")
    enabled = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("idx_happy_hours_configs_category", "category"),
    )
