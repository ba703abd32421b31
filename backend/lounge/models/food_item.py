"""
Food item model
"""
from sqlalchemy import Column, Integer, String, Boolean, BigInteger
from lounge.db.database import Base, new_id


class FoodItem(Base):
    """Food and drink items sold at the counter"""
    __tablename__ = "food_items"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    price = Column(String(20), nullable=False, comment="Selling price")
    cost_price = Column(String(20))
    current_stock = Column(Integer, nullable=False, default=0)
    min_stock_level = Column(Integer, nullable=False, default=10)
    in_inventory = Column(Boolean, nullable=False, default=False)
    category = Column(String(50), nullable=False, default="trackable")
    supplier = Column(String(200))
    expiry_date = Column(BigInteger, comment="Epoch ms")
