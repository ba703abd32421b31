"""
Expense model
"""
from sqlalchemy import Column, String, Text, BigInteger, Index
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class Expense(Base):
    """Expense ledger"""
    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    amount = Column(String(20), nullable=False)
    date = Column(BigInteger, nullable=False, comment="Epoch ms")
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    __table_args__ = (
        Index("idx_expenses_date", "date"),
    )
