"""
Login session model
"""
from sqlalchemy import Column, String, Text, BigInteger, Index
from lounge.db.database import Base


class SessionRecord(Base):
    """Server side session data keyed by cookie sid"""
    __tablename__ = "sessions"

    sid = Column(String(128), primary_key=True)
    sess = Column(Text, nullable=False, comment="JSON encoded session")
    expire = Column(BigInteger, nullable=False, comment="Epoch ms")

    __table_args__ = (
        Index("idx_session_expire", "expire"),
    )
