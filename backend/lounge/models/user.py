"""
User model
"""
from sqlalchemy import Column, String, Boolean, BigInteger, Index
from lounge.db.database import Base, new_id
from lounge.utils.time_utils import now_ms


class User(Base):
    """Staff and admin accounts"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String(100), nullable=False, unique=True, comment="Login name")
    email = Column(String(255), unique=True, nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="staff", comment="admin or staff")
    first_name = Column(String(100))
    last_name = Column(String(100))
    profile_image_url = Column(String(500))
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(BigInteger, nullable=False, default=now_ms)
    updated_at = Column(BigInteger, nullable=False, default=now_ms, onupdate=now_ms)

    __table_args__ = (
        Index("idx_users_username", "username"),
    )
