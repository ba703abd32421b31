"""
User and authentication DTOs
"""
from typing import Literal, Optional

from pydantic import Field

from lounge.schemas.common import CamelModel, EpochDatetime

Role = Literal["admin", "staff"]


class LoginRequest(CamelModel):
    """Login request"""
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(CamelModel):
    """Registration request"""
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = Field(None, max_length=255)
    role: Optional[Role] = None


class UserResponse(CamelModel):
    """Public user view, never carries the password hash"""
    id: str
    username: str
    role: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    onboarding_completed: bool = False


class RegisterResponse(CamelModel):
    id: str
    username: str
    role: str
    email: Optional[str] = None


class UserListItem(UserResponse):
    created_at: Optional[EpochDatetime] = None


class UserUpdate(CamelModel):
    """Admin edit of a user"""
    email: Optional[str] = Field(None, max_length=255)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    role: Optional[Role] = None
    onboarding_completed: Optional[bool] = None
    password: Optional[str] = Field(None, min_length=8)
