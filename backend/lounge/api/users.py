"""
User management API
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import require_admin
from lounge.core.exceptions import NotFound
from lounge.db.database import get_db
from lounge.models.user import User
from lounge.schemas.user import UserListItem, UserUpdate
from lounge.services import auth_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserListItem])
def get_users(db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    """All accounts, without password hashes"""
    return db.query(User).order_by(User.created_at).all()


@router.patch("/{user_id}", response_model=UserListItem)
def update_user(
    user_id: str,
    user_update: UserUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    db_user = db.query(User).filter(User.id == user_id).first()
    if not db_user:
        raise NotFound("User not found")
    return auth_service.update_user(db, db_user, user_update)
