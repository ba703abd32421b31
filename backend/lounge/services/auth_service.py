"""
Users, passwords and login
"""
import logging
from typing import Optional

import bcrypt
from sqlalchemy.orm import Session

from lounge.core.exceptions import BadRequest, Conflict, Unauthorized
from lounge.models.user import User
from lounge.schemas.user import RegisterRequest, UserUpdate
from lounge.utils.time_utils import now_ms

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
MIN_PASSWORD_LENGTH = 8


def _password_bytes(password: str) -> bytes:
    # bcrypt reads at most 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt"""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def session_payload(user: User) -> dict:
    """Data kept in the login session"""
    return {
        "userId": user.id,
        "username": user.username,
        "role": user.role,
        "isAuthenticated": True,
    }


def authenticate(db: Session, username: Optional[str], password: Optional[str]) -> User:
    if not username or not password:
        raise BadRequest("Username and password are required")

    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login for %s", username)
        raise Unauthorized("Invalid username or password")
    return user


def current_user(db: Session, session_data: Optional[dict]) -> User:
    """The logged in user, re-read from storage"""
    if not session_data or not session_data.get("isAuthenticated") or not session_data.get("userId"):
        raise Unauthorized("Not authenticated")

    user = db.query(User).filter(User.id == session_data["userId"]).first()
    if not user:
        raise Unauthorized("User not found")
    return user


def register(db: Session, request: RegisterRequest) -> User:
    if not request.username or not request.password:
        raise BadRequest("Username and password are required")
    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise BadRequest("Password must be at least 8 characters")

    if db.query(User).filter(User.username == request.username).first():
        raise Conflict("Username already exists")
    if request.email and db.query(User).filter(User.email == request.email).first():
        raise Conflict("Email already exists")

    user = User(
        username=request.username,
        password_hash=hash_password(request.password),
        email=request.email or None,
        role=request.role or "staff",
        onboarding_completed=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.username, user.role)
    return user


def update_user(db: Session, user: User, user_update: UserUpdate) -> User:
    update_data = user_update.model_dump(exclude_unset=True)
    password = update_data.pop("password", None)
    if "role" in update_data and update_data["role"] is None:
        raise BadRequest("Role cannot be empty")
    if "onboarding_completed" in update_data and update_data["onboarding_completed"] is None:
        raise BadRequest("onboardingCompleted cannot be empty")
    if update_data.get("email"):
        taken = db.query(User).filter(User.email == update_data["email"], User.id != user.id).first()
        if taken:
            raise Conflict("Email already exists")

    for field, value in update_data.items():
        setattr(user, field, value)
    if password:
        user.password_hash = hash_password(password)
    user.updated_at = now_ms()

    db.commit()
    db.refresh(user)
    return user


def bootstrap_admin(db: Session, username: str, password: str) -> Optional[User]:
    """Create the first admin when no users exist"""
    if db.query(User).count() > 0:
        return None

    admin = User(
        username=username,
        password_hash=hash_password(password),
        role="admin",
        first_name="Admin",
        onboarding_completed=True,
    )
    db.add(admin)
    db.commit()
    logger.info("Created initial admin user %s", username)
    return admin
