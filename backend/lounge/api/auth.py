"""
Authentication API
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import get_session
from lounge.db.database import get_db
from lounge.middleware.session import SessionState
from lounge.schemas.user import LoginRequest, RegisterRequest, RegisterResponse, UserResponse
from lounge.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=UserResponse)
def login(
    credentials: LoginRequest,
    session: SessionState = Depends(get_session),
    db: Session = Depends(get_db)
):
    """Check the password and start a session"""
    user = auth_service.authenticate(db, credentials.username, credentials.password)
    session.login(auth_service.session_payload(user))
    return user


@router.post("/logout")
def logout(session: SessionState = Depends(get_session)):
    """End the session; succeeds without one too"""
    session.destroy()
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def me(session: SessionState = Depends(get_session), db: Session = Depends(get_db)):
    return auth_service.current_user(db, session.data)


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """Create a user account (staff unless a role is given)"""
    return auth_service.register(db, request)
