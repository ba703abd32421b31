"""
Route guards
"""
from fastapi import Depends, Request

from lounge.core.exceptions import Forbidden, Unauthorized
from lounge.middleware.session import SessionState


def get_session(request: Request) -> SessionState:
    state = getattr(request.state, "session", None)
    if state is None:
        # app built without the session middleware
        state = SessionState()
        request.state.session = state
    return state


def require_auth(session: SessionState = Depends(get_session)) -> dict:
    """Session data of the logged in user"""
    if not session.is_authenticated:
        raise Unauthorized()
    return session.data


def require_admin(session: SessionState = Depends(get_session)) -> dict:
    if not session.is_authenticated:
        raise Unauthorized()
    if session.role != "admin":
        raise Forbidden()
    return session.data
