"""
Cookie backed login sessions

The cookie only carries an opaque sid; session data lives in the sessions
table via SessionStore.
"""
import secrets
from typing import Any, Dict, Optional

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware


class SessionState:
    """Per-request view of the login session"""

    def __init__(self, sid: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        self.sid = sid
        self.data = data or {}
        self.modified = False
        self.destroyed = False

    @property
    def is_authenticated(self) -> bool:
        return bool(self.data.get("isAuthenticated") and self.data.get("userId"))

    @property
    def role(self) -> Optional[str]:
        return self.data.get("role")

    def login(self, data: Dict[str, Any]) -> None:
        self.data = dict(data)
        self.modified = True

    def destroy(self) -> None:
        self.data = {}
        self.destroyed = True


class LoginSessionMiddleware(BaseHTTPMiddleware):
    """Loads the session before the route runs and persists it afterwards"""

    async def dispatch(self, request: Request, call_next):
        store = request.app.state.session_store
        settings = request.app.state.settings
        cookie_name = settings.session_cookie_name

        sid = request.cookies.get(cookie_name)
        data = await run_in_threadpool(store.get, sid) if sid else None
        state = SessionState(sid if data is not None else None, data)
        request.state.session = state

        response = await call_next(request)

        if state.destroyed:
            if state.sid:
                await run_in_threadpool(store.destroy, state.sid)
            response.delete_cookie(cookie_name, path="/")
        elif state.modified:
            # fresh sid on every login
            if state.sid:
                await run_in_threadpool(store.destroy, state.sid)
            new_sid = secrets.token_urlsafe(32)
            await run_in_threadpool(store.set, new_sid, state.data)
            self._set_cookie(response, settings, new_sid)
        elif state.sid and state.is_authenticated:
            await run_in_threadpool(store.touch, state.sid)
            self._set_cookie(response, settings, state.sid)

        return response

    @staticmethod
    def _set_cookie(response, settings, sid: str) -> None:
        response.set_cookie(
            settings.session_cookie_name,
            sid,
            max_age=settings.session_max_age_ms // 1000,
            httponly=True,
            samesite="lax",
            secure=settings.cookie_secure,
            path="/",
        )
