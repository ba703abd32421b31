"""
Request timing log for API calls
"""
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("lounge.access")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs METHOD path status and duration for /api requests"""

    PREFIX = "/api"
    # polled constantly by the clients
    EXCLUDED_PATHS = [
        "/api/health",
        "/api/server-time",
    ]

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if request.method == "OPTIONS" or not path.startswith(self.PREFIX) or path in self.EXCLUDED_PATHS:
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        execution_time = int((time.time() - start_time) * 1000)

        logger.info("%s %s %s in %dms", request.method, path, response.status_code, execution_time)
        return response
