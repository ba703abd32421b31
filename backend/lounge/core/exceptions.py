"""
API error types

Every error carries its HTTP status; the application handlers in main.py
render them as {"message": ...}.
"""
from fastapi import HTTPException


class BadRequest(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=400, detail=message)


class Unauthorized(HTTPException):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(status_code=401, detail=message)


class Forbidden(HTTPException):
    def __init__(self, message: str = "Admin access required"):
        super().__init__(status_code=403, detail=message)


class NotFound(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=404, detail=message)


class Conflict(HTTPException):
    """Duplicate entity; reported as 400 to match the existing clients"""

    def __init__(self, message: str):
        super().__init__(status_code=400, detail=message)


INTERNAL_ERROR_MESSAGE = "An internal error occurred."
