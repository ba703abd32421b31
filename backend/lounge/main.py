"""
FastAPI application entry point
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from lounge.api import (
    activity,
    auth,
    bookings,
    device_config,
    expenses,
    food_items,
    pricing,
    reports,
    system,
    users,
    venue,
)
from lounge.core.config import Settings
from lounge.core.exceptions import INTERNAL_ERROR_MESSAGE
from lounge.core.logging_config import configure_logging
from lounge.db.database import Database
from lounge.db.init_db import init_db
from lounge.middleware.request_log import RequestLogMiddleware
from lounge.middleware.session import LoginSessionMiddleware
from lounge.services.session_store import SessionStore

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


async def prune_sessions_periodically(store: SessionStore, interval_seconds: float) -> None:
    """Hourly sweep of expired sessions"""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await run_in_threadpool(store.prune)
        except Exception:
            logger.exception("Session prune failed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    database = Database(settings.sqlalchemy_url)
    init_db(database, settings)

    store = SessionStore(database, settings.session_max_age_ms)
    app.state.database = database
    app.state.session_store = store
    prune_task = asyncio.create_task(
        prune_sessions_periodically(store, settings.session_prune_interval_seconds)
    )
    app.state.prune_task = prune_task
    logger.info("Gaming lounge POS started")
    try:
        yield
    finally:
        prune_task.cancel()
        try:
            await prune_task
        except asyncio.CancelledError:
            pass
        database.dispose()
        logger.info("Gaming lounge POS stopped")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    if location:
        return f"Invalid {location}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Gaming Lounge POS API",
        description="Bookings, seats, pricing and reports for a gaming lounge",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(LoginSessionMiddleware)
    app.add_middleware(RequestLogMiddleware)
    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # browsers refuse credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Unexpected errors: full detail in the log, generic message to the client"""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})

    app.include_router(system.router)
    app.include_router(auth.router)
    app.include_router(bookings.router)
    app.include_router(bookings.history_router)
    app.include_router(reports.router)
    app.include_router(reports.analytics_router)
    app.include_router(food_items.router)
    app.include_router(device_config.router)
    app.include_router(pricing.router)
    app.include_router(expenses.router)
    app.include_router(activity.router)
    app.include_router(venue.router)
    app.include_router(users.router)

    @app.get("/")
    async def root():
        return {"message": "Gaming Lounge POS API", "version": VERSION}

    return app


app = create_app()


def run() -> None:
    """Console entry point"""
    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
