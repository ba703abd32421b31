"""
Database configuration and connections
"""
import uuid
from contextlib import contextmanager
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Base class for all models
Base = declarative_base()


def new_id() -> str:
    """Primary key for new rows"""
    return str(uuid.uuid4())


class Database:
    """Engine plus session factory for one backend, owned by the application"""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = self._create_engine(url, echo)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _create_engine(url: str, echo: bool) -> Engine:
        if not url.startswith("sqlite"):
            return create_engine(url, echo=echo, pool_size=20, pool_pre_ping=True)

        kwargs = {"connect_args": {"check_same_thread": False}}  # SQLite needs this across threads
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            # one shared connection, otherwise every connection gets an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            if ":memory:" not in url:
                cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

        return engine

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def create_all(self) -> None:
        """Create every table registered on Base"""
        import lounge.models  # noqa: F401  registers the models

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Request-scoped database session"""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
