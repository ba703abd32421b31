"""Pytest configuration and fixtures."""

from datetime import date, datetime, time, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lounge.core.config import Settings
from lounge.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass-123"
STAFF_USERNAME = "staff1"
STAFF_PASSWORD = "staff-pass-123"


def local_iso(moment: datetime) -> str:
    """Naive local datetime as an explicit UTC ISO string"""
    return moment.astimezone(timezone.utc).isoformat()


def today_at(hour: int, minute: int = 0) -> datetime:
    return datetime.combine(date.today(), time(hour, minute))


def parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def booking_payload(**overrides) -> dict:
    """Minimal valid booking request"""
    start = overrides.pop("start", today_at(12))
    end = overrides.pop("end", today_at(13))
    payload = {
        "category": "PC",
        "seatNumber": 1,
        "seatName": "PC-1",
        "customerName": "Ravi",
        "startTime": local_iso(start),
        "endTime": local_iso(end),
        "price": "20.00",
        "status": "upcoming",
    }
    payload.update(overrides)
    return payload


def login(client: TestClient, username: str, password: str):
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response


@pytest.fixture
def settings() -> Settings:
    """In-memory SQLite settings, ignoring any local .env"""
    return Settings(
        _env_file=None,
        database_url="sqlite:///:memory:",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        seed_defaults=True,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Anonymous client; the context manager runs the app lifespan"""
    # Don't raise server exceptions so we can test error status codes
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def db(app, client) -> Generator[Session, None, None]:
    """Session on the same database the running app uses"""
    with app.state.database.session() as session:
        yield session


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    login(client, ADMIN_USERNAME, ADMIN_PASSWORD)
    return client


@pytest.fixture
def staff_client(client: TestClient) -> TestClient:
    response = client.post("/api/auth/register", json={"username": STAFF_USERNAME, "password": STAFF_PASSWORD})
    assert response.status_code == 201, response.text
    login(client, STAFF_USERNAME, STAFF_PASSWORD)
    return client
