"""
Shared fixtures for the Users API test suite.
"""

import os

# Keep the module-level app from writing logs/app.log during collection.
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.users.entities import Role, User
from app.infrastructure.users.user_repository import InMemoryUserRepository
from app.main import create_app

BASE_TIME = datetime(2024, 1, 10, 8, 0, tzinfo=timezone.utc)


def make_user(
    index: int,
    name: str | None = None,
    email: str | None = None,
    role: Role = Role.VIEWER,
) -> User:
    """Build a stored user with deterministic id and timestamps."""
    created = BASE_TIME + timedelta(days=index)
    return User(
        id=f"user-{index}",
        name=name or f"User {index}",
        email=email or f"user{index}@example.com",
        role=role,
        created_at=created,
        updated_at=created,
    )


# Later than every timestamp make_user hands out in these tests.
CLOCK_START = BASE_TIME + timedelta(days=30)


class FakeClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = CLOCK_START) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        log_file=None,
        rate_limit_enabled=False,
        seed_demo_data=False,
    )


@pytest.fixture
def seeded_settings(test_settings: Settings) -> Settings:
    return test_settings.model_copy(update={"seed_demo_data": True})


@pytest.fixture
def client(test_settings: Settings):
    """Client for an app with an empty store."""
    with TestClient(create_app(test_settings), raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def seeded_client(seeded_settings: Settings):
    """Client for an app loaded with the ten demo users."""
    with TestClient(create_app(seeded_settings), raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository([make_user(i) for i in range(1, 4)])
