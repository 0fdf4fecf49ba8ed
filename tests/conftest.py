# tests/conftest.py
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from user_backend_api.app.main import create_app
from user_backend_api.app.services.user_store import UserStore, seed_demo_users


class TickingClock:
    """Deterministic clock that moves forward one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def store(clock) -> UserStore:
    """An empty store; ids start at 1."""
    return UserStore(clock=clock)


@pytest.fixture
def seeded_store(store) -> UserStore:
    """A store holding the three demo users (ids 1..3)."""
    return seed_demo_users(store)


@pytest.fixture
def app(seeded_store):
    return create_app(store=seeded_store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
