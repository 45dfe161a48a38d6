"""Test configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Set test environment variables BEFORE importing the app
os.environ["ENVIRONMENT"] = "test"

from day_tally.config import Settings
from day_tally.database.connection import DatabaseManager
from day_tally.database.migrations import create_tables
from day_tally.main import create_app
from day_tally.repositories.day_counters import DataRepository
from day_tally.repositories.tasks import TaskRepository
from day_tally.services.statistics import StatisticsController
from day_tally.services.tally import DailyTally

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FixedClock:
    """Clock returning a settable date."""

    def __init__(self, today: str = "2024-01-01"):
        self.today = today

    def __call__(self) -> str:
        return self.today


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest_asyncio.fixture
async def db():
    """In-memory database with all tables created."""
    manager = DatabaseManager(TEST_DATABASE_URL)
    await create_tables(manager)
    yield manager
    await manager.close()


@pytest.fixture
def repository(db) -> DataRepository:
    return DataRepository(db)


@pytest.fixture
def controller(repository) -> StatisticsController:
    return StatisticsController(repository)


@pytest.fixture
def tally(controller, clock) -> DailyTally:
    return DailyTally(controller, clock=clock)


@pytest.fixture
def task_repository(db) -> TaskRepository:
    return TaskRepository(db)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a per-test SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'day_tally.db'}",
        environment="test",
        enable_metrics=True,
    )


@pytest.fixture
def client(settings, clock):
    """Test client with the app lifespan running."""
    app = create_app(settings, clock=clock)
    with TestClient(app) as test_client:
        yield test_client
