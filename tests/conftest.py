"""Shared pytest fixtures for testing infrastructure.

CRITICAL: Environment variables MUST be set before ANY imports.
"""
import os

# ===============================================================================
# CRITICAL: Set test environment variables FIRST, before ANY other imports!
# This ensures Settings and the rate limiter pick up the test configuration.
# ===============================================================================
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["LOG_LEVEL"] = "WARNING"

# Now import everything else AFTER environment is configured
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker

from portfolio_tracker.core.config import Settings
from portfolio_tracker.core.config import get_settings
from portfolio_tracker.core.database import create_engine_for_url
from portfolio_tracker.core.database import create_session_factory
from portfolio_tracker.core.database import init_db
from portfolio_tracker.main import create_app
from portfolio_tracker.storage import DatabaseStorage
from portfolio_tracker.storage import MemoryStorage
from portfolio_tracker.storage import Storage
from portfolio_tracker.utils.structured_logging import configure_structured_logging


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings.

    Returns:
        Settings: Test configuration
    """
    return Settings(
        environment="test",
        storage_backend="memory",
        seed_demo_data=True,
        database_url=TEST_DATABASE_URL,
        log_level="WARNING",
        debug=True,
    )


@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """Configure structured logging for tests.

    Args:
        test_settings: Test configuration
    """
    configure_structured_logging(log_level=test_settings.log_level)


@pytest.fixture
def storage() -> MemoryStorage:
    """Fresh seeded in-memory storage per test."""
    return MemoryStorage(seed=True)


@pytest.fixture
def app(storage: Storage, test_settings: Settings) -> FastAPI:
    """Create FastAPI test application serving the ``storage`` fixture.

    Args:
        storage: Storage backend for this test
        test_settings: Test configuration

    Returns:
        FastAPI: Test application instance
    """
    test_app = create_app(storage=storage, settings=test_settings)
    test_app.dependency_overrides[get_settings] = lambda: test_settings

    yield test_app

    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create synchronous test client.

    Args:
        app: Test application instance

    Returns:
        TestClient: Synchronous test client
    """
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client.

    Args:
        app: Test application instance

    Yields:
        AsyncClient: Async test client
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with all tables created."""
    engine = create_engine_for_url(TEST_DATABASE_URL)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the per-test SQLite engine."""
    return create_session_factory(db_engine)


@pytest.fixture
def database_storage(db_session_factory: async_sessionmaker[AsyncSession]) -> DatabaseStorage:
    """Empty database-backed storage."""
    return DatabaseStorage(db_session_factory)


# Common test data fixtures
@pytest.fixture
def sample_stock_payload() -> dict:
    """Stock creation body as the client sends it.

    Returns:
        dict: Sample stock payload
    """
    return {
        "symbol": "AAPL",
        "name": "Apple Inc.",
        "price": "173.50",
        "change": "4.12",
        "changePercent": "2.4",
        "volume": 45200000,
        "marketCap": "$2.7T",
    }
