"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from finance_tracker.main import app
from finance_tracker.storage import MemoryStorage

# Live database for the provisioning integration tests; skipped when unset
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client bound to the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty localStorage stand-in."""
    return MemoryStorage()


@pytest.fixture
def mock_engine() -> MagicMock:
    """Engine double whose ``connect()`` works as a context manager."""
    engine = MagicMock()
    engine.connect.return_value.__exit__.return_value = False
    return engine


@pytest.fixture
def mock_connection(mock_engine: MagicMock) -> MagicMock:
    """The connection yielded by ``mock_engine.connect()``."""
    return mock_engine.connect.return_value.__enter__.return_value


@pytest.fixture
def live_engine():
    """Engine for a real MySQL-compatible database."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")

    from finance_tracker.database import create_db_engine

    engine = create_db_engine(TEST_DATABASE_URL)
    yield engine
    engine.dispose()
