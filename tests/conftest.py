"""Shared pytest fixtures."""

# Clear settings cache before any imports to prevent stale values with coverage
from phenomena.config import get_settings

get_settings.cache_clear()

import pytest
from unittest.mock import AsyncMock, Mock
from contextlib import asynccontextmanager
from datetime import datetime, timezone


# Database mocking fixtures


@pytest.fixture
def mock_async_session():
    """Create a mock AsyncSession for repository tests."""
    session = AsyncMock()

    # Mock result object for execute
    mock_result = Mock()
    mock_result.scalar_one_or_none = Mock(return_value=None)
    mock_result.scalar_one = Mock(return_value=0)
    mock_result.scalars = Mock(return_value=Mock(all=Mock(return_value=[])))
    mock_result.rowcount = 0

    session.execute = AsyncMock(return_value=mock_result)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.add = Mock()

    # Mock begin_nested for savepoint tests
    session.savepoints = []

    @asynccontextmanager
    async def begin_nested():
        session.savepoints.append("open")
        yield
        session.savepoints[-1] = "released"

    session.begin_nested = begin_nested

    return session


@pytest.fixture
def now():
    """Current UTC time."""
    return datetime.now(timezone.utc)


def pytest_collection_modifyitems(items):
    """Mark tests by the directory they live in."""
    for item in items:
        path = str(item.fspath)
        if "/api/" in path:
            item.add_marker(pytest.mark.api)
        elif "/integration/" in path:
            item.add_marker(pytest.mark.integration)
