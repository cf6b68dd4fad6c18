"""Shared pytest fixtures for router tests."""

import pytest
from contextlib import ExitStack, asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, Mock, patch

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession


# Mock the engine lifecycle so the app starts without a database
@pytest.fixture(autouse=True)
def mock_database_init():
    """Mock database initialization for all router tests."""
    with ExitStack() as stack:
        mock_engine = Mock()
        mock_engine.dispose = AsyncMock()
        stack.enter_context(patch("phenomena.main.create_engine", return_value=mock_engine))
        stack.enter_context(patch("phenomena.main.init_db", new_callable=AsyncMock))
        yield mock_engine


@pytest.fixture
def mock_db_session():
    """Create a mock AsyncSession for router tests."""
    session = AsyncMock(spec=AsyncSession)

    mock_result = Mock()
    mock_result.scalar_one = Mock(return_value=1)
    session.execute = AsyncMock(return_value=mock_result)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_report_repo():
    """Create a mock ReportRepository."""
    repo = AsyncMock()
    repo.list_open_reports = AsyncMock(return_value=[])
    repo.count_open_reports = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def client(mock_db_session, mock_report_repo):
    """Create TestClient with the database session and repository overridden."""
    from phenomena.main import app
    from phenomena.database import get_db
    from phenomena.dependencies import get_report_repository

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield mock_db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_report_repository] = lambda: mock_report_repo

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def committing_client(mock_db_session, mock_report_repo):
    """TestClient that keeps the real get_db, so commit and rollback run per request."""
    from phenomena.main import app
    from phenomena.dependencies import DbSession, get_report_repository

    @asynccontextmanager
    async def session_factory():
        yield mock_db_session

    # Depend on DbSession so the real get_db still runs for each request
    def override_repo(db: DbSession):
        return mock_report_repo

    app.dependency_overrides[get_report_repository] = override_repo

    with TestClient(app, raise_server_exceptions=False) as test_client:
        # Replace the factory the lifespan built on the mocked engine
        app.state.session_factory = session_factory
        yield test_client

    app.dependency_overrides.clear()


# Sample data fixtures


@pytest.fixture
def sample_report():
    """A report as the repository returns it (already without password)."""
    from phenomena.schemas.reports import ReportResponse

    return ReportResponse(
        id=1,
        title="Fire",
        location="Main St",
        description="Smoke visible",
        is_open=True,
        expiration_date=None,
        is_expired=False,
        comments=[],
        created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_comment():
    from phenomena.schemas.reports import CommentResponse

    return CommentResponse(
        id=5,
        report_id=1,
        content="Still burning?",
        created_at=datetime(2026, 10, 1, 12, tzinfo=timezone.utc),
    )
