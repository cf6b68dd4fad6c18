"""Database connection and session management."""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from phenomena.config import Settings


# Base class for all models
class Base(DeclarativeBase):
    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the application's async engine. Opened once at startup."""
    return create_async_engine(
        settings.postgres_url,
        echo=settings.sql_echo,
        future=True,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the given engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database sessions.

    Commits once the request handler returns and rolls back on any error, so
    everything a repository flushed during the request lands atomically.
    Declared with ``scope="function"`` (see ``DbSession``) so a failed commit
    becomes the response instead of following a success already sent.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database (create tables)."""
    # Register models on Base.metadata
    import phenomena.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session: AsyncSession) -> bool:
    """Round-trip a trivial query."""
    result = await session.execute(text("SELECT 1"))
    return result.scalar_one() == 1
