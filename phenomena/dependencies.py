"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from phenomena.config import Settings, get_settings
from phenomena.database import get_db
from phenomena.repositories.report_repository import ReportRepository


# Type aliases for cleaner router signatures
# Function scope: get_db commits before the response is sent
DbSession = Annotated[AsyncSession, Depends(get_db, scope="function")]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Repository dependencies (request-scoped)
def get_report_repository(db: DbSession, settings: SettingsDep) -> ReportRepository:
    """Get ReportRepository with database session."""
    return ReportRepository(db, discussion_window=settings.discussion_window)


ReportRepoDep = Annotated[ReportRepository, Depends(get_report_repository)]
