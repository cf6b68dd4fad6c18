"""Health check router."""

from datetime import datetime, timezone

from fastapi import APIRouter

from phenomena import __version__
from phenomena.database import ping
from phenomena.dependencies import DbSession, ReportRepoDep
from phenomena.schemas.health import DatabaseStatus, HealthResponse
from phenomena.utils.logger import get_logger

router = APIRouter()
log = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(db: DbSession, report_repo: ReportRepoDep) -> HealthResponse:
    """
    Check database connectivity.

    Returns:
        HealthResponse with status "ok", or "degraded" when the database
        cannot be queried
    """
    try:
        await ping(db)
        open_reports = await report_repo.count_open_reports()
        database = DatabaseStatus(
            status="healthy", message="Connected", open_reports=open_reports
        )
        overall_status = "ok"
    except Exception as e:
        log.error("health check failed", service="database", error=str(e))
        await db.rollback()
        database = DatabaseStatus(status="unhealthy", message="Service unavailable")
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        database=database,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
