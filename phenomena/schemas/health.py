"""Health check schemas."""

from typing import Literal

from pydantic import BaseModel


class DatabaseStatus(BaseModel):
    """Database reachability as seen from this process."""

    status: Literal["healthy", "unhealthy"]
    message: str
    open_reports: int | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded"]
    version: str
    database: DatabaseStatus
    timestamp: str
