"""Error response envelope."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Machine-readable code plus human-readable message."""

    code: str
    message: str
    details: dict[str, Any] = {}


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: ErrorDetail
    request_id: str | None = None
    timestamp: datetime
