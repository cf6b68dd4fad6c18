"""Schemas for report and comment operations.

Response models deliberately have no ``password`` field: whatever object they
are built from, the shared secret cannot be serialized.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from phenomena.models.report import Report


class ReportCreate(BaseModel):
    """Request body for submitting a report."""

    title: str = Field(..., description="Short title of the incident")
    location: str = Field(..., description="Where it happened")
    description: str = Field(..., description="What was observed")
    password: str = Field(..., description="Shared secret required to close the report")


class ReportClose(BaseModel):
    """Request body for closing a report."""

    password: str = Field(..., description="Password given when the report was created")


class CommentCreate(BaseModel):
    """Request body for commenting on a report."""

    content: str = Field(..., description="Comment text")


class CommentResponse(BaseModel):
    """A comment on a report."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Comment ID")
    report_id: int = Field(..., description="Report this comment belongs to")
    content: str = Field(..., description="Comment text")
    created_at: datetime | None = Field(None, description="When the comment was made")


class ReportResponse(BaseModel):
    """A report as exposed outside the store (never includes the password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Report ID")
    title: str
    location: str
    description: str
    is_open: bool = Field(..., description="False once the report has been closed")
    expiration_date: datetime | None = Field(
        None, description="End of the discussion window, unset until the first comment"
    )
    is_expired: bool = Field(False, description="Whether the discussion window has passed")
    comments: list[CommentResponse] = Field(default_factory=list)
    created_at: datetime | None = None

    @classmethod
    def from_report(
        cls, report: Report, now: datetime, include_comments: bool = True
    ) -> ReportResponse:
        """Build the public view of a report, evaluating expiry at ``now``."""
        comments = (
            [CommentResponse.model_validate(c) for c in report.comments]
            if include_comments
            else []
        )
        return cls(
            id=report.id,
            title=report.title,
            location=report.location,
            description=report.description,
            is_open=report.is_open,
            expiration_date=report.expiration_date,
            is_expired=report.is_expired_at(now),
            comments=comments,
            created_at=report.created_at,
        )


class ReportListResponse(BaseModel):
    """Response for listing open reports."""

    reports: list[ReportResponse]


class CloseReportResponse(BaseModel):
    """Confirmation that a report was closed."""

    message: str = "Report successfully closed!"
