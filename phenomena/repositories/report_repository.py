"""Repository for the report lifecycle and its comment threads."""

import hmac
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from phenomena.exceptions import (
    ConflictError,
    DatabaseError,
    IncorrectPasswordError,
    ReportNotFoundError,
)
from phenomena.models.comment import Comment
from phenomena.models.report import Report
from phenomena.schemas.reports import CloseReportResponse, CommentResponse, ReportResponse
from phenomena.utils.logger import get_logger

log = get_logger(__name__)

DEFAULT_DISCUSSION_WINDOW = timedelta(days=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReportRepository:
    """Owns every state transition of reports and comments.

    Public methods return response schemas, never ORM rows, so the report
    password cannot leave the repository. Writes are flushed, not committed:
    the caller commits the transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        discussion_window: timedelta = DEFAULT_DISCUSSION_WINDOW,
    ):
        self.session = session
        self.discussion_window = discussion_window

    async def get_report(self, report_id: int, for_update: bool = False) -> Optional[Report]:
        """
        Get the full report row, password included.

        Internal to the repository (and tests); never hand the result to a
        caller outside the store.

        Args:
            report_id: Report primary key
            for_update: Lock the row until the transaction ends

        Returns:
            Report instance or None
        """
        stmt = select(Report).where(Report.id == report_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_open_reports(self) -> list[ReportResponse]:
        """List every open report with its comments, oldest report first."""
        result = await self.session.execute(
            select(Report)
            .where(Report.is_open.is_(True))
            .options(selectinload(Report.comments))
            .order_by(Report.id)
        )
        reports = list(result.scalars().all())

        now = utcnow()
        log.debug("open reports loaded", count=len(reports))
        return [ReportResponse.from_report(report, now) for report in reports]

    async def count_open_reports(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Report).where(Report.is_open.is_(True))
        )
        return result.scalar_one()

    async def create_report(
        self,
        title: str,
        location: str,
        description: str,
        password: str,
    ) -> ReportResponse:
        """Create a new open report. Caller is responsible for committing."""
        report = Report(
            title=title,
            location=location,
            description=description,
            password=password,
            is_open=True,
        )
        self.session.add(report)
        await self.session.flush()
        await self.session.refresh(report)
        log.info("report created", report_id=report.id)
        return ReportResponse.from_report(report, utcnow(), include_comments=False)

    async def close_report(self, report_id: int, password: str) -> CloseReportResponse:
        """
        Close a report with its password.

        Checks run in order and the first failure wins: existence, password,
        then open state. The row stays locked from the lookup until commit, and
        the update only matches a still-open row, so a lost race surfaces as
        DatabaseError instead of a second success.

        Raises:
            ReportNotFoundError: No report with that id
            IncorrectPasswordError: Password does not match
            ConflictError: Report is already closed
            DatabaseError: The update matched no row
        """
        report = await self.get_report(report_id, for_update=True)

        if report is None:
            log.info("close rejected", report_id=report_id, reason="not_found")
            raise ReportNotFoundError(report_id)

        if not hmac.compare_digest(report.password.encode(), password.encode()):
            log.warning("close rejected", report_id=report_id, reason="bad_password")
            raise IncorrectPasswordError(report_id)

        if not report.is_open:
            log.info("close rejected", report_id=report_id, reason="already_closed")
            raise ConflictError("This report has already been closed")

        result = await self.session.execute(
            update(Report)
            .where(Report.id == report_id, Report.is_open.is_(True))
            .values(is_open=False)
        )
        if result.rowcount == 0:
            log.error("close update matched no rows", report_id=report_id)
            raise DatabaseError("Failed to close the report")

        log.info("report closed", report_id=report_id)
        return CloseReportResponse()

    async def create_report_comment(self, report_id: int, content: str) -> CommentResponse:
        """
        Comment on an open report and extend its discussion window.

        A report whose expiration date was never set accepts comments; the
        first accepted comment sets it. The insert and the extension share a
        savepoint so neither is persisted without the other.

        Raises:
            ReportNotFoundError: No report with that id
            ConflictError: Report is closed or its discussion time has expired
        """
        report = await self.get_report(report_id, for_update=True)

        if report is None:
            log.info("comment rejected", report_id=report_id, reason="not_found")
            raise ReportNotFoundError(
                report_id, message="That report does not exist, no comment has been made"
            )

        if not report.is_open:
            log.info("comment rejected", report_id=report_id, reason="closed")
            raise ConflictError("That report has been closed, no comment has been made")

        now = utcnow()
        if report.is_expired_at(now):
            log.info("comment rejected", report_id=report_id, reason="expired")
            raise ConflictError(
                "The discussion time on this report has expired, no comment has been made"
            )

        async with self.session.begin_nested():
            comment = Comment(report_id=report.id, content=content)
            self.session.add(comment)
            report.expiration_date = now + self.discussion_window
            await self.session.flush()

        await self.session.refresh(comment)
        log.info(
            "comment created",
            report_id=report_id,
            comment_id=comment.id,
            expires_at=report.expiration_date.isoformat(),
        )
        return CommentResponse.model_validate(comment)
