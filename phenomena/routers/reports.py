"""Reports router: list, submit, close and comment."""

from fastapi import APIRouter

from phenomena.dependencies import ReportRepoDep
from phenomena.schemas.reports import (
    CloseReportResponse,
    CommentCreate,
    CommentResponse,
    ReportClose,
    ReportCreate,
    ReportListResponse,
    ReportResponse,
)
from phenomena.utils.logger import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=ReportListResponse)
async def list_reports(report_repo: ReportRepoDep) -> ReportListResponse:
    """List open reports with their comments."""
    reports = await report_repo.list_open_reports()
    return ReportListResponse(reports=reports)


@router.post("", response_model=ReportResponse)
async def create_report(request: ReportCreate, report_repo: ReportRepoDep) -> ReportResponse:
    """Submit a new report. The password is stored but never returned."""
    return await report_repo.create_report(
        title=request.title,
        location=request.location,
        description=request.description,
        password=request.password,
    )


@router.delete("/{report_id}", response_model=CloseReportResponse)
async def close_report(
    report_id: int,
    request: ReportClose,
    report_repo: ReportRepoDep,
) -> CloseReportResponse:
    """Close a report. Requires the password given at creation."""
    return await report_repo.close_report(report_id, request.password)


@router.post("/{report_id}/comments", response_model=CommentResponse)
async def create_report_comment(
    report_id: int,
    request: CommentCreate,
    report_repo: ReportRepoDep,
) -> CommentResponse:
    """Comment on an open report, extending its discussion window."""
    return await report_repo.create_report_comment(report_id, request.content)
