"""Repository layer for data access."""

from phenomena.repositories.report_repository import ReportRepository

__all__ = [
    "ReportRepository",
]
