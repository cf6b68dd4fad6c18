"""Database models."""

from phenomena.models.report import Report
from phenomena.models.comment import Comment

__all__ = [
    "Report",
    "Comment",
]
