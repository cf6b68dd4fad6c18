"""Comment model for report discussions."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from phenomena.database import Base

if TYPE_CHECKING:
    from phenomena.models.report import Report


class Comment(Base):
    """A message attached to a report. Immutable once written."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    report_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reports.id", ondelete="CASCADE"),
        index=True,
    )
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now()
    )

    report: Mapped[Report] = relationship("Report", back_populates="comments")

    def __repr__(self):
        return f"<Comment(id={self.id}, report_id={self.report_id})>"
