"""Report model for incident reports."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Index, Integer, Text, TIMESTAMP, func, text, true
from sqlalchemy.orm import Mapped, mapped_column, relationship
from phenomena.database import Base

if TYPE_CHECKING:
    from phenomena.models.comment import Comment


class Report(Base):
    """An incident report with an open/closed lifecycle and a discussion window."""

    __tablename__ = "reports"
    __table_args__ = (Index("ix_reports_open", "id", postgresql_where=text("is_open")),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text)
    location: Mapped[str] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text)

    # Shared secret for closing; never serialized
    password: Mapped[str] = mapped_column(Text)

    is_open: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true())

    # Unset until the first accepted comment
    expiration_date: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now()
    )

    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="report",
        cascade="all, delete-orphan",
        order_by="[Comment.created_at, Comment.id]",
    )

    def is_expired_at(self, now: datetime) -> bool:
        """Whether the discussion window closed before ``now``."""
        return self.expiration_date is not None and self.expiration_date < now

    def __repr__(self):
        return f"<Report(id={self.id}, title='{self.title}', is_open={self.is_open})>"
