"""Shared pytest fixtures for repository tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import Mock

from phenomena.models.comment import Comment
from phenomena.models.report import Report


@pytest.fixture
def mock_result():
    """Create a configurable mock result object."""

    def _create_result(
        scalar_one_or_none_value=None,
        scalar_one_value=0,
        scalars_all_value=None,
        rowcount=0,
    ):
        result = Mock()
        result.scalar_one_or_none = Mock(return_value=scalar_one_or_none_value)
        result.scalar_one = Mock(return_value=scalar_one_value)
        result.scalars = Mock(
            return_value=Mock(all=Mock(return_value=scalars_all_value or []))
        )
        result.rowcount = rowcount
        return result

    return _create_result


@pytest.fixture
def make_report():
    """Factory for transient Report rows (not attached to any session)."""

    def _make(
        report_id=1,
        title="Fire",
        location="Main St",
        description="Smoke visible",
        password="abc",
        is_open=True,
        expiration_date=None,
        comments=None,
    ):
        report = Report(
            id=report_id,
            title=title,
            location=location,
            description=description,
            password=password,
            is_open=is_open,
            expiration_date=expiration_date,
            created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
        )
        report.comments = comments or []
        return report

    return _make


@pytest.fixture
def make_comment():
    """Factory for transient Comment rows."""

    def _make(comment_id=1, report_id=1, content="Still burning?"):
        return Comment(
            id=comment_id,
            report_id=report_id,
            content=content,
            created_at=datetime(2026, 10, 1, 12, tzinfo=timezone.utc),
        )

    return _make
