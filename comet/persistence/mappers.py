"""Mappers for converting database rows to domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from comet.domain.model import (
    AreaSummary,
    Comment,
    CommentArea,
    Report,
    ReportWithComment,
)
from comet.domain.value import AreaId, AreaKey, CommentId, ReportId


def row_to_area(row: Dict[str, Any]) -> CommentArea:
    """Convert database row to CommentArea domain model.

    Args:
        row: Database row as dict

    Returns:
        CommentArea domain model
    """
    return CommentArea(
        id=AreaId(row["id"]),
        name=row["name"],
        area_key=AreaKey(row["area_key"]),
        intro=row.get("intro") or "",
        hidden=bool(row["hidden"]),
    )


def row_to_area_summary(row: Dict[str, Any]) -> AreaSummary:
    """Convert an area row carrying a ``comment_count`` column."""
    return AreaSummary(
        area=row_to_area(row),
        comment_count=row.get("comment_count") or 0,
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        area_key=AreaKey(row["area_key"]),
        content=row["content"],
        parent_id=CommentId(row.get("parent_id") or 0),
        created_at=row["created_at"],
        hidden=bool(row["hidden"]),
        likes=row["likes"],
        pinned=bool(row["pinned"]),
    )


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model.

    Args:
        row: Database row as dict

    Returns:
        Report domain model
    """
    return Report(
        id=ReportId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        reason=row["reason"],
        created_at=row["created_at"],
        resolved=bool(row["resolved"]),
    )


def row_to_report_with_comment(row: Dict[str, Any]) -> ReportWithComment:
    """Convert a report row left-joined with ``comment_content``."""
    return ReportWithComment(
        report=row_to_report(row),
        comment_content=row.get("comment_content"),
    )
