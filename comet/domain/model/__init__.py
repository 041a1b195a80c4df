"""Domain model entities for comment areas."""

from comet.domain.model.area import AreaSummary, CommentArea
from comet.domain.model.comment import Comment
from comet.domain.model.report import Report, ReportWithComment

__all__ = [
    "AreaSummary",
    "Comment",
    "CommentArea",
    "Report",
    "ReportWithComment",
]
