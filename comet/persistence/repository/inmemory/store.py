"""Shared in-memory tables for the in-memory repositories.

One store backs all three repositories so that cross-table behaviour
(comment counts, cascade delete, report joins) works as it does in SQL.
"""

from itertools import count

from comet.domain.model import Comment, CommentArea, Report
from comet.domain.value import AreaId, CommentId, ReportId


class InMemoryStore:
    """Rows keyed by id, with per-table id sequences."""

    def __init__(self) -> None:
        self.areas: dict[AreaId, CommentArea] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.reports: dict[ReportId, Report] = {}
        self._area_ids = count(1)
        self._comment_ids = count(1)
        self._report_ids = count(1)

    def next_area_id(self) -> AreaId:
        return AreaId(next(self._area_ids))

    def next_comment_id(self) -> CommentId:
        return CommentId(next(self._comment_ids))

    def next_report_id(self) -> ReportId:
        return ReportId(next(self._report_ids))
