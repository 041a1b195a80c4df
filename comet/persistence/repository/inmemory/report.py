"""In-memory report repository for testing."""

from typing import Optional

from comet.domain.model import Report, ReportWithComment
from comet.domain.model.common import utc_now
from comet.domain.repository import ReportRepository
from comet.domain.value import CommentId, ReportId

from .store import InMemoryStore


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._store.reports.get(report_id)

    async def create(self, comment_id: CommentId, reason: str) -> Report:
        """Insert an unresolved report."""
        report = Report(
            id=self._store.next_report_id(),
            comment_id=comment_id,
            reason=reason,
            created_at=utc_now(),
        )
        self._store.reports[report.id] = report
        return report

    async def mark_resolved(self, report_id: ReportId) -> Optional[Report]:
        """Set resolved to True."""
        report = self._store.reports.get(report_id)
        if report is None:
            return None
        updated = report.model_copy(update={"resolved": True})
        self._store.reports[report_id] = updated
        return updated

    async def list_with_comment_content(self) -> list[ReportWithComment]:
        """List reports newest first, joined with comment content."""
        reports = sorted(self._store.reports.values(), key=lambda r: r.id, reverse=True)
        result = []
        for report in reports:
            comment = self._store.comments.get(report.comment_id)
            result.append(
                ReportWithComment(
                    report=report,
                    comment_content=comment.content if comment else None,
                )
            )
        return result
