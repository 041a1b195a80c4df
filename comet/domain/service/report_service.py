"""Report domain service."""

import logfire

from comet.domain.error import NotFoundError
from comet.domain.model.report import Report, ReportWithComment
from comet.domain.repository import CommentRepository, ReportRepository
from comet.domain.value import CommentId, ReportId

from .base import Service
from .content import plain_text_to_html, require_text


class ReportService(Service):
    """Domain service for abuse reports."""

    def __init__(
        self,
        report_repository: ReportRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            comment_repository: Comment repository, to check report targets
        """
        self.report_repository = report_repository
        self.comment_repository = comment_repository

    async def create(self, comment_id: CommentId, reason: str) -> Report:
        """File a report against a comment.

        Args:
            comment_id: Reported comment
            reason: Free-text reason (required)

        Returns:
            Stored, unresolved report

        Raises:
            ValidationError: If the reason is empty after trimming
            NotFoundError: If the comment does not exist
        """
        with logfire.span("report_service.create", comment_id=comment_id):
            text = require_text(reason, "Report reason")

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Report target not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)

            report = await self.report_repository.create(
                comment_id=comment_id, reason=plain_text_to_html(text)
            )
            logfire.info("Report created", report_id=report.id, comment_id=comment_id)
            return report

    async def get_by_id(self, report_id: ReportId) -> Report | None:
        """Get a report by ID."""
        with logfire.span("report_service.get_by_id", report_id=report_id):
            return await self.report_repository.find_by_id(report_id)

    async def resolve(self, report_id: ReportId) -> Report:
        """Mark a report resolved.

        Resolving an already resolved report is a no-op.

        Raises:
            NotFoundError: If the report does not exist
        """
        with logfire.span("report_service.resolve", report_id=report_id):
            report = await self.report_repository.find_by_id(report_id)
            if report is None:
                logfire.warn("Report not found for resolve", report_id=report_id)
                raise NotFoundError("Report", report_id)

            if report.resolved:
                logfire.info("Report already resolved", report_id=report_id)
                return report

            resolved = await self.report_repository.mark_resolved(report_id)
            if resolved is None:
                raise NotFoundError("Report", report_id)
            logfire.info("Report resolved", report_id=report_id)
            return resolved

    async def list_with_comment_content(self) -> list[ReportWithComment]:
        """List all reports, newest first, with the reported comment's content."""
        with logfire.span("report_service.list_with_comment_content"):
            reports = await self.report_repository.list_with_comment_content()
            logfire.info("Reports listed", count=len(reports))
            return reports
