"""List reports use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from comet.domain.model import ReportWithComment
from comet.domain.service import ReportService, require_admin
from comet.domain.value import Caller


class ReportItem(BaseModel):
    """Report item in response.

    ``comment_content`` is None when the reported comment is gone.
    """

    id: int
    comment_id: int
    reason: str
    created_at: datetime
    resolved: bool
    comment_content: str | None

    @classmethod
    def from_domain(cls, item: ReportWithComment) -> "ReportItem":
        return cls(
            id=item.report.id,
            comment_id=item.report.comment_id,
            reason=item.report.reason,
            created_at=item.report.created_at,
            resolved=item.report.resolved,
            comment_content=item.comment_content,
        )


class ListReportsRequest(BaseModel):
    """List reports request."""

    caller: Caller = Field(default_factory=Caller.anonymous)


class ListReportsResponse(BaseModel):
    """List reports response."""

    reports: list[ReportItem]
    total: int


class ListReportsUseCase:
    """Use case for the moderation queue, newest report first."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        """Execute list reports flow.

        Raises:
            UnauthorizedError: If the caller is not the administrator
        """
        require_admin(request.caller, "list reports")

        reports = await self.report_service.list_with_comment_content()
        return ListReportsResponse(
            reports=[ReportItem.from_domain(item) for item in reports],
            total=len(reports),
        )
