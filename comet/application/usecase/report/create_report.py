"""Create report use case."""

from datetime import datetime

from pydantic import BaseModel

from comet.domain.service import ReportService
from comet.domain.value import CommentId


class CreateReportRequest(BaseModel):
    """Create report request."""

    comment_id: int
    reason: str


class CreateReportResponse(BaseModel):
    """Create report response."""

    id: int
    comment_id: int
    created_at: datetime


class CreateReportUseCase:
    """Use case for a visitor reporting a comment."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize create report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> CreateReportResponse:
        """Execute create report flow.

        Raises:
            ValidationError: If the reason is empty
            NotFoundError: If the comment does not exist
        """
        report = await self.report_service.create(
            comment_id=CommentId(request.comment_id),
            reason=request.reason,
        )
        return CreateReportResponse(
            id=report.id,
            comment_id=report.comment_id,
            created_at=report.created_at,
        )
