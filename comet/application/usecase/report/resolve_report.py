"""Resolve report use case."""

from pydantic import BaseModel, Field

from comet.domain.service import ModerationService
from comet.domain.value import Caller, ReportId


class ResolveReportRequest(BaseModel):
    """Resolve report request."""

    report_id: int
    caller: Caller = Field(default_factory=Caller.anonymous)


class ResolveReportResponse(BaseModel):
    """Resolve report response."""

    report_id: int
    resolved: bool


class ResolveReportUseCase:
    """Use case for the administrator closing a report."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ResolveReportRequest) -> ResolveReportResponse:
        """Execute resolve flow.

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the report does not exist
        """
        resolved = await self.moderation_service.resolve_report(
            request.caller, ReportId(request.report_id)
        )
        return ResolveReportResponse(report_id=request.report_id, resolved=resolved)
