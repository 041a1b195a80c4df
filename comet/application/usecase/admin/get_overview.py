"""Admin overview use case."""

from pydantic import BaseModel, Field

from comet.domain.model import AreaSummary
from comet.domain.service import AreaService, ReportService, require_admin
from comet.domain.value import Caller

from ..area.get_area import AreaResponse
from ..report.list_reports import ReportItem


class AreaSummaryItem(BaseModel):
    """Area with its comment count."""

    area: AreaResponse
    comment_count: int

    @classmethod
    def from_domain(cls, summary: AreaSummary) -> "AreaSummaryItem":
        return cls(
            area=AreaResponse.from_domain(summary.area),
            comment_count=summary.comment_count,
        )


class GetOverviewRequest(BaseModel):
    """Admin overview request."""

    caller: Caller = Field(default_factory=Caller.anonymous)


class GetOverviewResponse(BaseModel):
    """Admin overview response."""

    areas: list[AreaSummaryItem]
    reports: list[ReportItem]


class GetOverviewUseCase:
    """Use case for the admin dashboard: every area and every report."""

    def __init__(
        self, area_service: AreaService, report_service: ReportService
    ) -> None:
        """Initialize overview use case.

        Args:
            area_service: Area domain service
            report_service: Report domain service
        """
        self.area_service = area_service
        self.report_service = report_service

    async def execute(self, request: GetOverviewRequest) -> GetOverviewResponse:
        """Execute overview flow.

        Both lists are newest first. Hidden areas are included.

        Raises:
            UnauthorizedError: If the caller is not the administrator
        """
        require_admin(request.caller, "view the admin overview")

        areas = await self.area_service.list_areas()
        reports = await self.report_service.list_with_comment_content()

        return GetOverviewResponse(
            areas=[AreaSummaryItem.from_domain(summary) for summary in areas],
            reports=[ReportItem.from_domain(item) for item in reports],
        )
