"""Administrator moderation routes.

Every route here answers 401 unless the request carries a valid admin
session cookie.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from comet.application.usecase.admin import (
    GetOverviewRequest,
    GetOverviewResponse,
    GetOverviewUseCase,
)
from comet.application.usecase.area import (
    DeleteAreaRequest,
    DeleteAreaResponse,
    DeleteAreaUseCase,
    ToggleAreaHiddenRequest,
    ToggleAreaHiddenResponse,
    ToggleAreaHiddenUseCase,
)
from comet.application.usecase.comment import (
    ToggleCommentHiddenResponse,
    ToggleCommentHiddenUseCase,
    ToggleCommentPinResponse,
    ToggleCommentPinUseCase,
    ToggleCommentRequest,
)
from comet.application.usecase.report import (
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ResolveReportRequest,
    ResolveReportResponse,
    ResolveReportUseCase,
)
from comet.domain.service import AdminAuthService

from .params import CommentIdPath, ReportIdPath
from .session import caller_from_request

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/extendedInfo", response_model=GetOverviewResponse)
async def extended_info(
    request: Request,
    get_overview_use_case: FromDishka[GetOverviewUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> GetOverviewResponse:
    """All areas with comment counts, and all reports with comment content."""
    return await get_overview_use_case.execute(
        GetOverviewRequest(caller=caller_from_request(request, admin_auth_service))
    )


@router.get("/reports", response_model=ListReportsResponse)
async def list_reports(
    request: Request,
    list_reports_use_case: FromDishka[ListReportsUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> ListReportsResponse:
    """Moderation queue, newest report first."""
    return await list_reports_use_case.execute(
        ListReportsRequest(caller=caller_from_request(request, admin_auth_service))
    )


@router.post("/area/{area_key}/delete", response_model=DeleteAreaResponse)
async def delete_area(
    area_key: str,
    request: Request,
    delete_area_use_case: FromDishka[DeleteAreaUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> DeleteAreaResponse:
    """Delete an area together with its comments and their reports."""
    return await delete_area_use_case.execute(
        DeleteAreaRequest(
            area_key=area_key,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post("/area/{area_key}/toggleHide", response_model=ToggleAreaHiddenResponse)
async def toggle_area_hidden(
    area_key: str,
    request: Request,
    toggle_area_hidden_use_case: FromDishka[ToggleAreaHiddenUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> ToggleAreaHiddenResponse:
    """Hide or unhide an area."""
    return await toggle_area_hidden_use_case.execute(
        ToggleAreaHiddenRequest(
            area_key=area_key,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post(
    "/comment/{comment_id}/toggleHide", response_model=ToggleCommentHiddenResponse
)
async def toggle_comment_hidden(
    comment_id: CommentIdPath,
    request: Request,
    toggle_comment_hidden_use_case: FromDishka[ToggleCommentHiddenUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> ToggleCommentHiddenResponse:
    """Hide or unhide a comment."""
    return await toggle_comment_hidden_use_case.execute(
        ToggleCommentRequest(
            comment_id=comment_id,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post("/comment/{comment_id}/togglePin", response_model=ToggleCommentPinResponse)
async def toggle_comment_pin(
    comment_id: CommentIdPath,
    request: Request,
    toggle_comment_pin_use_case: FromDishka[ToggleCommentPinUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> ToggleCommentPinResponse:
    """Pin or unpin a comment."""
    return await toggle_comment_pin_use_case.execute(
        ToggleCommentRequest(
            comment_id=comment_id,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post("/reports/resolve/{report_id}", response_model=ResolveReportResponse)
async def resolve_report(
    report_id: ReportIdPath,
    request: Request,
    resolve_report_use_case: FromDishka[ResolveReportUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> ResolveReportResponse:
    """Mark a report resolved."""
    return await resolve_report_use_case.execute(
        ResolveReportRequest(
            report_id=report_id,
            caller=caller_from_request(request, admin_auth_service),
        )
    )
