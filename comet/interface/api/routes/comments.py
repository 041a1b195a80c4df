"""Comment routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict, Field

from comet.application.usecase.comment import (
    CommentItem,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    PostCommentRequest,
    PostCommentResponse,
    PostCommentUseCase,
)
from comet.application.usecase.report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
)
from comet.domain.service import AdminAuthService
from comet.domain.value import MAX_ID

from .params import CommentIdPath
from .session import caller_from_request, client_ip

logger = logging.getLogger(__name__)

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class PostCommentAPIRequest(BaseModel):
    """API request for posting a comment or reply."""

    model_config = ConfigDict(populate_by_name=True)

    content: str
    parent_id: int | None = Field(default=None, ge=0, le=MAX_ID)
    # Token produced by the Turnstile widget on the embedding page
    turnstile_token: str | None = Field(default=None, alias="cf-turnstile-response")


class ReportAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: str


@router.get("/area/{area_key}/comments", response_model=list[CommentItem])
async def get_comments(
    area_key: str,
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> list[CommentItem]:
    """List an area's comments, oldest first.

    Absent and hidden areas answer an empty list to visitors.
    """
    response = await get_comments_use_case.execute(
        GetCommentsRequest(
            area_key=area_key,
            caller=caller_from_request(request, admin_auth_service),
        )
    )
    return response.comments


@router.get("/area/{area_key}/thread", response_model=GetThreadResponse)
async def get_thread(
    area_key: str,
    request: Request,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> GetThreadResponse:
    """Get an area's comments assembled into reply trees."""
    return await get_thread_use_case.execute(
        GetThreadRequest(
            area_key=area_key,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post(
    "/area/{area_key}/comment",
    response_model=PostCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    area_key: str,
    body: PostCommentAPIRequest,
    request: Request,
    post_comment_use_case: FromDishka[PostCommentUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> PostCommentResponse:
    """Post a comment, or a reply when ``parent_id`` is set.

    The area is created if it does not exist yet.
    """
    logger.info(f"Posting comment to area {area_key}")
    return await post_comment_use_case.execute(
        PostCommentRequest(
            area_key=area_key,
            content=body.content,
            parent_id=body.parent_id,
            captcha_token=body.turnstile_token,
            remote_ip=client_ip(request),
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post("/comment/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: CommentIdPath,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
) -> LikeCommentResponse:
    """Add a like to a comment."""
    return await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=comment_id)
    )


@router.post(
    "/comment/{comment_id}/report",
    response_model=CreateReportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    comment_id: CommentIdPath,
    body: ReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
) -> CreateReportResponse:
    """Report a comment to the administrator."""
    return await create_report_use_case.execute(
        CreateReportRequest(comment_id=comment_id, reason=body.reason)
    )
