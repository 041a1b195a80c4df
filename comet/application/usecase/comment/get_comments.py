"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from comet.domain.model import Comment
from comet.domain.service import CommentService
from comet.domain.value import AreaKey, Caller


class CommentItem(BaseModel):
    """Comment item in response."""

    id: int
    content: str
    parent_id: int
    created_at: datetime
    hidden: bool
    likes: int
    pinned: bool

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=comment.id,
            content=comment.content,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            hidden=comment.hidden,
            likes=comment.likes,
            pinned=comment.pinned,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    area_key: str
    caller: Caller = Field(default_factory=Caller.anonymous)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    area_key: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for reading an area's comments as a flat, oldest-first list."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Visitors get an empty list for areas that are absent or hidden, so
        the response never reveals either state.

        Args:
            request: Get comments request with area key and caller

        Returns:
            Comments in ascending created_at order
        """
        area_key = AreaKey.parse(request.area_key)

        comments = await self.comment_service.list_by_area(area_key, request.caller)

        return GetCommentsResponse(
            area_key=area_key.root,
            comments=[CommentItem.from_domain(comment) for comment in comments],
            total=len(comments),
        )
