"""Like comment use case."""

from pydantic import BaseModel

from comet.domain.service import CommentService
from comet.domain.value import CommentId


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: int


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    comment_id: int
    likes: int


class LikeCommentUseCase:
    """Use case for liking a comment.

    Likes are not tied to a visitor, so the same person may like repeatedly.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.like(CommentId(request.comment_id))
        return LikeCommentResponse(comment_id=comment.id, likes=comment.likes)
