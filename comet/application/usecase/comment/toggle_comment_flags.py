"""Toggle comment moderation flags use cases."""

from pydantic import BaseModel, Field

from comet.domain.service import ModerationService
from comet.domain.value import Caller, CommentId


class ToggleCommentRequest(BaseModel):
    """Toggle comment flag request."""

    comment_id: int
    caller: Caller = Field(default_factory=Caller.anonymous)


class ToggleCommentHiddenResponse(BaseModel):
    """Toggle comment hidden response."""

    comment_id: int
    hidden: bool


class ToggleCommentPinResponse(BaseModel):
    """Toggle comment pin response."""

    comment_id: int
    pinned: bool


class ToggleCommentHiddenUseCase:
    """Use case for hiding or unhiding a single comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(
        self, request: ToggleCommentRequest
    ) -> ToggleCommentHiddenResponse:
        """Execute toggle hidden flow.

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the comment does not exist
        """
        hidden = await self.moderation_service.toggle_comment_hidden(
            request.caller, CommentId(request.comment_id)
        )
        return ToggleCommentHiddenResponse(
            comment_id=request.comment_id, hidden=hidden
        )


class ToggleCommentPinUseCase:
    """Use case for pinning or unpinning a single comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ToggleCommentRequest) -> ToggleCommentPinResponse:
        """Execute toggle pin flow.

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the comment does not exist
        """
        pinned = await self.moderation_service.toggle_comment_pinned(
            request.caller, CommentId(request.comment_id)
        )
        return ToggleCommentPinResponse(comment_id=request.comment_id, pinned=pinned)
