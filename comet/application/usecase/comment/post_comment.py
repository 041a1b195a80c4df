"""Post comment use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from comet.domain.error import HumanVerificationError
from comet.domain.service import (
    AreaService,
    CaptchaVerifier,
    CommentService,
    VisibilityPolicy,
)
from comet.domain.service.content import require_text
from comet.domain.value import AreaKey, Caller, CommentId


class PostCommentRequest(BaseModel):
    """Post comment request."""

    area_key: str
    content: str
    parent_id: int | None = None
    captcha_token: str | None = None
    remote_ip: str | None = None
    caller: Caller = Field(default_factory=Caller.anonymous)


class PostCommentResponse(BaseModel):
    """Post comment response."""

    id: int
    area_key: str
    content: str
    parent_id: int
    created_at: datetime


class PostCommentUseCase:
    """Use case for posting a comment or reply."""

    def __init__(
        self,
        area_service: AreaService,
        comment_service: CommentService,
        visibility_policy: VisibilityPolicy,
        captcha_verifier: CaptchaVerifier,
    ) -> None:
        """Initialize post comment use case.

        Args:
            area_service: Area domain service
            comment_service: Comment domain service
            visibility_policy: Visibility rules
            captcha_verifier: Human verification gate
        """
        self.area_service = area_service
        self.comment_service = comment_service
        self.visibility_policy = visibility_policy
        self.captcha_verifier = captcha_verifier

    async def execute(self, request: PostCommentRequest) -> PostCommentResponse:
        """Execute post comment flow.

        The area is created on first post. Posting into a hidden area is
        refused for visitors.

        Args:
            request: Post comment request

        Returns:
            The stored comment

        Raises:
            ValidationError: If the content or area key is empty
            HumanVerificationError: If the CAPTCHA token is rejected
            AreaHiddenError: If the area is hidden and the caller is a visitor
        """
        area_key = AreaKey.parse(request.area_key)
        require_text(request.content, "Comment content")

        if not await self.captcha_verifier.verify(
            request.captcha_token, request.remote_ip
        ):
            raise HumanVerificationError()

        area = await self.area_service.get_or_create(area_key)
        self.visibility_policy.check_can_post(area, request.caller)

        parent_id = CommentId(request.parent_id) if request.parent_id else None
        comment = await self.comment_service.insert(
            area_key=area_key,
            content=request.content,
            parent_id=parent_id,
        )

        return PostCommentResponse(
            id=comment.id,
            area_key=comment.area_key.root,
            content=comment.content,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
        )
