"""Comment domain service."""

import logfire

from comet.domain.error import NotFoundError
from comet.domain.model.comment import Comment
from comet.domain.repository import AreaRepository, CommentRepository
from comet.domain.value import ROOT_PARENT_ID, AreaKey, Caller, CommentId

from .base import Service
from .content import plain_text_to_html, require_text
from .visibility import VisibilityPolicy


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        area_repository: AreaRepository,
        visibility_policy: VisibilityPolicy,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            area_repository: Area repository, for visibility lookups
            visibility_policy: Rules for what visitors may see
        """
        self.comment_repository = comment_repository
        self.area_repository = area_repository
        self.visibility_policy = visibility_policy

    async def insert(
        self,
        area_key: AreaKey,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Store a new comment or reply.

        The content is trimmed, escaped and has its newlines converted to
        ``<br>`` before it is stored. The parent is not checked; replies to
        missing parents are kept and later surface as orphans.

        Args:
            area_key: Owning area key
            content: Raw comment text
            parent_id: Parent comment ID for replies (None or 0 for a root)

        Returns:
            Stored comment

        Raises:
            ValidationError: If the content is empty after trimming
        """
        with logfire.span(
            "comment_service.insert",
            area_key=area_key.root,
            parent_id=parent_id or 0,
        ):
            text = require_text(content, "Comment content")

            comment = await self.comment_repository.insert(
                area_key=area_key,
                content=plain_text_to_html(text),
                parent_id=parent_id or ROOT_PARENT_ID,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                area_key=area_key.root,
                parent_id=comment.parent_id,
            )
            return comment

    async def list_by_area(
        self, area_key: AreaKey, caller: Caller | None = None
    ) -> list[Comment]:
        """List an area's comments, oldest first, as the caller may see them.

        Visitors get an empty list for absent or hidden areas.

        Args:
            area_key: Area key
            caller: Who is asking (anonymous when omitted)

        Returns:
            Comments in ascending created_at order
        """
        caller = caller or Caller.anonymous()
        with logfire.span(
            "comment_service.list_by_area",
            area_key=area_key.root,
            is_admin=caller.is_admin,
        ):
            area = await self.area_repository.find_by_key(area_key)
            if not self.visibility_policy.can_view_area(area, caller):
                logfire.info(
                    "Area not visible, returning no comments",
                    area_key=area_key.root,
                    exists=area is not None,
                )
                return []

            comments = await self.comment_repository.find_by_area(area_key)
            visible = self.visibility_policy.filter_comments(area, comments, caller)
            logfire.info(
                "Comments retrieved for area",
                area_key=area_key.root,
                count=len(visible),
            )
            return visible

    async def get_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def like(self, comment_id: CommentId) -> Comment:
        """Add one like to a comment.

        There is no way to take a like back.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.like", comment_id=comment_id):
            comment = await self.comment_repository.increment_likes(comment_id)
            if comment is None:
                logfire.warn("Comment not found for like", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment liked", comment_id=comment_id, likes=comment.likes)
            return comment

    async def set_hidden(self, comment_id: CommentId, hidden: bool) -> Comment:
        """Set the hidden flag of a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.set_hidden", comment_id=comment_id, hidden=hidden
        ):
            comment = await self.comment_repository.update_hidden(comment_id, hidden)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment hidden flag set", comment_id=comment_id, hidden=hidden)
            return comment

    async def set_pinned(self, comment_id: CommentId, pinned: bool) -> Comment:
        """Set the pinned flag of a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.set_pinned", comment_id=comment_id, pinned=pinned
        ):
            comment = await self.comment_repository.update_pinned(comment_id, pinned)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment pinned flag set", comment_id=comment_id, pinned=pinned)
            return comment
