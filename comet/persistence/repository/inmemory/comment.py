"""In-memory comment repository for testing."""

from typing import Optional

from comet.domain.model import Comment
from comet.domain.model.common import utc_now
from comet.domain.repository import CommentRepository
from comet.domain.value import AreaKey, CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def insert(
        self, area_key: AreaKey, content: str, parent_id: CommentId
    ) -> Comment:
        """Insert a comment with a fresh id and timestamp."""
        comment = Comment(
            id=self._store.next_comment_id(),
            area_key=area_key,
            content=content,
            parent_id=parent_id,
            created_at=utc_now(),
        )
        self._store.comments[comment.id] = comment
        return comment

    async def find_by_area(self, area_key: AreaKey) -> list[Comment]:
        """Find all comments of an area, oldest first."""
        comments = [c for c in self._store.comments.values() if c.area_key == area_key]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def increment_likes(self, comment_id: CommentId) -> Optional[Comment]:
        """Increment likes by 1."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        return self._replace(comment, likes=comment.likes + 1)

    async def update_hidden(
        self, comment_id: CommentId, hidden: bool
    ) -> Optional[Comment]:
        """Set the hidden flag of a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        return self._replace(comment, hidden=hidden)

    async def update_pinned(
        self, comment_id: CommentId, pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        return self._replace(comment, pinned=pinned)

    def _replace(self, comment: Comment, **changes) -> Comment:
        # Comments are immutable, store an updated copy
        updated = comment.model_copy(update=changes)
        self._store.comments[comment.id] = updated
        return updated
