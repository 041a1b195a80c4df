"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comet.domain.model.comment import Comment
from comet.domain.value import AreaKey, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(
        self, area_key: AreaKey, content: str, parent_id: CommentId
    ) -> Comment:
        """Insert a new comment with default flags and zero likes.

        The store assigns id and created_at.

        Args:
            area_key: Owning area key
            content: Escaped comment content
            parent_id: Parent comment id, 0 for a root comment

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def find_by_area(self, area_key: AreaKey) -> List[Comment]:
        """Find all comments of an area, oldest first.

        Ties on created_at are broken by id so the order is stable.

        Args:
            area_key: The area key

        Returns:
            List of comments in ascending created_at order
        """
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> Optional[Comment]:
        """Add one like in a single statement.

        Args:
            comment_id: The comment ID

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def update_hidden(
        self, comment_id: CommentId, hidden: bool
    ) -> Optional[Comment]:
        """Set the hidden flag of a comment.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def update_pinned(
        self, comment_id: CommentId, pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a comment.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass
