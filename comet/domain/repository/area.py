"""Comment area repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comet.domain.model.area import AreaSummary, CommentArea
from comet.domain.value import AreaKey


class AreaRepository(ABC):
    """Repository for CommentArea entity.

    Defines the contract for area persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_key(self, area_key: AreaKey) -> Optional[CommentArea]:
        """Find an area by its key.

        Args:
            area_key: The area's unique key

        Returns:
            The area if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self,
        area_key: AreaKey,
        name: str,
        intro: str = "",
        hidden: bool = False,
    ) -> CommentArea:
        """Insert a new area row.

        Args:
            area_key: Unique key for the new area
            name: Display name
            intro: Optional introduction text
            hidden: Initial hidden flag

        Returns:
            The created area with its generated id

        Raises:
            ConflictError: If an area with this key already exists
        """
        pass

    @abstractmethod
    async def update_hidden(
        self, area_key: AreaKey, hidden: bool
    ) -> Optional[CommentArea]:
        """Set the hidden flag of an area.

        Args:
            area_key: The area's key
            hidden: New flag value

        Returns:
            The updated area, or None if no area has this key
        """
        pass

    @abstractmethod
    async def delete_cascade(self, area_key: AreaKey) -> bool:
        """Delete an area together with its comments and their reports.

        Args:
            area_key: The area's key

        Returns:
            True if the area existed and was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def list_with_counts(self) -> List[AreaSummary]:
        """List every area, most recently created first.

        Returns:
            Areas annotated with their current comment count
        """
        pass
