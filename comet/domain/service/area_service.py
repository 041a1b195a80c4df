"""Comment area domain service."""

import logfire

from comet.domain.error import ConflictError, NotFoundError
from comet.domain.model.area import AreaSummary, CommentArea
from comet.domain.repository import AreaRepository
from comet.domain.value import AreaKey

from .base import Service
from .content import require_text


class AreaService(Service):
    """Domain service for comment area operations."""

    def __init__(self, area_repository: AreaRepository) -> None:
        """Initialize area service.

        Args:
            area_repository: Area repository
        """
        self.area_repository = area_repository

    async def get_by_key(self, area_key: AreaKey) -> CommentArea | None:
        """Get an area by key.

        Args:
            area_key: Area key

        Returns:
            The area if it exists, None otherwise
        """
        with logfire.span("area_service.get_by_key", area_key=area_key.root):
            return await self.area_repository.find_by_key(area_key)

    async def create(
        self, area_key: AreaKey, name: str, intro: str = ""
    ) -> CommentArea:
        """Create an area explicitly.

        Args:
            area_key: Unique key for the new area
            name: Display name (required)
            intro: Optional introduction text

        Returns:
            Created area

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the key is already taken
        """
        with logfire.span("area_service.create", area_key=area_key.root):
            area = await self.area_repository.create(
                area_key=area_key,
                name=require_text(name, "Area name"),
                intro=intro or "",
            )
            logfire.info("Comment area created", area_key=area_key.root, id=area.id)
            return area

    async def get_or_create(self, area_key: AreaKey) -> CommentArea:
        """Look up an area, creating it on first use.

        A new area is named after its key with an empty intro. When a
        concurrent request creates the same key first, the uniqueness
        violation is turned into a fresh lookup.

        Args:
            area_key: Area key

        Returns:
            Existing or newly created area

        Raises:
            ConflictError: If the key conflicts but the row cannot be read back
        """
        with logfire.span("area_service.get_or_create", area_key=area_key.root):
            area = await self.area_repository.find_by_key(area_key)
            if area is not None:
                return area

            try:
                area = await self.area_repository.create(
                    area_key=area_key, name=area_key.root, intro=""
                )
                logfire.info(
                    "Comment area auto-created", area_key=area_key.root, id=area.id
                )
                return area
            except ConflictError:
                logfire.warn(
                    "Concurrent area creation, retrying as lookup",
                    area_key=area_key.root,
                )
                area = await self.area_repository.find_by_key(area_key)
                if area is None:
                    raise
                return area

    async def set_hidden(self, area_key: AreaKey, hidden: bool) -> CommentArea:
        """Set the hidden flag of an area.

        Raises:
            NotFoundError: If the area does not exist
        """
        with logfire.span(
            "area_service.set_hidden", area_key=area_key.root, hidden=hidden
        ):
            area = await self.area_repository.update_hidden(area_key, hidden)
            if area is None:
                logfire.warn("Area not found for hide", area_key=area_key.root)
                raise NotFoundError("Comment area", area_key.root)
            logfire.info("Area hidden flag set", area_key=area_key.root, hidden=hidden)
            return area

    async def delete(self, area_key: AreaKey) -> None:
        """Delete an area, its comments and the reports on those comments.

        Raises:
            NotFoundError: If the area does not exist
        """
        with logfire.span("area_service.delete", area_key=area_key.root):
            deleted = await self.area_repository.delete_cascade(area_key)
            if not deleted:
                logfire.warn("Area not found for delete", area_key=area_key.root)
                raise NotFoundError("Comment area", area_key.root)
            logfire.info("Comment area deleted", area_key=area_key.root)

    async def list_areas(self) -> list[AreaSummary]:
        """List all areas, most recently created first, with comment counts."""
        with logfire.span("area_service.list_areas"):
            areas = await self.area_repository.list_with_counts()
            logfire.info("Areas listed", count=len(areas))
            return areas
