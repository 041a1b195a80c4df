"""In-memory comment area repository for testing."""

from typing import Optional

from comet.domain.error import ConflictError
from comet.domain.model import AreaSummary, CommentArea
from comet.domain.repository import AreaRepository
from comet.domain.value import AreaKey

from .store import InMemoryStore


class InMemoryAreaRepository(AreaRepository):
    """In-memory implementation of AreaRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_key(self, area_key: AreaKey) -> Optional[CommentArea]:
        """Find an area by its key."""
        return next(
            (a for a in self._store.areas.values() if a.area_key == area_key), None
        )

    async def create(
        self,
        area_key: AreaKey,
        name: str,
        intro: str = "",
        hidden: bool = False,
    ) -> CommentArea:
        """Insert a new area, enforcing key uniqueness."""
        if await self.find_by_key(area_key) is not None:
            raise ConflictError("Comment area", area_key.root)

        area = CommentArea(
            id=self._store.next_area_id(),
            name=name,
            area_key=area_key,
            intro=intro,
            hidden=hidden,
        )
        self._store.areas[area.id] = area
        return area

    async def update_hidden(
        self, area_key: AreaKey, hidden: bool
    ) -> Optional[CommentArea]:
        """Set the hidden flag of an area."""
        area = await self.find_by_key(area_key)
        if area is None:
            return None
        updated = area.model_copy(update={"hidden": hidden})
        self._store.areas[area.id] = updated
        return updated

    async def delete_cascade(self, area_key: AreaKey) -> bool:
        """Delete reports, then comments, then the area itself."""
        area = await self.find_by_key(area_key)
        if area is None:
            return False

        comment_ids = {
            c.id for c in self._store.comments.values() if c.area_key == area_key
        }
        for report_id in [
            r.id for r in self._store.reports.values() if r.comment_id in comment_ids
        ]:
            del self._store.reports[report_id]
        for comment_id in comment_ids:
            del self._store.comments[comment_id]
        del self._store.areas[area.id]
        return True

    async def list_with_counts(self) -> list[AreaSummary]:
        """List every area, newest first, with its comment count."""
        areas = sorted(self._store.areas.values(), key=lambda a: a.id, reverse=True)
        return [
            AreaSummary(
                area=area,
                comment_count=sum(
                    1
                    for c in self._store.comments.values()
                    if c.area_key == area.area_key
                ),
            )
            for area in areas
        ]
