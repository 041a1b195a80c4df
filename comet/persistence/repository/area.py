"""SQL implementation of the comment area repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from comet.domain.error import ConflictError
from comet.domain.model import AreaSummary, CommentArea
from comet.domain.repository import AreaRepository
from comet.domain.value import AreaKey
from comet.persistence.mappers import row_to_area, row_to_area_summary
from comet.persistence.tables import (
    comment_areas_table,
    comments_table,
    reports_table,
)


class PostgresAreaRepository(AreaRepository):
    """PostgreSQL implementation of AreaRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_key(self, area_key: AreaKey) -> Optional[CommentArea]:
        """Find an area by its key."""
        stmt = select(comment_areas_table).where(
            comment_areas_table.c.area_key == area_key.root
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_area(row._asdict()) if row else None

    async def create(
        self,
        area_key: AreaKey,
        name: str,
        intro: str = "",
        hidden: bool = False,
    ) -> CommentArea:
        """Insert a new area row.

        The insert runs in a savepoint so a duplicate key leaves the request
        transaction usable for a follow-up lookup.
        """
        stmt = (
            comment_areas_table.insert()
            .values(name=name, area_key=area_key.root, intro=intro, hidden=hidden)
            .returning(comment_areas_table)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.fetchone()
        except IntegrityError as e:
            raise ConflictError("Comment area", area_key.root) from e

        return row_to_area(row._asdict())

    async def update_hidden(
        self, area_key: AreaKey, hidden: bool
    ) -> Optional[CommentArea]:
        """Set the hidden flag of an area."""
        stmt = (
            comment_areas_table.update()
            .where(comment_areas_table.c.area_key == area_key.root)
            .values(hidden=hidden)
            .returning(comment_areas_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_area(row._asdict()) if row else None

    async def delete_cascade(self, area_key: AreaKey) -> bool:
        """Delete reports, then comments, then the area itself."""
        if await self.find_by_key(area_key) is None:
            return False

        area_comment_ids = (
            select(comments_table.c.id)
            .where(comments_table.c.area_key == area_key.root)
            .scalar_subquery()
        )
        await self.session.execute(
            reports_table.delete().where(
                reports_table.c.comment_id.in_(area_comment_ids)
            )
        )
        await self.session.execute(
            comments_table.delete().where(comments_table.c.area_key == area_key.root)
        )
        await self.session.execute(
            comment_areas_table.delete().where(
                comment_areas_table.c.area_key == area_key.root
            )
        )
        await self.session.flush()
        return True

    async def list_with_counts(self) -> List[AreaSummary]:
        """List every area, newest first, with its comment count."""
        comment_count = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.area_key == comment_areas_table.c.area_key)
            .scalar_subquery()
            .label("comment_count")
        )
        stmt = select(comment_areas_table, comment_count).order_by(
            desc(comment_areas_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_area_summary(row._asdict()) for row in result.fetchall()]
