"""SQL implementation of the comment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from comet.domain.model import Comment
from comet.domain.repository import CommentRepository
from comet.domain.value import AreaKey, CommentId
from comet.persistence.mappers import row_to_comment
from comet.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def insert(
        self, area_key: AreaKey, content: str, parent_id: CommentId
    ) -> Comment:
        """Insert a comment; id and created_at come from the database."""
        stmt = (
            comments_table.insert()
            .values(
                area_key=area_key.root,
                content=content,
                parent_id=parent_id,
                hidden=False,
                likes=0,
                pinned=False,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_by_area(self, area_key: AreaKey) -> List[Comment]:
        """Find all comments of an area, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.area_key == area_key.root)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def increment_likes(self, comment_id: CommentId) -> Optional[Comment]:
        """Atomically increment likes by 1."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(likes=comments_table.c.likes + 1)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def update_hidden(
        self, comment_id: CommentId, hidden: bool
    ) -> Optional[Comment]:
        """Set the hidden flag of a comment."""
        return await self._update_flag(comment_id, hidden=hidden)

    async def update_pinned(
        self, comment_id: CommentId, pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a comment."""
        return await self._update_flag(comment_id, pinned=pinned)

    async def _update_flag(
        self, comment_id: CommentId, **values: bool
    ) -> Optional[Comment]:
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(**values)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None
