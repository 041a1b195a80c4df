"""SQL implementation of the report repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from comet.domain.model import Report, ReportWithComment
from comet.domain.repository import ReportRepository
from comet.domain.value import CommentId, ReportId
from comet.persistence.mappers import row_to_report, row_to_report_with_comment
from comet.persistence.tables import comments_table, reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def create(self, comment_id: CommentId, reason: str) -> Report:
        """Insert an unresolved report."""
        stmt = (
            reports_table.insert()
            .values(comment_id=comment_id, reason=reason, resolved=False)
            .returning(reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_report(row._asdict())

    async def mark_resolved(self, report_id: ReportId) -> Optional[Report]:
        """Set resolved to True."""
        stmt = (
            reports_table.update()
            .where(reports_table.c.id == report_id)
            .values(resolved=True)
            .returning(reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_report(row._asdict()) if row else None

    async def list_with_comment_content(self) -> List[ReportWithComment]:
        """List reports newest first, left-joined with comment content."""
        stmt = (
            select(reports_table, comments_table.c.content.label("comment_content"))
            .select_from(
                reports_table.outerjoin(
                    comments_table, comments_table.c.id == reports_table.c.comment_id
                )
            )
            .order_by(desc(reports_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_report_with_comment(row._asdict()) for row in result.fetchall()]
