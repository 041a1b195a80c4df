"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comet.domain.model.report import Report, ReportWithComment
from comet.domain.value import CommentId, ReportId


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, comment_id: CommentId, reason: str) -> Report:
        """Insert an unresolved report.

        Args:
            comment_id: Reported comment
            reason: Escaped, non-empty reason text

        Returns:
            The stored report
        """
        pass

    @abstractmethod
    async def mark_resolved(self, report_id: ReportId) -> Optional[Report]:
        """Set resolved to True.

        Returns:
            The updated report, or None if it does not exist
        """
        pass

    @abstractmethod
    async def list_with_comment_content(self) -> List[ReportWithComment]:
        """List every report, newest first, joined with its comment content.

        Returns:
            Reports with the reported comment's content (None if missing)
        """
        pass
