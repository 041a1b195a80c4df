"""Report entity."""

from datetime import datetime

from pydantic import Field

from comet.domain.model.common import DomainModel, utc_now
from comet.domain.value import CommentId, ReportId


class Report(DomainModel):
    """Abuse report against a comment.

    ``resolved`` only ever moves from False to True.
    """

    id: ReportId
    comment_id: CommentId
    reason: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)
    resolved: bool = False


class ReportWithComment(DomainModel):
    """Report joined with the content of the reported comment.

    ``comment_content`` is None when the comment no longer exists.
    """

    report: Report
    comment_content: str | None = None
