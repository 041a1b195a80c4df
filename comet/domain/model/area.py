"""Comment area entity.

An area is one embeddable discussion surface, addressed by its area key.
"""

from pydantic import Field

from comet.domain.model.common import DomainModel
from comet.domain.value import AreaId, AreaKey


class CommentArea(DomainModel):
    """Comment area entity.

    Areas are created explicitly by the admin or implicitly the first time a
    visitor opens the embed view or posts a comment. They are only removed by
    an explicit admin delete, which cascades to comments and their reports.
    """

    id: AreaId
    name: str
    area_key: AreaKey
    intro: str = ""
    hidden: bool = False


class AreaSummary(DomainModel):
    """Area row for the admin overview, annotated with its live comment count."""

    area: CommentArea
    comment_count: int = Field(default=0, ge=0)
