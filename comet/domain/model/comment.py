"""Comment entity."""

from datetime import datetime

from pydantic import Field

from comet.domain.model.common import DomainModel, utc_now
from comet.domain.value import ROOT_PARENT_ID, AreaKey, CommentId


class Comment(DomainModel):
    """Comment entity.

    A post or reply inside exactly one area. Content is stored already
    escaped, with line breaks converted to ``<br>``. Content is never edited;
    only the moderation flags and the like counter change after insert.

    parent_id of 0 marks a root comment. A non-zero parent_id is not
    checked against the store, so it may point to a comment that does not
    exist or lives in another area.
    """

    id: CommentId
    area_key: AreaKey
    content: str
    parent_id: CommentId = ROOT_PARENT_ID
    created_at: datetime = Field(default_factory=utc_now)
    hidden: bool = False
    likes: int = Field(default=0, ge=0)
    pinned: bool = False

    @property
    def is_root(self) -> bool:
        """Whether this comment starts a thread."""
        return not self.parent_id
