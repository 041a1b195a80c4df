"""Visibility rules for visitors and the administrator.

Visitors must never learn whether an area exists or was hidden: comment
list reads for absent or hidden areas look exactly like an empty area. The
administrator sees everything.

Hidden comments stay in list payloads with a ``hidden`` flag and the client
renders a placeholder. With ``redact_hidden_comments`` enabled their content
is blanked for visitors instead.
"""

from comet.domain.error import AreaHiddenError, NotFoundError
from comet.domain.model import Comment, CommentArea
from comet.domain.value import AreaKey, Caller


class VisibilityPolicy:
    """Decides what a caller may see of areas and comments."""

    def __init__(self, redact_hidden_comments: bool = False) -> None:
        self.redact_hidden_comments = redact_hidden_comments

    def can_view_area(self, area: CommentArea | None, caller: Caller) -> bool:
        """Whether the caller may see the area and its comments."""
        if area is None:
            return False
        return caller.is_admin or not area.hidden

    def check_area_page(
        self, area: CommentArea | None, area_key: AreaKey, caller: Caller
    ) -> CommentArea:
        """Gate access to an area page.

        Raises:
            NotFoundError: If the area does not exist
            AreaHiddenError: If the area is hidden and the caller is a visitor
        """
        if area is None:
            raise NotFoundError("Comment area", area_key.root)
        if not self.can_view_area(area, caller):
            raise AreaHiddenError(area_key.root)
        return area

    def check_can_post(self, area: CommentArea, caller: Caller) -> None:
        """Refuse visitor posts into hidden areas.

        Raises:
            AreaHiddenError: If the area is hidden and the caller is a visitor
        """
        if not self.can_view_area(area, caller):
            raise AreaHiddenError(area.area_key.root)

    def filter_comments(
        self, area: CommentArea | None, comments: list[Comment], caller: Caller
    ) -> list[Comment]:
        """Apply area visibility and hidden-comment redaction to a list.

        Absent or hidden areas yield an empty list for visitors. Hidden
        comments are kept in place.
        """
        if not self.can_view_area(area, caller):
            return []
        if caller.is_admin or not self.redact_hidden_comments:
            return list(comments)
        return [
            comment.model_copy(update={"content": ""}) if comment.hidden else comment
            for comment in comments
        ]
