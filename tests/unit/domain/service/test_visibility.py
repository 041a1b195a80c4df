"""Unit tests for VisibilityPolicy."""

import pytest

from comet.domain.error import AreaHiddenError, NotFoundError
from comet.domain.model import CommentArea
from comet.domain.service import VisibilityPolicy
from comet.domain.value import AreaId, AreaKey, Caller


def _area(hidden: bool = False) -> CommentArea:
    return CommentArea(
        id=AreaId(1), name="Blog", area_key=AreaKey("blog1"), hidden=hidden
    )


class TestCanViewArea:
    """Tests for area visibility."""

    def test_absent_area_is_not_visible(self):
        policy = VisibilityPolicy()

        assert policy.can_view_area(None, Caller.anonymous()) is False
        assert policy.can_view_area(None, Caller.admin()) is False

    def test_hidden_area_visible_only_to_admin(self):
        policy = VisibilityPolicy()
        area = _area(hidden=True)

        assert policy.can_view_area(area, Caller.anonymous()) is False
        assert policy.can_view_area(area, Caller.admin()) is True

    def test_visible_area_visible_to_everyone(self):
        policy = VisibilityPolicy()

        assert policy.can_view_area(_area(), Caller.anonymous()) is True


class TestCheckAreaPage:
    """Tests for area page gating."""

    def test_absent_area_raises_not_found(self):
        with pytest.raises(NotFoundError):
            VisibilityPolicy().check_area_page(
                None, AreaKey("blog1"), Caller.anonymous()
            )

    def test_hidden_area_raises_for_visitor(self):
        with pytest.raises(AreaHiddenError):
            VisibilityPolicy().check_area_page(
                _area(hidden=True), AreaKey("blog1"), Caller.anonymous()
            )

    def test_hidden_area_returned_to_admin(self):
        area = _area(hidden=True)

        result = VisibilityPolicy().check_area_page(
            area, AreaKey("blog1"), Caller.admin()
        )

        assert result == area

    def test_visitor_cannot_post_to_hidden_area(self):
        with pytest.raises(AreaHiddenError):
            VisibilityPolicy().check_can_post(_area(hidden=True), Caller.anonymous())

    def test_admin_can_post_to_hidden_area(self):
        VisibilityPolicy().check_can_post(_area(hidden=True), Caller.admin())


class TestFilterComments:
    """Tests for comment list filtering."""

    def test_hidden_comments_kept_with_content_by_default(self, comment_factory):
        comments = [comment_factory(1), comment_factory(2, hidden=True)]

        result = VisibilityPolicy().filter_comments(
            _area(), comments, Caller.anonymous()
        )

        assert result == comments
        assert result[1].content == "comment 2"

    def test_redaction_blanks_hidden_content_for_visitors(self, comment_factory):
        comments = [comment_factory(1), comment_factory(2, hidden=True)]
        policy = VisibilityPolicy(redact_hidden_comments=True)

        result = policy.filter_comments(_area(), comments, Caller.anonymous())

        assert [c.id for c in result] == [1, 2]
        assert result[0].content == "comment 1"
        assert result[1].content == ""
        assert result[1].hidden is True

    def test_redaction_does_not_apply_to_admin(self, comment_factory):
        comments = [comment_factory(1, hidden=True)]
        policy = VisibilityPolicy(redact_hidden_comments=True)

        result = policy.filter_comments(_area(), comments, Caller.admin())

        assert result[0].content == "comment 1"

    def test_hidden_area_yields_empty_list_for_visitor(self, comment_factory):
        result = VisibilityPolicy().filter_comments(
            _area(hidden=True), [comment_factory(1)], Caller.anonymous()
        )

        assert result == []
