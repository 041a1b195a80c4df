"""Unit tests for the moderation state machine and service."""

import pytest

from comet.domain.error import NotFoundError, UnauthorizedError
from comet.domain.service import (
    AreaService,
    CommentService,
    ModerationAction,
    ModerationFlag,
    ModerationService,
    ModerationStateMachine,
    ReportService,
)
from comet.domain.value import AreaKey, Caller, CommentId, ReportId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestModerationStateMachine:
    """Tests for flag transitions."""

    @pytest.mark.parametrize(
        "flag,action",
        [
            (ModerationFlag.AREA_HIDDEN, ModerationAction.TOGGLE_HIDE),
            (ModerationFlag.COMMENT_HIDDEN, ModerationAction.TOGGLE_HIDE),
            (ModerationFlag.COMMENT_PINNED, ModerationAction.TOGGLE_PIN),
        ],
    )
    def test_toggles_flip_both_ways(self, flag, action):
        machine = ModerationStateMachine()

        assert machine.next_state(flag, action, False) is True
        assert machine.next_state(flag, action, True) is False

    def test_resolve_is_one_way(self):
        machine = ModerationStateMachine()

        for current in (False, True):
            assert (
                machine.next_state(
                    ModerationFlag.REPORT_RESOLVED, ModerationAction.RESOLVE, current
                )
                is True
            )

    def test_action_must_match_flag(self):
        with pytest.raises(ValueError):
            ModerationStateMachine().next_state(
                ModerationFlag.COMMENT_PINNED, ModerationAction.TOGGLE_HIDE, False
            )

    def test_transition_requires_admin(self):
        with pytest.raises(UnauthorizedError):
            ModerationStateMachine().transition(
                Caller.anonymous(),
                ModerationFlag.AREA_HIDDEN,
                ModerationAction.TOGGLE_HIDE,
                False,
            )


class TestModerationService:
    """Tests for applying moderation actions."""

    @pytest.mark.asyncio
    async def test_toggle_area_hidden_round_trip(self, unit_env):
        area_service = await unit_env.get(AreaService)
        moderation = await unit_env.get(ModerationService)
        await area_service.get_or_create(AreaKey("blog1"))

        assert await moderation.toggle_area_hidden(Caller.admin(), AreaKey("blog1"))
        assert not await moderation.toggle_area_hidden(
            Caller.admin(), AreaKey("blog1")
        )

    @pytest.mark.asyncio
    async def test_toggle_comment_hidden_changes_only_flag(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        moderation = await unit_env.get(ModerationService)
        comment = await comment_service.insert(AreaKey("blog1"), "hello")

        hidden = await moderation.toggle_comment_hidden(Caller.admin(), comment.id)

        stored = await comment_service.get_by_id(comment.id)
        assert hidden is True
        assert stored.hidden is True
        assert stored.content == comment.content
        assert stored.likes == comment.likes
        assert stored.pinned == comment.pinned

    @pytest.mark.asyncio
    async def test_toggle_comment_pinned(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        moderation = await unit_env.get(ModerationService)
        comment = await comment_service.insert(AreaKey("blog1"), "hello")

        assert await moderation.toggle_comment_pinned(Caller.admin(), comment.id)
        assert (await comment_service.get_by_id(comment.id)).pinned is True

    @pytest.mark.asyncio
    async def test_resolve_report_twice(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        report_service = await unit_env.get(ReportService)
        moderation = await unit_env.get(ModerationService)
        comment = await comment_service.insert(AreaKey("blog1"), "hello")
        report = await report_service.create(comment.id, "spam")

        assert await moderation.resolve_report(Caller.admin(), report.id) is True
        assert await moderation.resolve_report(Caller.admin(), report.id) is True

    @pytest.mark.asyncio
    async def test_visitor_is_refused(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        moderation = await unit_env.get(ModerationService)
        comment = await comment_service.insert(AreaKey("blog1"), "hello")

        with pytest.raises(UnauthorizedError):
            await moderation.toggle_comment_hidden(Caller.anonymous(), comment.id)

        assert (await comment_service.get_by_id(comment.id)).hidden is False

    @pytest.mark.asyncio
    async def test_missing_targets(self, unit_env):
        moderation = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await moderation.toggle_area_hidden(Caller.admin(), AreaKey("missing"))
        with pytest.raises(NotFoundError):
            await moderation.toggle_comment_pinned(Caller.admin(), CommentId(404))
        with pytest.raises(NotFoundError):
            await moderation.resolve_report(Caller.admin(), ReportId(404))
