"""Unit tests for the comment use cases."""

import pytest

from comet.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    PostCommentRequest,
    PostCommentUseCase,
    ToggleCommentHiddenUseCase,
    ToggleCommentPinUseCase,
    ToggleCommentRequest,
)
from comet.domain.error import (
    AreaHiddenError,
    HumanVerificationError,
    UnauthorizedError,
    ValidationError,
)
from comet.domain.repository import CommentRepository
from comet.domain.service import (
    AreaService,
    CaptchaVerifier,
    CommentService,
    CommentTreeBuilder,
)
from comet.domain.value import AreaKey, Caller, CommentId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _post(
    env, content, parent_id=None, area_key="blog1", captcha_token="valid", **kwargs
):
    use_case = await env.get(PostCommentUseCase)
    return await use_case.execute(
        PostCommentRequest(
            area_key=area_key,
            content=content,
            parent_id=parent_id,
            captcha_token=captcha_token,
            **kwargs,
        )
    )


class TestPostComment:
    """Tests for PostCommentUseCase."""

    @pytest.mark.asyncio
    async def test_post_auto_creates_area(self, unit_env):
        area_service = await unit_env.get(AreaService)

        response = await _post(unit_env, "hello")

        assert response.parent_id == 0
        assert response.content == "hello"
        area = await area_service.get_by_key(AreaKey("blog1"))
        assert area is not None
        assert area.name == "blog1"

    @pytest.mark.asyncio
    async def test_captcha_token_is_verified(self, unit_env):
        verifier = await unit_env.get(CaptchaVerifier)

        await _post(unit_env, "hello", captcha_token="tok", remote_ip="198.51.100.2")

        assert verifier.calls == ["tok"]

    @pytest.mark.asyncio
    async def test_rejected_captcha_stores_nothing(self, unit_env):
        area_service = await unit_env.get(AreaService)

        with pytest.raises(HumanVerificationError):
            await _post(unit_env, "hello", captcha_token="rejected")

        assert await area_service.get_by_key(AreaKey("blog1")) is None

    @pytest.mark.asyncio
    async def test_empty_content_checked_before_captcha(self, unit_env):
        verifier = await unit_env.get(CaptchaVerifier)

        with pytest.raises(ValidationError):
            await _post(unit_env, "   ")

        assert verifier.calls == []

    @pytest.mark.asyncio
    async def test_blank_area_key_rejected(self, unit_env):
        with pytest.raises(ValidationError):
            await _post(unit_env, "hello", area_key=" ")

    @pytest.mark.asyncio
    async def test_hidden_area_refuses_visitor_but_not_admin(self, unit_env):
        area_service = await unit_env.get(AreaService)
        await area_service.get_or_create(AreaKey("blog1"))
        await area_service.set_hidden(AreaKey("blog1"), True)

        with pytest.raises(AreaHiddenError):
            await _post(unit_env, "hello")

        response = await _post(unit_env, "from admin", caller=Caller.admin())
        assert response.content == "from admin"

    @pytest.mark.asyncio
    async def test_parent_zero_means_root(self, unit_env):
        response = await _post(unit_env, "hello", parent_id=0)

        assert response.parent_id == 0


class TestGetComments:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_serialized_fields(self, unit_env):
        posted = await _post(unit_env, "hello")
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(area_key="blog1"))

        assert response.total == 1
        item = response.comments[0].model_dump()
        assert set(item) == {
            "id",
            "content",
            "parent_id",
            "created_at",
            "hidden",
            "likes",
            "pinned",
        }
        assert item["id"] == posted.id
        assert item["parent_id"] == 0

    @pytest.mark.asyncio
    async def test_unknown_area_is_empty(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(area_key="nowhere"))

        assert response.comments == []
        assert response.total == 0


class TestGetThread:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_builds_nested_tree(self, unit_env):
        root = await _post(unit_env, "hello")
        await _post(unit_env, "hi", parent_id=root.id)
        use_case = await unit_env.get(GetThreadUseCase)

        response = await use_case.execute(GetThreadRequest(area_key="blog1"))

        assert response.total == 2
        assert len(response.roots) == 1
        assert response.roots[0].comment.content == "hello"
        assert [r.comment.content for r in response.roots[0].replies] == ["hi"]

    @pytest.mark.asyncio
    async def test_orphans_only_shown_to_admin(self, unit_env):
        await _post(unit_env, "hello")
        await _post(unit_env, "lost", parent_id=999)
        use_case = await unit_env.get(GetThreadUseCase)

        visitor = await use_case.execute(GetThreadRequest(area_key="blog1"))
        admin = await use_case.execute(
            GetThreadRequest(area_key="blog1", caller=Caller.admin())
        )

        assert visitor.orphans == []
        assert visitor.total == 1
        assert [node.comment.content for node in admin.orphans] == ["lost"]
        assert admin.orphans[0].orphan is True

    @pytest.mark.asyncio
    async def test_orphans_can_be_suppressed(self, unit_env):
        await _post(unit_env, "lost", parent_id=999)
        use_case = GetThreadUseCase(
            comment_service=await unit_env.get(CommentService),
            tree_builder=CommentTreeBuilder(),
            expose_orphans_to_admin=False,
        )

        response = await use_case.execute(
            GetThreadRequest(area_key="blog1", caller=Caller.admin())
        )

        assert response.orphans == []


class TestLikeAndModeration:
    """Tests for liking and toggling comment flags."""

    @pytest.mark.asyncio
    async def test_like(self, unit_env):
        posted = await _post(unit_env, "hello")
        use_case = await unit_env.get(LikeCommentUseCase)

        await use_case.execute(LikeCommentRequest(comment_id=posted.id))
        response = await use_case.execute(LikeCommentRequest(comment_id=posted.id))

        assert response.likes == 2

    @pytest.mark.asyncio
    async def test_toggle_hidden_and_pin_as_admin(self, unit_env):
        posted = await _post(unit_env, "hello")
        hide = await unit_env.get(ToggleCommentHiddenUseCase)
        pin = await unit_env.get(ToggleCommentPinUseCase)
        request = ToggleCommentRequest(comment_id=posted.id, caller=Caller.admin())

        hidden = await hide.execute(request)
        pinned = await pin.execute(request)

        assert hidden.hidden is True
        assert pinned.pinned is True
        repo = await unit_env.get(CommentRepository)
        stored = await repo.find_by_id(CommentId(posted.id))
        assert (stored.hidden, stored.pinned) == (True, True)

    @pytest.mark.asyncio
    async def test_toggle_requires_admin(self, unit_env):
        posted = await _post(unit_env, "hello")
        hide = await unit_env.get(ToggleCommentHiddenUseCase)

        with pytest.raises(UnauthorizedError):
            await hide.execute(ToggleCommentRequest(comment_id=posted.id))
