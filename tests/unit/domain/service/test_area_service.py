"""Unit tests for AreaService."""

import pytest

from comet.domain.error import ConflictError, NotFoundError, ValidationError
from comet.domain.repository import (
    AreaRepository,
    CommentRepository,
    ReportRepository,
)
from comet.domain.service import AreaService
from comet.domain.value import AreaKey, CommentId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreate:
    """Tests for explicit area creation."""

    @pytest.mark.asyncio
    async def test_create_area(self, unit_env):
        area_service = await unit_env.get(AreaService)

        area = await area_service.create(
            AreaKey("blog1"), name="  My Blog ", intro="Welcome"
        )

        assert area.id == 1
        assert area.name == "My Blog"
        assert area.intro == "Welcome"
        assert area.hidden is False

    @pytest.mark.asyncio
    async def test_duplicate_key_conflicts(self, unit_env):
        area_service = await unit_env.get(AreaService)
        await area_service.create(AreaKey("blog1"), name="Blog")

        with pytest.raises(ConflictError):
            await area_service.create(AreaKey("blog1"), name="Other")

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, unit_env):
        area_service = await unit_env.get(AreaService)

        with pytest.raises(ValidationError):
            await area_service.create(AreaKey("blog1"), name="  ")


class TestGetOrCreate:
    """Tests for implicit area creation."""

    @pytest.mark.asyncio
    async def test_creates_area_named_after_key(self, unit_env):
        area_service = await unit_env.get(AreaService)

        area = await area_service.get_or_create(AreaKey("blog1"))

        assert area.name == "blog1"
        assert area.intro == ""
        assert area.hidden is False

    @pytest.mark.asyncio
    async def test_returns_existing_area(self, unit_env):
        area_service = await unit_env.get(AreaService)
        created = await area_service.create(AreaKey("blog1"), name="Blog")

        area = await area_service.get_or_create(AreaKey("blog1"))

        assert area == created

    @pytest.mark.asyncio
    async def test_concurrent_create_falls_back_to_lookup(self, unit_env):
        """A uniqueness conflict during creation turns into a fresh lookup."""
        area_repo = await unit_env.get(AreaRepository)
        existing = await area_repo.create(AreaKey("blog1"), name="Raced")

        class RacingRepository:
            def __init__(self):
                self.lookups = 0

            async def find_by_key(self, area_key):
                self.lookups += 1
                if self.lookups == 1:
                    return None
                return await area_repo.find_by_key(area_key)

            async def create(self, area_key, name, intro="", hidden=False):
                return await area_repo.create(area_key, name, intro, hidden)

        racing = RacingRepository()
        area = await AreaService(racing).get_or_create(AreaKey("blog1"))

        assert area == existing
        assert racing.lookups == 2


class TestSetHiddenAndDelete:
    """Tests for admin area mutations."""

    @pytest.mark.asyncio
    async def test_set_hidden(self, unit_env):
        area_service = await unit_env.get(AreaService)
        await area_service.get_or_create(AreaKey("blog1"))

        area = await area_service.set_hidden(AreaKey("blog1"), True)

        assert area.hidden is True
        assert (await area_service.get_by_key(AreaKey("blog1"))).hidden is True

    @pytest.mark.asyncio
    async def test_set_hidden_missing_area(self, unit_env):
        area_service = await unit_env.get(AreaService)

        with pytest.raises(NotFoundError):
            await area_service.set_hidden(AreaKey("missing"), True)

    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments_and_reports(self, unit_env):
        area_service = await unit_env.get(AreaService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)

        await area_service.get_or_create(AreaKey("blog1"))
        await area_service.get_or_create(AreaKey("blog2"))
        doomed = await comment_repo.insert(AreaKey("blog1"), "bye", CommentId(0))
        kept = await comment_repo.insert(AreaKey("blog2"), "stay", CommentId(0))
        await report_repo.create(doomed.id, "spam")
        kept_report = await report_repo.create(kept.id, "rude")

        await area_service.delete(AreaKey("blog1"))

        assert await area_service.get_by_key(AreaKey("blog1")) is None
        assert await comment_repo.find_by_area(AreaKey("blog1")) == []
        assert await comment_repo.find_by_id(doomed.id) is None
        reports = await report_repo.list_with_comment_content()
        assert [item.report.id for item in reports] == [kept_report.id]

    @pytest.mark.asyncio
    async def test_delete_missing_area(self, unit_env):
        area_service = await unit_env.get(AreaService)

        with pytest.raises(NotFoundError):
            await area_service.delete(AreaKey("missing"))


class TestListAreas:
    """Tests for the admin area listing."""

    @pytest.mark.asyncio
    async def test_newest_first_with_comment_counts(self, unit_env):
        area_service = await unit_env.get(AreaService)
        comment_repo = await unit_env.get(CommentRepository)

        await area_service.get_or_create(AreaKey("old"))
        await area_service.get_or_create(AreaKey("new"))
        await comment_repo.insert(AreaKey("old"), "one", CommentId(0))
        await comment_repo.insert(AreaKey("old"), "two", CommentId(0))

        summaries = await area_service.list_areas()

        assert [s.area.area_key.root for s in summaries] == ["new", "old"]
        assert [s.comment_count for s in summaries] == [0, 2]
