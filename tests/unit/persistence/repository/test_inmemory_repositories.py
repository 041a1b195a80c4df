"""Unit tests for the in-memory repositories sharing one store."""

from datetime import timedelta

import pytest

from comet.domain.error import ConflictError
from comet.domain.value import AreaKey, CommentId, ReportId
from comet.persistence.repository.inmemory import (
    InMemoryAreaRepository,
    InMemoryCommentRepository,
    InMemoryReportRepository,
    InMemoryStore,
)


@pytest.fixture
def store():
    return InMemoryStore()


class TestInMemoryAreaRepository:
    """Tests for InMemoryAreaRepository."""

    @pytest.mark.asyncio
    async def test_ids_increase(self, store):
        repo = InMemoryAreaRepository(store)

        first = await repo.create(AreaKey("a"), name="A")
        second = await repo.create(AreaKey("b"), name="B")

        assert (first.id, second.id) == (1, 2)

    @pytest.mark.asyncio
    async def test_duplicate_key(self, store):
        repo = InMemoryAreaRepository(store)
        await repo.create(AreaKey("a"), name="A")

        with pytest.raises(ConflictError):
            await repo.create(AreaKey("a"), name="again")

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(self, store):
        repo = InMemoryAreaRepository(store)

        assert await repo.update_hidden(AreaKey("nope"), True) is None
        assert await repo.delete_cascade(AreaKey("nope")) is False


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_insert_defaults(self, store):
        repo = InMemoryCommentRepository(store)

        comment = await repo.insert(AreaKey("a"), "hello", CommentId(0))

        assert comment.id == 1
        assert (comment.likes, comment.hidden, comment.pinned) == (0, False, False)
        assert await repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_insert_stamps_aware_utc_time(self, store):
        comment = await InMemoryCommentRepository(store).insert(
            AreaKey("a"), "hello", CommentId(0)
        )
        report = await InMemoryReportRepository(store).create(comment.id, "spam")

        assert comment.created_at.utcoffset() == timedelta(0)
        assert report.created_at.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_updates_on_missing_comment_return_none(self, store):
        repo = InMemoryCommentRepository(store)

        assert await repo.increment_likes(CommentId(9)) is None
        assert await repo.update_hidden(CommentId(9), True) is None
        assert await repo.update_pinned(CommentId(9), True) is None


class TestInMemoryReportRepository:
    """Tests for InMemoryReportRepository."""

    @pytest.mark.asyncio
    async def test_report_on_removed_comment_has_no_content(self, store):
        comments = InMemoryCommentRepository(store)
        reports = InMemoryReportRepository(store)
        comment = await comments.insert(AreaKey("a"), "hello", CommentId(0))
        await reports.create(comment.id, "spam")
        del store.comments[comment.id]

        items = await reports.list_with_comment_content()

        assert len(items) == 1
        assert items[0].comment_content is None

    @pytest.mark.asyncio
    async def test_mark_resolved_missing(self, store):
        reports = InMemoryReportRepository(store)

        assert await reports.mark_resolved(ReportId(1)) is None
