"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire
import pytest

from comet.domain.model import Comment
from comet.domain.value import ROOT_PARENT_ID, AreaKey, CommentId

# Keep telemetry local; app modules instrument against this configuration
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_comment(
    comment_id: int,
    parent_id: int = 0,
    area_key: str = "blog1",
    content: str | None = None,
    hidden: bool = False,
    pinned: bool = False,
    likes: int = 0,
) -> Comment:
    """Build a comment whose created_at follows its id, one minute apart."""
    return Comment(
        id=CommentId(comment_id),
        area_key=AreaKey(area_key),
        content=content if content is not None else f"comment {comment_id}",
        parent_id=CommentId(parent_id) if parent_id else ROOT_PARENT_ID,
        created_at=BASE_TIME + timedelta(minutes=comment_id),
        hidden=hidden,
        likes=likes,
        pinned=pinned,
    )


@pytest.fixture
def comment_factory():
    """Expose make_comment to tests as a fixture."""
    return make_comment
