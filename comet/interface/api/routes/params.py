"""Shared path parameters."""

from typing import Annotated

from fastapi import Path

from comet.domain.value import MAX_ID

CommentIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
ReportIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
