"""Domain value objects for comment areas."""

from comet.domain.value.identifiers import (
    MAX_ID,
    ROOT_PARENT_ID,
    AreaId,
    CommentId,
    ReportId,
)
from comet.domain.value.types import AreaKey, Caller

__all__ = [
    # Identifiers
    "AreaId",
    "CommentId",
    "ReportId",
    "ROOT_PARENT_ID",
    "MAX_ID",
    # Types
    "AreaKey",
    "Caller",
]
