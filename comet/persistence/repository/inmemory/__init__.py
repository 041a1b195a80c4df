"""In-memory repository implementations for testing."""

from .area import InMemoryAreaRepository
from .comment import InMemoryCommentRepository
from .report import InMemoryReportRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryAreaRepository",
    "InMemoryCommentRepository",
    "InMemoryReportRepository",
    "InMemoryStore",
]
