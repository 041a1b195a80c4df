"""Repository interfaces for the comment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from comet.domain.repository.area import AreaRepository
from comet.domain.repository.comment import CommentRepository
from comet.domain.repository.report import ReportRepository

__all__ = [
    "AreaRepository",
    "CommentRepository",
    "ReportRepository",
]
