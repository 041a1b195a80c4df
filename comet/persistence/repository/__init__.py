"""PostgreSQL repository implementations."""

from comet.persistence.repository.area import PostgresAreaRepository
from comet.persistence.repository.comment import PostgresCommentRepository
from comet.persistence.repository.report import PostgresReportRepository

__all__ = [
    "PostgresAreaRepository",
    "PostgresCommentRepository",
    "PostgresReportRepository",
]
