"""SQLAlchemy table definitions.

These tables match the schema created by the Alembic migrations. Comments
reference their area by key and replies reference their parent by id, but
neither reference is a foreign key: area deletion cascades in code and
dangling parents are tolerated.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)

metadata = MetaData()

# ============================================================================
# COMMENT AREAS TABLE
# ============================================================================
comment_areas_table = Table(
    "comment_areas",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("area_key", String(255), nullable=False, unique=True),
    Column("intro", Text, nullable=False, server_default=""),
    Column("hidden", Boolean, nullable=False, server_default="false"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("area_key", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("parent_id", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column("hidden", Boolean, nullable=False, server_default="false"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("pinned", Boolean, nullable=False, server_default="false"),
)

Index(
    "idx_comments_area_key_created_at",
    comments_table.c.area_key,
    comments_table.c.created_at,
)

Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("comment_id", Integer, nullable=False),
    Column("reason", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column("resolved", Boolean, nullable=False, server_default="false"),
)

Index("idx_reports_comment_id", reports_table.c.comment_id)
