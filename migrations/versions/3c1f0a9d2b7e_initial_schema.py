"""initial_schema

Create the comment schema:
- Comment areas (one per embedding page, addressed by a unique key)
- Comments (flat rows; replies point at their parent by id, 0 for roots)
- Reports (abuse reports against comments)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # COMMENT AREAS table
    # ========================================================================
    op.create_table(
        "comment_areas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("area_key", sa.String(length=255), nullable=False),
        sa.Column("intro", sa.Text(), server_default="", nullable=False),
        sa.Column("hidden", sa.Boolean(), server_default="false", nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("area_key"),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    # No foreign keys: area deletion cascades in the application and a reply
    # may outlive (or never have) its parent.
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("area_key", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("hidden", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("pinned", sa.Boolean(), server_default="false", nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_area_key_created_at", "comments", ["area_key", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # REPORTS table
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comment_id", sa.Integer(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("resolved", sa.Boolean(), server_default="false", nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_reports_comment_id", "reports", ["comment_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_reports_comment_id", table_name="reports")
    op.drop_table("reports")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_area_key_created_at", table_name="comments")
    op.drop_table("comments")
    op.drop_table("comment_areas")
