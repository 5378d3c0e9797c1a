"""
Initial schema: Create users and blogs tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

- users: accounts with a hashed password and a unique email
- blogs: posts with a unique title, draft/published state and read counts
"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Apply schema changes for this revision."""
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("bio", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "blogs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("state", sa.String(length=20), nullable=False, server_default="draft"),
        sa.Column("read_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reading_time", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("tags", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_blogs_title", "blogs", ["title"], unique=True)
    op.create_index("ix_blogs_author_id", "blogs", ["author_id"], unique=False)
    op.create_index("ix_blogs_state", "blogs", ["state"], unique=False)
    op.create_index("ix_blogs_timestamp", "blogs", ["timestamp"], unique=False)
    op.create_index("ix_blogs_state_timestamp", "blogs", ["state", "timestamp"], unique=False)
    op.create_index("ix_blogs_author_state", "blogs", ["author_id", "state"], unique=False)
    op.create_index("ix_blogs_tags_gin", "blogs", ["tags"], unique=False, postgresql_using="gin")


def downgrade() -> None:
    """Revert schema changes for this revision."""
    op.drop_index("ix_blogs_tags_gin", table_name="blogs")
    op.drop_index("ix_blogs_author_state", table_name="blogs")
    op.drop_index("ix_blogs_state_timestamp", table_name="blogs")
    op.drop_index("ix_blogs_timestamp", table_name="blogs")
    op.drop_index("ix_blogs_state", table_name="blogs")
    op.drop_index("ix_blogs_author_id", table_name="blogs")
    op.drop_index("ix_blogs_title", table_name="blogs")
    op.drop_table("blogs")

    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
