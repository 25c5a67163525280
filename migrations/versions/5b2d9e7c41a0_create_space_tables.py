"""create_space_tables

Revision ID: 5b2d9e7c41a0
Revises:
Create Date: 2026-10-18 09:12:44.513207

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b2d9e7c41a0"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create spaces, the log ledger and the per-space child tables."""
    op.create_table(
        "spaces",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("goal", sa.Text(), nullable=True),
        sa.Column("before_image", sa.String(length=2048), nullable=True),
        sa.Column("after_image", sa.String(length=2048), nullable=True),
        sa.Column("date_created", sa.DateTime(), nullable=False),
        sa.Column("date_modified", sa.DateTime(), nullable=False),
        sa.Column("total_clocked_in_time", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_clocked_in", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("clock_in_start_time", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "total_clocked_in_time >= 0", name="ck_spaces_total_clocked_in_time"
        ),
        sa.CheckConstraint(
            "(is_clocked_in AND clock_in_start_time IS NOT NULL)"
            " OR (NOT is_clocked_in AND clock_in_start_time IS NULL)",
            name="ck_spaces_clock_markers",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_spaces_date_modified", "spaces", ["date_modified"], unique=False)

    op.create_table(
        "log_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("space_id", sa.Uuid(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("action_name", sa.String(length=300), nullable=False),
        sa.Column("points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("multi_step_action_id", sa.Uuid(), nullable=True),
        sa.Column("step_index", sa.Integer(), nullable=True),
        sa.Column("clock_in_time", sa.DateTime(), nullable=True),
        sa.Column("clock_out_time", sa.DateTime(), nullable=True),
        sa.Column("minutes_clocked_in", sa.Integer(), nullable=True),
        sa.CheckConstraint(
            "type IN ('action', 'multiStepAction', 'clockIn', 'clockOut')",
            name="ck_log_entries_type",
        ),
        sa.ForeignKeyConstraint(["space_id"], ["spaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Newest-first history per space
    op.create_index(
        "ix_log_entries_space_timestamp",
        "log_entries",
        ["space_id", "timestamp"],
        unique=False,
    )

    op.create_table(
        "actions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("space_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["space_id"], ["spaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_actions_space_id", "actions", ["space_id"], unique=False)

    op.create_table(
        "multi_step_actions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("space_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("points_per_step", sa.Integer(), nullable=False),
        sa.Column("steps", sa.JSON(), nullable=False),
        sa.Column("current_step_index", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["space_id"], ["spaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_multi_step_actions_space_id", "multi_step_actions", ["space_id"], unique=False
    )

    op.create_table(
        "waste_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("space_id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["space_id"], ["spaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_waste_entries_space_id", "waste_entries", ["space_id"], unique=False)

    op.create_table(
        "todo_items",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("space_id", sa.Uuid(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("completed", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("before_image", sa.String(length=2048), nullable=True),
        sa.Column("after_image", sa.String(length=2048), nullable=True),
        sa.Column("date_created", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["space_id"], ["spaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_todo_items_space_id", "todo_items", ["space_id"], unique=False)

    op.create_table(
        "comments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("space_id", sa.Uuid(), nullable=False),
        sa.Column("text", sa.Text(), server_default="", nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=True),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["space_id"], ["spaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comments_space_id", "comments", ["space_id"], unique=False)


def downgrade() -> None:
    """Drop all space tables."""
    op.drop_index("ix_comments_space_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("ix_todo_items_space_id", table_name="todo_items")
    op.drop_table("todo_items")
    op.drop_index("ix_waste_entries_space_id", table_name="waste_entries")
    op.drop_table("waste_entries")
    op.drop_index("ix_multi_step_actions_space_id", table_name="multi_step_actions")
    op.drop_table("multi_step_actions")
    op.drop_index("ix_actions_space_id", table_name="actions")
    op.drop_table("actions")
    op.drop_index("ix_log_entries_space_timestamp", table_name="log_entries")
    op.drop_table("log_entries")
    op.drop_index("ix_spaces_date_modified", table_name="spaces")
    op.drop_table("spaces")
