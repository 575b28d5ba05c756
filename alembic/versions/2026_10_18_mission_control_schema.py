"""Create task, comment and system log tables.

Revision ID: mission_control_20261018
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "mission_control_20261018"
down_revision = None
branch_labels = None
depends_on = None

TASK_STATUS = sa.Enum("Planning", "In Progress", "Done", name="task_status")
TASK_PRIORITY = sa.Enum("High", "Medium", "Low", name="task_priority")
LOG_LEVEL = sa.Enum("info", "warn", "error", "success", name="log_level")


def upgrade() -> None:
    """Apply mission control schema."""
    bind = op.get_bind()
    inspector = inspect(bind)
    existing = set(inspector.get_table_names())

    if "tasks" not in existing:
        op.create_table(
            "tasks",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("desc", sa.Text(), nullable=True),
            sa.Column("status", TASK_STATUS, nullable=False),
            sa.Column("priority", TASK_PRIORITY, nullable=False),
            sa.Column("assigned_to", sa.String(length=255), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("ix_tasks_id", "tasks", ["id"])
        op.create_index("ix_tasks_status", "tasks", ["status"])
        op.create_index("ix_tasks_updated_at", "tasks", ["updated_at"])

    if "comments" not in existing:
        op.create_table(
            "comments",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("text", sa.Text(), nullable=False),
            sa.Column("task_id", sa.Uuid(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(["task_id"], ["tasks.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("ix_comments_id", "comments", ["id"])
        op.create_index("ix_comments_task_id", "comments", ["task_id"])

    if "system_logs" not in existing:
        op.create_table(
            "system_logs",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("level", LOG_LEVEL, nullable=False),
            sa.Column("module", sa.String(length=100), nullable=False),
            sa.Column("message", sa.Text(), nullable=False),
            sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("ix_system_logs_id", "system_logs", ["id"])
        op.create_index("ix_system_logs_level", "system_logs", ["level"])
        op.create_index("ix_system_logs_module", "system_logs", ["module"])
        op.create_index("ix_system_logs_timestamp", "system_logs", ["timestamp"])


def downgrade() -> None:
    """Drop mission control schema."""
    op.drop_table("system_logs")
    op.drop_table("comments")
    op.drop_table("tasks")
    bind = op.get_bind()
    for enum_type in (LOG_LEVEL, TASK_PRIORITY, TASK_STATUS):
        enum_type.drop(bind, checkfirst=True)
