"""Task and comment models."""
from datetime import datetime, timezone
from enum import Enum
import uuid

from sqlalchemy import Column, String, ForeignKey, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship

from mission_control.database import Base
from mission_control.db.types import UTCDateTime


class TaskStatus(str, Enum):
    """Kanban column a task sits in."""

    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskPriority(str, Enum):
    """Task priority."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Tracked unit of work."""

    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(255), nullable=False)
    desc = Column(Text, nullable=True)
    status = Column(
        SQLEnum(TaskStatus, name="task_status", values_callable=_enum_values),
        default=TaskStatus.PLANNING,
        nullable=False,
        index=True,
    )
    priority = Column(
        SQLEnum(TaskPriority, name="task_priority", values_callable=_enum_values),
        default=TaskPriority.MEDIUM,
        nullable=False,
    )
    assigned_to = Column(String(255), nullable=True)  # Free-form agent name
    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, onupdate=utcnow, nullable=False, index=True)

    # Relationships
    comments = relationship(
        "Comment",
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Comment.created_at",
    )


class Comment(Base):
    """Comment owned by a task."""

    __tablename__ = "comments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    text = Column(Text, nullable=False)
    task_id = Column(Uuid, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    # Relationships
    task = relationship("Task", back_populates="comments")
