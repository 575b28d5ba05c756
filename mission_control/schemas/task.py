"""Task and comment schemas."""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from mission_control.models.task import TaskPriority, TaskStatus
from mission_control.schemas.common import wire_field


class CommentCreate(BaseModel):
    """Comment creation schema."""

    text: str = Field(..., min_length=1)
    # Accepted for client compatibility; the path parameter decides ownership
    task_id: Optional[UUID] = wire_field("task_id", "taskId", None)


class CommentResponse(BaseModel):
    """Comment response schema."""

    id: UUID
    text: str
    task_id: UUID = wire_field("task_id", "taskId")
    created_at: datetime = wire_field("created_at", "createdAt")

    class Config:
        from_attributes = True


class TaskCreate(BaseModel):
    """Task creation schema."""

    title: str = Field(..., min_length=1)
    desc: Optional[str] = None
    status: TaskStatus = TaskStatus.PLANNING
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: Optional[str] = wire_field("assigned_to", "assignedTo", None)


class TaskUpdate(BaseModel):
    """Partial task update; only fields present in the body are applied."""

    title: Optional[str] = Field(None, min_length=1)
    desc: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to: Optional[str] = wire_field("assigned_to", "assignedTo", None)

    @field_validator("title", "status", "priority", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Expected a value, received null")
        return value


class TaskResponse(BaseModel):
    """Task response schema."""

    id: UUID
    title: str
    desc: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_to: Optional[str] = wire_field("assigned_to", "assignedTo", None)
    created_at: datetime = wire_field("created_at", "createdAt")
    updated_at: datetime = wire_field("updated_at", "updatedAt")
    comments: List[CommentResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
