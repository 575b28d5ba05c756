"""Workspace file and agent roster schemas."""
from datetime import datetime

from pydantic import BaseModel

from mission_control.schemas.common import wire_field


class WorkspaceFile(BaseModel):
    """Markdown note listed from the memory folder."""

    name: str
    path: str
    size: int
    updated_at: datetime = wire_field("updated_at", "updatedAt")


class WorkspaceFileContent(BaseModel):
    """Markdown note body."""

    name: str
    content: str


class Agent(BaseModel):
    """Team roster entry parsed from MEMORY.md."""

    id: str
    name: str
    role: str
    model: str
    status: str = "Online"
