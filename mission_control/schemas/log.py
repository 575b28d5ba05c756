"""System log schemas."""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from mission_control.models.log import LogLevel


class SystemLogCreate(BaseModel):
    """Log append schema."""

    level: LogLevel
    module: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class SystemLogResponse(BaseModel):
    """Log response schema."""

    id: UUID
    level: LogLevel
    module: str
    message: str
    timestamp: datetime

    class Config:
        from_attributes = True
