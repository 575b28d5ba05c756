"""Health and statistics schemas."""
from datetime import datetime

from pydantic import BaseModel

from mission_control.schemas.common import wire_field


class HealthSnapshot(BaseModel):
    """Point-in-time host metrics."""

    status: str = "ok"
    cpu: int
    memory: int
    uptime: int
    timestamp: datetime


class TaskStats(BaseModel):
    """Task counts and completion metrics."""

    total: int = 0
    planning: int = 0
    in_progress: int = wire_field("in_progress", "inProgress", 0)
    done: int = 0
    high_priority: int = wire_field("high_priority", "highPriority", 0)
    medium_priority: int = wire_field("medium_priority", "mediumPriority", 0)
    low_priority: int = wire_field("low_priority", "lowPriority", 0)
    completion_rate: int = wire_field("completion_rate", "completionRate", 0)
    avg_completion_time: str = wire_field("avg_completion_time", "avgCompletionTime", "N/A")


class LogStats(BaseModel):
    """Log counts per level."""

    total: int = 0
    info: int = 0
    warn: int = 0
    error: int = 0
    success: int = 0
    error_rate: int = wire_field("error_rate", "errorRate", 0)


class StatsResponse(BaseModel):
    """Dashboard statistics."""

    tasks: TaskStats
    logs: LogStats
    generated_at: datetime = wire_field("generated_at", "generatedAt")
