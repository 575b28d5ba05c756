"""Model modules."""
from mission_control.models.task import Task, Comment, TaskStatus, TaskPriority
from mission_control.models.log import SystemLog, LogLevel

__all__ = [
    "Task",
    "Comment",
    "TaskStatus",
    "TaskPriority",
    "SystemLog",
    "LogLevel",
]
