"""System log model."""
from enum import Enum
import uuid

from sqlalchemy import Column, String, Text, Uuid, Enum as SQLEnum

from mission_control.database import Base
from mission_control.db.types import UTCDateTime
from mission_control.models.task import utcnow


class LogLevel(str, Enum):
    """Severity of a system log row."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SUCCESS = "success"


class SystemLog(Base):
    """Append-only activity log row."""

    __tablename__ = "system_logs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    level = Column(
        SQLEnum(LogLevel, name="log_level", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    module = Column(String(100), nullable=False, index=True)  # e.g. "HEARTBEAT", "KANBAN"
    message = Column(Text, nullable=False)
    timestamp = Column(UTCDateTime(), default=utcnow, nullable=False, index=True)
