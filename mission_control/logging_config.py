"""
Logging configuration for Mission Control.

Configures the root logger once from LOG_LEVEL / LOG_FORMAT so every module
can use ``logging.getLogger(__name__)``.
"""
import json
import logging
import sys
from typing import Optional

from mission_control.config import settings

TEXT_FORMAT = "[%(asctime)s] [MISSION-CONTROL] %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging.

    Args:
        level: Logging level name (defaults to settings.LOG_LEVEL)
        log_format: "json" or "text" (defaults to settings.LOG_FORMAT)
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    fmt = (log_format or settings.LOG_FORMAT).lower()

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(level=level_name, handlers=[handler], force=True)

    logger = logging.getLogger("mission_control")
    logger.info("Logging initialized (level=%s, format=%s)", level_name, fmt)
    return logger
