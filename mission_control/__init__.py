"""Mission Control task-tracking dashboard."""

__version__ = "1.0.0"
