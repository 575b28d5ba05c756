"""Statistics service: in-memory reductions over tasks and logs."""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.models.log import LogLevel, SystemLog
from mission_control.models.task import Task, TaskPriority, TaskStatus
from mission_control.schemas.system import LogStats, StatsResponse, TaskStats


def _value(raw: Any) -> Any:
    return getattr(raw, "value", raw)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _percent(part: int, whole: int) -> int:
    return _round_half_up(part / whole * 100) if whole else 0


def format_duration(seconds: float) -> str:
    """Render an average duration as whole hours below a day, else whole days."""
    hours = _round_half_up(seconds / 3600)
    if hours < 24:
        return f"{hours}h"
    return f"{_round_half_up(hours / 24)}d"


def compute_task_stats(tasks: Iterable[Any]) -> TaskStats:
    """Reduce task-like objects (``status``, ``priority``, ``created_at``, ``updated_at``)."""
    stats = TaskStats()
    completion_seconds = []
    for item in tasks:
        status = _value(item.status)
        priority = _value(item.priority)
        stats.total += 1
        if status == TaskStatus.PLANNING.value:
            stats.planning += 1
        elif status == TaskStatus.IN_PROGRESS.value:
            stats.in_progress += 1
        elif status == TaskStatus.DONE.value:
            stats.done += 1
            if item.created_at is not None and item.updated_at is not None:
                completion_seconds.append((item.updated_at - item.created_at).total_seconds())

        if priority == TaskPriority.HIGH.value:
            stats.high_priority += 1
        elif priority == TaskPriority.MEDIUM.value:
            stats.medium_priority += 1
        elif priority == TaskPriority.LOW.value:
            stats.low_priority += 1

    stats.completion_rate = _percent(stats.done, stats.total)
    if completion_seconds:
        stats.avg_completion_time = format_duration(sum(completion_seconds) / len(completion_seconds))
    return stats


def compute_log_stats(logs: Iterable[Any]) -> LogStats:
    """Reduce log-like objects exposing ``level``."""
    stats = LogStats()
    for entry in logs:
        level = _value(entry.level)
        stats.total += 1
        if level == LogLevel.INFO.value:
            stats.info += 1
        elif level == LogLevel.WARN.value:
            stats.warn += 1
        elif level == LogLevel.ERROR.value:
            stats.error += 1
        elif level == LogLevel.SUCCESS.value:
            stats.success += 1
    stats.error_rate = _percent(stats.error, stats.total)
    return stats


class StatsService:
    """Builds the dashboard statistics payload."""

    async def collect(self, db: AsyncSession) -> StatsResponse:
        # Full scans; no aggregation query
        tasks = (await db.execute(select(Task))).scalars().all()
        logs = (await db.execute(select(SystemLog))).scalars().all()
        return StatsResponse(
            tasks=compute_task_stats(tasks),
            logs=compute_log_stats(logs),
            generated_at=datetime.now(timezone.utc),
        )


stats_service = StatsService()
