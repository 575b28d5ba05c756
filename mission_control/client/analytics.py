"""Client-side analytics over fetched tasks."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from mission_control.schemas.system import TaskStats
from mission_control.services.stats_service import compute_task_stats


@dataclass
class TaskSnapshot:
    status: str
    priority: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


def _parse_timestamp(raw: Optional[str]) -> Optional[datetime]:
    if not raw:
        return None
    # Python < 3.11 does not accept the trailing "Z"
    return datetime.fromisoformat(raw.replace("Z", "+00:00"))


def to_snapshots(tasks: Iterable[Dict[str, Any]]) -> List[TaskSnapshot]:
    return [
        TaskSnapshot(
            status=t["status"],
            priority=t["priority"],
            created_at=_parse_timestamp(t.get("createdAt")),
            updated_at=_parse_timestamp(t.get("updatedAt")),
        )
        for t in tasks
    ]


def summarize(tasks: Iterable[Dict[str, Any]]) -> TaskStats:
    """Same reduction as ``GET /api/stats`` applied to wire-format task dicts."""
    return compute_task_stats(to_snapshots(tasks))
