"""Client-local notification feed."""
import json
import logging
import uuid
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Deque, List, Optional

logger = logging.getLogger(__name__)

NOTIFICATION_TYPES = ("success", "warning", "error", "info")


@dataclass
class Notification:
    type: str
    title: str
    message: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False


class NotificationCenter:
    """Bounded, newest-first feed kept on the client; optionally saved to a JSON file."""

    def __init__(self, limit: int = 50, storage_path: Optional[Path] = None):
        self.limit = limit
        self.storage_path = storage_path
        self._items: Deque[Notification] = deque(maxlen=limit)
        if storage_path is not None:
            self._load()

    @property
    def items(self) -> List[Notification]:
        return list(self._items)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._items if not n.read)

    def add(self, type: str, title: str, message: str) -> Notification:
        if type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {type}")
        notification = Notification(type=type, title=title, message=message)
        self._items.appendleft(notification)
        self._save()
        return notification

    def mark_read(self, notification_id: str) -> None:
        for n in self._items:
            if n.id == notification_id:
                n.read = True
        self._save()

    def mark_all_read(self) -> None:
        for n in self._items:
            n.read = True
        self._save()

    def remove(self, notification_id: str) -> None:
        self._items = deque((n for n in self._items if n.id != notification_id), maxlen=self.limit)
        self._save()

    def clear(self) -> None:
        self._items.clear()
        self._save()

    def _save(self) -> None:
        if self.storage_path is None:
            return
        payload = [{**asdict(n), "timestamp": n.timestamp.isoformat()} for n in self._items]
        self.storage_path.write_text(json.dumps(payload), encoding="utf-8")

    def _load(self) -> None:
        if not self.storage_path.exists():
            return
        try:
            stored = json.loads(self.storage_path.read_text(encoding="utf-8"))
            for entry in stored[: self.limit]:
                entry["timestamp"] = datetime.fromisoformat(entry["timestamp"])
                self._items.append(Notification(**entry))
        except (ValueError, TypeError, KeyError) as exc:
            logger.error("Failed to parse notifications from %s: %s", self.storage_path, exc)
