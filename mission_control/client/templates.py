"""Reusable task templates stored in a local JSON file."""
import json
import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from mission_control.client.api import MissionControlClient

logger = logging.getLogger(__name__)


@dataclass
class TaskTemplate:
    name: str
    task_title: str
    description: str = ""
    task_desc: str = ""
    priority: str = "Medium"
    status: str = "Planning"
    id: str = field(default_factory=lambda: str(int(time.time() * 1000)))
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_task_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "title": self.task_title,
            "priority": self.priority,
            "status": self.status,
        }
        if self.task_desc:
            payload["desc"] = self.task_desc
        return payload


class TaskTemplateStore:
    """CRUD over templates persisted to ``path``."""

    def __init__(self, path: Path):
        self.path = path
        self.templates: List[TaskTemplate] = self._load()

    def _load(self) -> List[TaskTemplate]:
        if not self.path.exists():
            return []
        try:
            return [TaskTemplate(**entry) for entry in json.loads(self.path.read_text(encoding="utf-8"))]
        except (ValueError, TypeError) as exc:
            logger.error("Failed to load templates from %s: %s", self.path, exc)
            return []

    def _save(self) -> None:
        self.path.write_text(json.dumps([asdict(t) for t in self.templates], indent=2), encoding="utf-8")

    def get(self, template_id: str) -> Optional[TaskTemplate]:
        return next((t for t in self.templates if t.id == template_id), None)

    def add(self, template: TaskTemplate) -> TaskTemplate:
        if not template.name or not template.task_title:
            raise ValueError("Template name and task title are required")
        self.templates.append(template)
        self._save()
        return template

    def update(self, template_id: str, **changes: Any) -> Optional[TaskTemplate]:
        template = self.get(template_id)
        if template is None:
            return None
        for key, value in changes.items():
            setattr(template, key, value)
        self._save()
        return template

    def remove(self, template_id: str) -> bool:
        before = len(self.templates)
        self.templates = [t for t in self.templates if t.id != template_id]
        self._save()
        return len(self.templates) != before

    async def instantiate(self, client: MissionControlClient, template_id: str) -> Dict[str, Any]:
        """Create a task on the server from a template."""
        template = self.get(template_id)
        if template is None:
            raise KeyError(template_id)
        return await client.create_task(template.to_task_payload())
