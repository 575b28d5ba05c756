"""
Kanban board state.

Holds the fetched task list and applies drag-and-drop moves optimistically:
hovering over a column reassigns the dragged task's status locally, hovering
over a task in the same column reorders the local list, and the drop sends a
single PATCH. When that PATCH fails the local state is discarded by
refetching the full list from the server.

Manual ordering is presentation-only; the server always returns tasks by
``updatedAt`` descending, so a refresh resets it. Any status may move to any
other status.
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from mission_control.client.api import MissionControlAPIError, MissionControlClient
from mission_control.client.notifications import NotificationCenter

logger = logging.getLogger(__name__)

COLUMNS = ("Planning", "In Progress", "Done")
ALL = "All"
IMPORT_FIELDS = ("title", "desc", "priority", "status", "assignedTo")

RequestErrors = (httpx.HTTPError, MissionControlAPIError)


def array_move(items: List[Any], old_index: int, new_index: int) -> List[Any]:
    """Return a copy with the element at ``old_index`` moved to ``new_index``."""
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


class KanbanBoard:
    """Client-side board over ``/api/tasks``."""

    def __init__(self, client: MissionControlClient, notifications: Optional[NotificationCenter] = None):
        self.client = client
        self.notifications = notifications
        self.tasks: List[Dict[str, Any]] = []
        self.active_id: Optional[str] = None
        self._drag_origin_status: Optional[str] = None

    # Lookups

    def find(self, task_id: str) -> Optional[Dict[str, Any]]:
        return next((t for t in self.tasks if t["id"] == task_id), None)

    def _index(self, task_id: str) -> int:
        return next(i for i, t in enumerate(self.tasks) if t["id"] == task_id)

    def column(self, status: str) -> List[Dict[str, Any]]:
        return [t for t in self.tasks if t["status"] == status]

    def columns(self) -> Dict[str, List[Dict[str, Any]]]:
        return {status: self.column(status) for status in COLUMNS}

    def filtered(self, search: str = "", priority: str = ALL, status: str = ALL) -> List[Dict[str, Any]]:
        """Case-insensitive title/description search plus priority and status filters."""
        needle = search.lower()
        result = []
        for t in self.tasks:
            matches_search = needle in t["title"].lower() or needle in (t.get("desc") or "").lower()
            matches_priority = priority == ALL or t["priority"] == priority
            matches_status = status == ALL or t["status"] == status
            if matches_search and matches_priority and matches_status:
                result.append(t)
        return result

    # Server sync

    async def refresh(self) -> bool:
        """Replace local state with the server's list; keeps stale state on failure."""
        try:
            self.tasks = await self.client.list_tasks()
        except RequestErrors as exc:
            logger.error("Failed to fetch tasks: %s", exc)
            return False
        return True

    # Drag and drop

    def drag_start(self, active_id: str) -> None:
        self.active_id = active_id
        active = self.find(active_id)
        self._drag_origin_status = active["status"] if active else None

    def drag_over(self, active_id: str, over_id: Optional[str]) -> None:
        if over_id is None:
            return
        active = self.find(active_id)
        if active is None:
            return

        if over_id in COLUMNS:
            if active["status"] != over_id:
                active["status"] = over_id
            return

        over = self.find(over_id)
        if over is not None and over["status"] == active["status"]:
            self.tasks = array_move(self.tasks, self._index(active_id), self._index(over_id))

    async def drag_end(self, active_id: str, over_id: Optional[str]) -> bool:
        """Persist the dragged task's current status. Returns False when rolled back."""
        origin_status = self._drag_origin_status
        self.active_id = None
        self._drag_origin_status = None

        active = self.find(active_id)
        if active is None:
            return False
        if over_id is None:
            # Dropped outside the board: undo any hover reassignment
            if origin_status is not None and active["status"] != origin_status:
                await self.refresh()
            return False

        try:
            updated = await self.client.update_task(active_id, {"status": active["status"]})
        except RequestErrors as exc:
            logger.error("Failed to update task status: %s", exc)
            await self.refresh()
            return False

        # Keep manual position, adopt server fields
        self.tasks[self._index(active_id)] = updated
        return True

    async def move(self, task_id: str, status: str) -> bool:
        """Drag a task onto a column in one step."""
        self.drag_start(task_id)
        self.drag_over(task_id, status)
        return await self.drag_end(task_id, status)

    # Task actions

    async def add_task(
        self,
        title: str,
        *,
        desc: Optional[str] = None,
        priority: str = "Medium",
        assigned_to: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        if not title:
            return None
        payload: Dict[str, Any] = {"title": title, "priority": priority}
        if desc:
            payload["desc"] = desc
        if assigned_to:
            payload["assignedTo"] = assigned_to
        if status:
            payload["status"] = status
        try:
            created = await self.client.create_task(payload)
        except RequestErrors as exc:
            logger.error("Add task failed: %s", exc)
            return None
        await self.refresh()
        return created

    async def delete_task(self, task_id: str) -> bool:
        try:
            await self.client.delete_task(task_id)
        except RequestErrors as exc:
            logger.error("Delete failed: %s", exc)
            return False
        finally:
            await self.refresh()
        return True

    async def duplicate_task(self, task_id: str) -> Optional[Dict[str, Any]]:
        original = self.find(task_id)
        if original is None:
            return None
        created = await self._create_copy(original, keep_details=True)
        if created is not None:
            await self.refresh()
            self._notify("success", "Task duplicated", f"Task duplicated: {original['title']}")
        return created

    async def _create_copy(self, original: Dict[str, Any], keep_details: bool) -> Optional[Dict[str, Any]]:
        payload: Dict[str, Any] = {
            "title": f"{original['title']} (Copy)",
            "priority": original["priority"],
            "status": "Planning",
        }
        if keep_details:
            if original.get("desc"):
                payload["desc"] = original["desc"]
            if original.get("assignedTo"):
                payload["assignedTo"] = original["assignedTo"]
        try:
            return await self.client.create_task(payload)
        except RequestErrors as exc:
            logger.error("Failed to duplicate task %s: %s", original["id"], exc)
            return None

    # Bulk operations

    async def bulk_delete(self, task_ids: Iterable[str]) -> int:
        done = 0
        for task_id in list(task_ids):
            try:
                await self.client.delete_task(task_id)
                done += 1
            except RequestErrors as exc:
                logger.error("Failed to delete task %s: %s", task_id, exc)
        await self.refresh()
        return done

    async def bulk_complete(self, task_ids: Iterable[str]) -> int:
        done = 0
        for task_id in list(task_ids):
            try:
                await self.client.update_task(task_id, {"status": "Done"})
                done += 1
            except RequestErrors as exc:
                logger.error("Failed to update task %s: %s", task_id, exc)
        await self.refresh()
        return done

    async def bulk_duplicate(self, task_ids: Iterable[str]) -> int:
        done = 0
        for task_id in list(task_ids):
            original = self.find(task_id)
            if original is not None and await self._create_copy(original, keep_details=False):
                done += 1
        await self.refresh()
        return done

    # Import / export

    def export_json(self) -> str:
        return json.dumps(self.tasks, indent=2)

    async def import_json(self, raw: str) -> int:
        """Create one task per exported entry; raises ValueError on malformed input."""
        entries = json.loads(raw)
        if not isinstance(entries, list):
            raise ValueError("Expected a JSON list of tasks")
        if not all(isinstance(entry, dict) for entry in entries):
            raise ValueError("Every imported task must be a JSON object")

        created = 0
        for entry in entries:
            payload = {k: entry[k] for k in IMPORT_FIELDS if entry.get(k) is not None}
            try:
                await self.client.create_task(payload)
                created += 1
            except RequestErrors as exc:
                logger.error("Import of %r failed: %s", entry.get("title"), exc)
        await self.refresh()
        self._notify("info", "Import finished", f"Imported {created} of {len(entries)} task(s)")
        return created

    def _notify(self, kind: str, title: str, message: str) -> None:
        if self.notifications is not None:
            self.notifications.add(kind, title, message)
