"""In-memory stand-in for the REST API, served through httpx.MockTransport."""
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from mission_control.client.api import MissionControlClient


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class FakeMissionControlAPI:
    """Implements the task routes; individual methods can be made to fail."""

    def __init__(self):
        self.tasks: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []
        self.fail: Dict[str, int] = {}  # HTTP method -> status code
        self.offline = False
        self.payloads: Dict[str, Any] = {
            "/api/logs": [],
            "/api/files": [],
            "/api/health": {"status": "ok", "cpu": 5, "memory": 40, "uptime": 10},
            "/api/stats": {"tasks": {}, "logs": {}},
            "/api/agents": [],
        }

    def add(self, title: str, status: str = "Planning", priority: str = "Medium", **extra: Any) -> Dict[str, Any]:
        task = {
            "id": str(uuid.uuid4()),
            "title": title,
            "desc": extra.get("desc"),
            "status": status,
            "priority": priority,
            "assignedTo": extra.get("assignedTo"),
            "createdAt": _now(),
            "updatedAt": _now(),
            "comments": [],
        }
        self.tasks.insert(0, task)
        return task

    def get(self, task_id: str) -> Optional[Dict[str, Any]]:
        return next((t for t in self.tasks if t["id"] == task_id), None)

    def client(self) -> MissionControlClient:
        return MissionControlClient("http://testserver", transport=httpx.MockTransport(self.handle))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method in self.fail:
            return httpx.Response(self.fail[request.method], json={"error": "Failed"})

        path = request.url.path
        if path in self.payloads and request.method == "GET":
            return httpx.Response(200, json=self.payloads[path])
        if path == "/api/tasks" and request.method == "GET":
            ordered = sorted(self.tasks, key=lambda t: t["updatedAt"], reverse=True)
            return httpx.Response(200, json=[dict(t) for t in ordered])
        if path == "/api/tasks" and request.method == "POST":
            body = json.loads(request.content)
            task = self.add(
                body["title"],
                status=body.get("status", "Planning"),
                priority=body.get("priority", "Medium"),
                desc=body.get("desc"),
                assignedTo=body.get("assignedTo"),
            )
            return httpx.Response(201, json=task)

        task_id = path.rsplit("/", 1)[-1]
        task = self.get(task_id)
        if task is None:
            return httpx.Response(404, json={"error": "Task not found"})
        if request.method == "PATCH":
            task.update(json.loads(request.content))
            task["updatedAt"] = _now()
            return httpx.Response(200, json=dict(task))
        if request.method == "DELETE":
            self.tasks.remove(task)
            return httpx.Response(204)
        return httpx.Response(200, json=dict(task))

    def calls(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]
