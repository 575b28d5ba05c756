"""Async HTTP client for the Mission Control REST API."""
from typing import Any, Dict, List, Optional

import httpx


class MissionControlAPIError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, detail: Any = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API request failed with {status_code}: {detail}")


class MissionControlClient:
    """Thin wrapper over ``httpx.AsyncClient``; returns decoded JSON payloads."""

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "MissionControlClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._http.request(method, path, **kwargs)
        if response.status_code >= 400:
            try:
                detail = response.json().get("error")
            except ValueError:
                detail = response.text
            raise MissionControlAPIError(response.status_code, detail)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Tasks

    async def list_tasks(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/tasks")

    async def get_task(self, task_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/api/tasks/{task_id}")

    async def create_task(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/api/tasks", json=payload)

    async def update_task(self, task_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/api/tasks/{task_id}", json=changes)

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/api/tasks/{task_id}")

    # Comments

    async def list_comments(self, task_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/api/tasks/{task_id}/comments")

    async def add_comment(self, task_id: str, text: str) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/api/tasks/{task_id}/comments", json={"text": text, "taskId": task_id}
        )

    async def delete_comment(self, comment_id: str) -> None:
        await self._request("DELETE", f"/api/comments/{comment_id}")

    # Logs

    async def list_logs(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/logs")

    async def append_log(self, level: str, module: str, message: str) -> Dict[str, Any]:
        return await self._request(
            "POST", "/api/logs", json={"level": level, "module": module, "message": message}
        )

    # System

    async def health(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/health")

    async def stats(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/stats")

    # Workspace

    async def list_files(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/files")

    async def read_file(self, name: str) -> Dict[str, Any]:
        return await self._request("GET", f"/api/files/{name}")

    async def list_agents(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/agents")
