"""
Dashboard poller.

Each resource is refreshed by its own loop on a fixed interval. Loops are
independent: no batching, no backpressure, and an in-flight request is never
cancelled in favour of a newer one. A failed poll keeps the previous snapshot.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from mission_control.client.api import MissionControlAPIError, MissionControlClient

logger = logging.getLogger(__name__)

DEFAULT_INTERVALS: Dict[str, float] = {
    "logs": 5.0,
    "tasks": 10.0,
    "files": 10.0,
    "health": 10.0,
    "stats": 30.0,
    "agents": 30.0,
}

UpdateCallback = Callable[[str, Any], None]


class DashboardPoller:
    """Keeps the latest successful payload of every dashboard resource."""

    def __init__(
        self,
        client: MissionControlClient,
        intervals: Optional[Dict[str, float]] = None,
        on_update: Optional[UpdateCallback] = None,
    ):
        self.client = client
        self.intervals = dict(DEFAULT_INTERVALS if intervals is None else intervals)
        self.on_update = on_update
        self.snapshots: Dict[str, Any] = {}
        self.last_errors: Dict[str, Exception] = {}
        self._fetchers: Dict[str, Callable[[], Awaitable[Any]]] = {
            "logs": client.list_logs,
            "tasks": client.list_tasks,
            "files": client.list_files,
            "health": client.health,
            "stats": client.stats,
            "agents": client.list_agents,
        }
        unknown = set(self.intervals) - set(self._fetchers)
        if unknown:
            raise ValueError(f"Unknown dashboard resources: {sorted(unknown)}")
        self._runners: List[asyncio.Task] = []

    async def poll_once(self, resource: str) -> bool:
        """Fetch one resource; on failure the stale snapshot stays in place."""
        try:
            payload = await self._fetchers[resource]()
        except (httpx.HTTPError, MissionControlAPIError) as exc:
            self.last_errors[resource] = exc
            logger.warning("Polling %s failed: %s", resource, exc)
            return False
        self.snapshots[resource] = payload
        self.last_errors.pop(resource, None)
        if self.on_update is not None:
            self.on_update(resource, payload)
        return True

    async def _loop(self, resource: str, interval: float) -> None:
        while True:
            await self.poll_once(resource)
            await asyncio.sleep(interval)

    def start(self) -> None:
        if self._runners:
            logger.warning("Dashboard poller already running")
            return
        for resource, interval in self.intervals.items():
            self._runners.append(
                asyncio.create_task(self._loop(resource, interval), name=f"poll-{resource}")
            )

    async def stop(self) -> None:
        for runner in self._runners:
            runner.cancel()
        await asyncio.gather(*self._runners, return_exceptions=True)
        self._runners = []
