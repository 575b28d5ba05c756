"""
Heartbeat service.

Background asyncio task that periodically counts tasks waiting in Planning
and appends a SystemLog row about them. Failures are written to the log table
and never retried or propagated to request handling.

One instance per process, started and stopped by the application lifespan.
"""
import asyncio
import logging
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.crud.log import system_log
from mission_control.crud.task import task as task_crud
from mission_control.middleware.metrics import heartbeat_ticks_total, pending_tasks
from mission_control.models.log import LogLevel
from mission_control.models.task import TaskStatus
from mission_control.schemas.log import SystemLogCreate

logger = logging.getLogger(__name__)

HEARTBEAT_MODULE = "HEARTBEAT"
PULSE_FAILED_MESSAGE = "Pulse check failed: Database connectivity issue."


def pending_message(count: int) -> str:
    return f"Detected {count} pending mission(s) awaiting assignment."


class HeartbeatService:
    """Periodic pending-task check writing to the system log."""

    def __init__(self, session_factory: Callable[[], AsyncSession], interval_seconds: float = 30.0):
        """
        Args:
            session_factory: async session factory used for each tick
            interval_seconds: delay between ticks (default 30s)
        """
        self.session_factory = session_factory
        self.interval = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the heartbeat loop on the running event loop."""
        if self.running:
            logger.warning("Heartbeat already running")
            return
        self._task = asyncio.create_task(self._run(), name="mission-control-heartbeat")
        logger.info("Heartbeat started: interval=%ss", self.interval)

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Heartbeat stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self.tick()

    async def tick(self) -> Optional[int]:
        """Run one check. Returns the pending count, or None when the query failed."""
        try:
            async with self.session_factory() as db:
                pending = await task_crud.count_by_status(db, status=TaskStatus.PLANNING)
                if pending > 0:
                    await system_log.create(
                        db,
                        obj_in=SystemLogCreate(
                            level=LogLevel.INFO,
                            module=HEARTBEAT_MODULE,
                            message=pending_message(pending),
                        ),
                    )
                logger.debug("Heartbeat pulse: %d pending task(s)", pending)
        except Exception:
            logger.exception("Heartbeat pulse failed")
            heartbeat_ticks_total.labels("failed").inc()
            await self._record_failure()
            return None

        heartbeat_ticks_total.labels("ok").inc()
        pending_tasks.set(pending)
        return pending

    async def _record_failure(self) -> None:
        try:
            async with self.session_factory() as db:
                await system_log.create(
                    db,
                    obj_in=SystemLogCreate(
                        level=LogLevel.ERROR,
                        module=HEARTBEAT_MODULE,
                        message=PULSE_FAILED_MESSAGE,
                    ),
                )
        except Exception:
            logger.exception("Could not record heartbeat failure")
