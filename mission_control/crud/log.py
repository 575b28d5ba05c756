"""System log CRUD operations."""
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.crud.base import CRUDBase
from mission_control.models.log import SystemLog
from mission_control.schemas.log import SystemLogCreate


class CRUDSystemLog(CRUDBase[SystemLog, SystemLogCreate, dict]):
    """CRUD operations for SystemLog (append-only)."""

    async def list_recent(self, db: AsyncSession, *, limit: int = 50) -> List[SystemLog]:
        """Newest entries first."""
        result = await db.execute(
            select(SystemLog).order_by(SystemLog.timestamp.desc()).limit(limit)
        )
        return list(result.scalars().all())


system_log = CRUDSystemLog(SystemLog)
