"""System log endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.config import settings
from mission_control.core.exceptions import StoreError
from mission_control.crud.log import system_log
from mission_control.database import get_db
from mission_control.schemas.log import SystemLogCreate, SystemLogResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[SystemLogResponse])
async def list_logs(db: AsyncSession = Depends(get_db)):
    """Most recent log rows, newest first."""
    try:
        return await system_log.list_recent(db, limit=settings.LOGS_FETCH_LIMIT)
    except SQLAlchemyError:
        logger.exception("Failed to fetch logs")
        raise StoreError("Failed to fetch logs")


@router.post("", response_model=SystemLogResponse, status_code=status.HTTP_201_CREATED)
async def create_log(payload: SystemLogCreate, db: AsyncSession = Depends(get_db)):
    """Append a log row."""
    try:
        return await system_log.create(db, obj_in=payload)
    except SQLAlchemyError:
        logger.exception("Failed to create log")
        raise StoreError("Failed to create log")
