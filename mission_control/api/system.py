"""Health snapshot and statistics endpoints."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.core.exceptions import StoreError
from mission_control.database import get_db
from mission_control.schemas.system import HealthSnapshot, StatsResponse
from mission_control.services.health_service import health_service
from mission_control.services.stats_service import stats_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthSnapshot)
async def health():
    """Host CPU load and memory usage, computed per request."""
    return health_service.snapshot()


@router.get("/stats", response_model=StatsResponse)
async def stats(db: AsyncSession = Depends(get_db)):
    """Task and log aggregates."""
    try:
        return await stats_service.collect(db)
    except SQLAlchemyError:
        logger.exception("Failed to compute stats")
        raise StoreError("Failed to compute stats")
