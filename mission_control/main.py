"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mission_control.api import comments, logs, system, tasks, workspace
from mission_control.config import settings
from mission_control.core.exceptions import setup_exception_handlers
from mission_control.database import AsyncSessionLocal, close_db, init_db
from mission_control.middleware.metrics import setup_metrics
from mission_control.middleware.request_logging import RequestLoggingMiddleware
from mission_control.schemas.common import ErrorResponse
from mission_control.services.heartbeat_service import HeartbeatService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    await init_db()
    heartbeat = HeartbeatService(AsyncSessionLocal, settings.HEARTBEAT_INTERVAL_SECONDS)
    app.state.heartbeat = heartbeat
    if settings.HEARTBEAT_ENABLED:
        heartbeat.start()
    yield
    # Shutdown
    await heartbeat.stop()
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging middleware
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)
setup_metrics(app)

# Include routers
error_responses = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Store or filesystem failure"},
}
not_found = {404: {"model": ErrorResponse, "description": "Not found"}}

app.include_router(
    tasks.router,
    prefix=f"{settings.API_PREFIX}/tasks",
    tags=["tasks"],
    responses={**error_responses, **not_found},
)
app.include_router(
    comments.router,
    prefix=f"{settings.API_PREFIX}/comments",
    tags=["comments"],
    responses={**error_responses, **not_found},
)
app.include_router(logs.router, prefix=f"{settings.API_PREFIX}/logs", tags=["logs"], responses=error_responses)
app.include_router(system.router, prefix=settings.API_PREFIX, tags=["system"], responses=error_responses)
app.include_router(workspace.router, prefix=settings.API_PREFIX, tags=["workspace"], responses=error_responses)
