"""Workspace file browser and agent roster endpoints."""
import logging
from typing import List

from fastapi import APIRouter

from mission_control.core.exceptions import BadRequestError, StoreError
from mission_control.schemas.workspace import Agent, WorkspaceFile, WorkspaceFileContent
from mission_control.services.workspace_service import InvalidFileNameError, workspace_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/files", response_model=List[WorkspaceFile])
async def list_files():
    """Markdown notes in the memory folder."""
    try:
        return workspace_service.list_files()
    except OSError:
        logger.exception("Failed to list workspace files")
        raise StoreError("Failed to fetch files")


@router.get("/files/{name:path}", response_model=WorkspaceFileContent)
async def read_file(name: str):
    """Read one note by file name."""
    try:
        return workspace_service.read_file(name)
    except InvalidFileNameError:
        logger.warning("Rejected workspace file name %r", name)
        raise BadRequestError("Invalid file name")
    except (OSError, UnicodeDecodeError):
        logger.exception("Failed to read workspace file %s", name)
        raise StoreError("Failed to read file")


@router.get("/agents", response_model=List[Agent])
async def list_agents():
    """Team roster parsed from MEMORY.md; empty when unavailable."""
    return workspace_service.list_agents()
