"""Tasks API endpoints."""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.core.exceptions import NotFoundError, StoreError
from mission_control.crud.task import comment, task
from mission_control.database import get_db
from mission_control.schemas.task import (
    CommentCreate,
    CommentResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[TaskResponse])
async def list_tasks(db: AsyncSession = Depends(get_db)):
    """List all tasks, newest-updated first, with comments."""
    try:
        return await task.list_recent(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch tasks")
        raise StoreError("Failed to fetch tasks")


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, db: AsyncSession = Depends(get_db)):
    """Create a task; status and priority default to Planning and Medium."""
    try:
        new_task = await task.create(db, obj_in=payload)
    except SQLAlchemyError:
        logger.exception("Failed to create task")
        raise StoreError("Failed to create task")
    logger.info("Task created: %s (%s)", new_task.id, new_task.title)
    return new_task


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: UUID, db: AsyncSession = Depends(get_db)):
    """Fetch a task by id."""
    try:
        task_obj = await task.get_with_comments(db, task_id=task_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch task %s", task_id)
        raise StoreError("Failed to fetch task")
    if not task_obj:
        raise NotFoundError("Task not found")
    return task_obj


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: UUID, payload: TaskUpdate, db: AsyncSession = Depends(get_db)):
    """Apply only the fields present in the body."""
    try:
        task_obj = await task.get_with_comments(db, task_id=task_id)
        if not task_obj:
            raise NotFoundError("Task not found")
        return await task.update(db, db_obj=task_obj, obj_in=payload)
    except SQLAlchemyError:
        logger.exception("Failed to update task %s", task_id)
        raise StoreError("Failed to update task")


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(task_id: UUID, db: AsyncSession = Depends(get_db)):
    """Delete a task together with its comments."""
    try:
        removed = await task.remove(db, id=task_id)
    except SQLAlchemyError:
        logger.exception("Failed to delete task %s", task_id)
        raise StoreError("Failed to delete task")
    if removed is None:
        raise NotFoundError("Task not found")
    logger.info("Task deleted: %s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{task_id}/comments", response_model=List[CommentResponse])
async def list_comments(task_id: UUID, db: AsyncSession = Depends(get_db)):
    """Comments of a task, oldest first."""
    try:
        if not await task.get(db, id=task_id):
            raise NotFoundError("Task not found")
        return await comment.list_for_task(db, task_id=task_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch comments for task %s", task_id)
        raise StoreError("Failed to fetch comments")


@router.post(
    "/{task_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(task_id: UUID, payload: CommentCreate, db: AsyncSession = Depends(get_db)):
    """Add a comment to a task."""
    try:
        if not await task.get(db, id=task_id):
            raise NotFoundError("Task not found")
        return await comment.create_for_task(db, task_id=task_id, obj_in=payload)
    except SQLAlchemyError:
        logger.exception("Failed to create comment for task %s", task_id)
        raise StoreError("Failed to create comment")
