"""Task and comment CRUD operations."""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mission_control.crud.base import CRUDBase
from mission_control.models.task import Comment, Task, TaskStatus
from mission_control.schemas.task import CommentCreate, TaskCreate, TaskUpdate


class CRUDTask(CRUDBase[Task, TaskCreate, TaskUpdate]):
    """CRUD operations for Task; every read eagerly loads comments."""

    async def get_with_comments(self, db: AsyncSession, *, task_id: UUID) -> Optional[Task]:
        result = await db.execute(
            select(Task)
            .where(Task.id == task_id)
            .options(selectinload(Task.comments))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_recent(self, db: AsyncSession) -> List[Task]:
        """All tasks, most recently updated first."""
        result = await db.execute(
            select(Task)
            .options(selectinload(Task.comments))
            .order_by(Task.updated_at.desc())
        )
        return list(result.scalars().all())

    async def count_by_status(self, db: AsyncSession, *, status: TaskStatus) -> int:
        result = await db.execute(
            select(func.count()).select_from(Task).where(Task.status == status)
        )
        return result.scalar_one()

    async def create(self, db: AsyncSession, *, obj_in: TaskCreate) -> Task:
        task_obj = Task(**obj_in.model_dump())
        db.add(task_obj)
        await db.commit()
        return await self.get_with_comments(db, task_id=task_obj.id)

    async def update(self, db: AsyncSession, *, db_obj: Task, obj_in: TaskUpdate) -> Task:
        # No version check: concurrent writers overwrite each other
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)
        db.add(db_obj)
        await db.commit()
        return await self.get_with_comments(db, task_id=db_obj.id)

    async def remove(self, db: AsyncSession, *, id: UUID) -> Optional[Task]:
        # Loaded comments are deleted by the ORM cascade; the FK cascade covers the rest
        task_obj = await self.get_with_comments(db, task_id=id)
        if task_obj is not None:
            await db.delete(task_obj)
            await db.commit()
        return task_obj


class CRUDComment(CRUDBase[Comment, CommentCreate, dict]):
    """CRUD operations for Comment, scoped by owning task."""

    async def list_for_task(self, db: AsyncSession, *, task_id: UUID) -> List[Comment]:
        result = await db.execute(
            select(Comment)
            .where(Comment.task_id == task_id)
            .order_by(Comment.created_at.asc())
        )
        return list(result.scalars().all())

    async def create_for_task(self, db: AsyncSession, *, task_id: UUID, obj_in: CommentCreate) -> Comment:
        comment_obj = Comment(task_id=task_id, text=obj_in.text)
        db.add(comment_obj)
        await db.commit()
        await db.refresh(comment_obj)
        return comment_obj


task = CRUDTask(Task)
comment = CRUDComment(Comment)
