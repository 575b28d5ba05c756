"""Comment endpoints addressed by comment id."""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.core.exceptions import NotFoundError, StoreError
from mission_control.crud.task import comment
from mission_control.database import get_db
from mission_control.schemas.task import CommentResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: UUID, db: AsyncSession = Depends(get_db)):
    """Fetch a comment by id."""
    try:
        comment_obj = await comment.get(db, id=comment_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch comment %s", comment_id)
        raise StoreError("Failed to fetch comment")
    if not comment_obj:
        raise NotFoundError("Comment not found")
    return comment_obj


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_comment(comment_id: UUID, db: AsyncSession = Depends(get_db)):
    """Delete a comment."""
    try:
        removed = await comment.remove(db, id=comment_id)
    except SQLAlchemyError:
        logger.exception("Failed to delete comment %s", comment_id)
        raise StoreError("Failed to delete comment")
    if removed is None:
        raise NotFoundError("Comment not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
