import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import Task as TaskModel
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskDeleted, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(db: Session, detail: str) -> HTTPException:
    logger.exception(detail)
    db.rollback()
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


def _missing_fields() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Missing required fields",
    )


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(db: Session = Depends(get_db)):
    """Return every task, in storage order."""
    try:
        return db.query(TaskModel).all()
    except SQLAlchemyError:
        raise _server_error(db, "Error fetching tasks")


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(
    task: Optional[TaskCreate] = None,
    db: Session = Depends(get_db),
):
    """Create a new task.

    ``title`` and ``user_id`` must be present and non-empty.
    """
    if task is None or not task.title or not task.user_id:
        raise _missing_fields()

    db_task = TaskModel(
        title=task.title,
        description=task.description,
        user_id=task.user_id,
    )
    try:
        db.add(db_task)
        db.commit()
        db.refresh(db_task)
    except SQLAlchemyError:
        raise _server_error(db, "Error creating task")

    logger.info("Created task %s for user %s", db_task.id, db_task.user_id)
    return db_task


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    task_id: int,
    task_update: Optional[TaskUpdate] = None,
    db: Session = Depends(get_db),
):
    """Set the completion flag of a task."""
    if task_update is None or task_update.is_completed is None:
        raise _missing_fields()

    try:
        task = db.get(TaskModel, task_id)
        if task is None:
            raise HTTPException(status_code=404, detail="Task not found")

        task.is_completed = task_update.is_completed
        db.commit()
        db.refresh(task)
    except SQLAlchemyError:
        raise _server_error(db, "Error updating task")

    return task


@router.delete("/tasks/{task_id}", response_model=TaskDeleted)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    """Delete a task and echo it back."""
    try:
        task = db.get(TaskModel, task_id)
        if task is None:
            raise HTTPException(status_code=404, detail="Task not found")

        deleted = TaskSchema.model_validate(task)
        db.delete(task)
        db.commit()
    except SQLAlchemyError:
        raise _server_error(db, "Error deleting task")

    logger.info("Deleted task %s", task_id)
    return TaskDeleted(message="Task deleted successfully", task=deleted)
