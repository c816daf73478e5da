from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    Required fields are checked by the route handler so that a missing
    title or user_id is answered with 400 rather than 422.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    user_id: Optional[int] = None


class TaskUpdate(BaseModel):
    """Schema for toggling a task's completion flag."""
    is_completed: Optional[bool] = None


class Task(BaseModel):
    """Complete task schema with all fields."""
    id: int
    title: str
    description: Optional[str] = None
    user_id: int
    is_completed: bool

    model_config = ConfigDict(from_attributes=True)


class TaskDeleted(BaseModel):
    message: str
    task: Task


class DatabaseStatus(BaseModel):
    message: str
    # Postgres returns a datetime, sqlite a string
    time: Union[datetime, str]
