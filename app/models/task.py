from sqlmodel import SQLModel, Field
from typing import Optional


class Task(SQLModel, table=True):
    """Task model for todo items."""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    user_id: int = Field(foreign_key="users.id", nullable=False)
    is_completed: bool = Field(default=False, nullable=False)
