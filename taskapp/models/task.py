"""Task domain model"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class TaskCreate(BaseModel):
    """Fields supplied by the caller when creating a task"""
    description: str = Field(..., min_length=1)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        return value


class Task(BaseModel):
    """
    A task as seen by the rest of the application.

    ``id`` is assigned by the store and is None until the task is persisted.
    """
    description: str
    created: datetime
    done: bool = False
    id: Optional[str] = None

    class Config:
        from_attributes = True

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)
