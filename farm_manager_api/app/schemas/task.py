"""
Pydantic schemas for tasks and their subtasks.

A task is due on a given date, optionally tied to a crop, and may be
flagged as internal or external work.  ``completed_at`` is managed by
the completion endpoint.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel, RecordRead


class TaskCreate(CamelModel):
    """Schema for creating or fully updating a task."""

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    due_date: str
    priority: Literal["low", "medium", "high"] = "medium"
    completed: bool = False
    completed_at: Optional[str] = None
    farm_id: Optional[int] = None
    crop_id: Optional[int] = None
    internal_external: Optional[Literal["internal", "external"]] = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task title is required")
        return v.strip()

    @field_validator("internal_external", mode="before")
    @classmethod
    def blank_scope(cls, v):
        return v or None


class TaskRead(RecordRead):
    """Schema for reading a task."""

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[str] = None
    completed: bool = False
    completed_at: Optional[str] = None
    farm_id: Optional[int] = None
    crop_id: Optional[int] = None
    internal_external: Optional[str] = None


class TaskCompletion(CamelModel):
    completed: bool = True


class SubtaskCreate(CamelModel):
    """Schema for creating a subtask."""

    name: str = Field(..., min_length=1)
    task_id: int
    completed: bool = False


class SubtaskUpdate(CamelModel):
    """Schema for updating a subtask; the parent task cannot change."""

    name: Optional[str] = Field(None, min_length=1)
    completed: Optional[bool] = None


class SubtaskRead(RecordRead):
    name: Optional[str] = None
    task_id: Optional[int] = None
    completed: bool = False
