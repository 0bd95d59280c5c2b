"""
Pydantic schemas for tasks.
"""
from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator

from ..models.task import TaskStatus, TaskPriority
from .base import CamelModel, MAX_ID


class TaskInput(CamelModel):
    """Schema for creating or fully updating a task"""
    title: str = Field(..., min_length=3, max_length=100, description="Task title")
    description: Optional[str] = Field(None, max_length=500, description="Task description")
    status: Optional[TaskStatus] = Field(None, description="Task status, TODO when omitted on create")
    priority: Optional[TaskPriority] = Field(None, description="Task priority, MEDIUM when omitted on create")
    due_date: Optional[date] = Field(None, description="Task due date")
    assigned_to_id: Optional[int] = Field(None, ge=1, le=MAX_ID, description="ID of the assigned user")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value


class TaskStatusUpdate(CamelModel):
    """Schema for a partial status update"""
    status: TaskStatus = Field(..., description="New task status")


class TaskResponse(CamelModel):
    """Schema for task response"""
    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    status: TaskStatus = Field(..., description="Task status")
    priority: TaskPriority = Field(..., description="Task priority")
    due_date: Optional[date] = Field(None, description="Task due date")
    created_at: datetime = Field(..., description="Task creation timestamp")
    updated_at: datetime = Field(..., description="Task update timestamp")
    assigned_to_id: Optional[int] = Field(None, description="ID of the assigned user")
    assigned_to_name: Optional[str] = Field(None, description="Name of the assigned user")
