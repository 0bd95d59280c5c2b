"""Pydantic schemas for the Task Management service."""
from .task import TaskInput, TaskResponse, TaskStatusUpdate
from .user import UserInput, UserResponse
from .page import Page

__all__ = [
    "Page",
    "TaskInput",
    "TaskResponse",
    "TaskStatusUpdate",
    "UserInput",
    "UserResponse",
]
