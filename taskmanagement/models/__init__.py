"""Database models for the Task Management service."""
from .task import Task, TaskPriority, TaskStatus
from .user import User

__all__ = ["Task", "TaskPriority", "TaskStatus", "User"]
