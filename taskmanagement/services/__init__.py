"""Domain services for the Task Management service."""
from .task_service import TaskService
from .user_service import UserService

__all__ = ["TaskService", "UserService"]
