"""Repositories for the Task Management service."""
from .paging import PageRequest, PageResult
from .task_repository import TaskFilter, TaskRepository
from .user_repository import UserRepository

__all__ = ["PageRequest", "PageResult", "TaskFilter", "TaskRepository", "UserRepository"]
