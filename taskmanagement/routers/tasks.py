from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from ..core.config import get_settings
from ..core.database import get_db
from ..models.task import TaskStatus, TaskPriority
from ..repositories.paging import PageRequest
from ..schemas.base import MAX_ID
from ..schemas.page import Page
from ..schemas.task import TaskInput, TaskResponse, TaskStatusUpdate
from ..services.task_service import TaskService

router = APIRouter()

settings = get_settings()


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_input: TaskInput,
    service: TaskService = Depends(get_task_service)
):
    """Create a new task, optionally assigned to a user"""
    return service.create_task(task_input)


@router.get("", response_model=Page[TaskResponse])
def get_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status", description="Filter by status"),
    priority_filter: Optional[TaskPriority] = Query(None, alias="priority", description="Filter by priority"),
    assigned_to_id: Optional[int] = Query(None, alias="assignedToId", ge=1, le=MAX_ID, description="Filter by assignee"),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Page size"),
    service: TaskService = Depends(get_task_service)
):
    """Get tasks with optional filtering and pagination"""
    result = service.get_all_tasks(
        status=status_filter,
        priority=priority_filter,
        assigned_to_id=assigned_to_id,
        page_request=PageRequest(page=page, size=size),
    )
    return Page[TaskResponse].from_result(result)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int = Path(..., ge=1, le=MAX_ID, description="Task ID"),
    service: TaskService = Depends(get_task_service)
):
    """Get a specific task by ID"""
    return service.get_task_by_id(task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_input: TaskInput,
    task_id: int = Path(..., ge=1, le=MAX_ID, description="Task ID"),
    service: TaskService = Depends(get_task_service)
):
    """Replace a task's fields"""
    return service.update_task(task_id, task_input)


@router.patch("/{task_id}/status", response_model=TaskResponse)
def update_task_status(
    status_update: TaskStatusUpdate,
    task_id: int = Path(..., ge=1, le=MAX_ID, description="Task ID"),
    service: TaskService = Depends(get_task_service)
):
    """Change only the status of a task"""
    return service.update_task_status(task_id, status_update.status)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int = Path(..., ge=1, le=MAX_ID, description="Task ID"),
    service: TaskService = Depends(get_task_service)
):
    """Delete a task"""
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
