"""
Task persistence and the filtered, paged task query.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.task import Task, TaskStatus, TaskPriority
from .paging import PageRequest, PageResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskFilter:
    """
    Optional equality filters for listing tasks.

    A field left as None does not restrict the result at all; it is never
    treated as "equals NULL". Supplied fields are combined with AND.
    """
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to_id: Optional[int] = None

    def predicates(self) -> list:
        """Collect one SQL expression per supplied filter"""
        active = []
        if self.status is not None:
            active.append(Task.status == TaskStatus(self.status).value)
        if self.priority is not None:
            active.append(Task.priority == TaskPriority(self.priority).value)
        if self.assigned_to_id is not None:
            active.append(Task.assigned_to_id == self.assigned_to_id)
        return active


class TaskRepository:
    """Typed query operations over the tasks table"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def find_by_filters(self, task_filter: TaskFilter, page_request: PageRequest) -> PageResult:
        """Return one page of tasks matching every supplied filter"""
        query = self.db.query(Task)

        for predicate in task_filter.predicates():
            query = query.filter(predicate)

        # Get total count before pagination
        total = query.count()

        tasks = (
            query.order_by(Task.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        logger.debug(f"Task query {task_filter} page={page_request.page} matched {total}")

        return PageResult(
            items=tasks,
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )

    def find_by_assignee(self, user_id: int) -> List[Task]:
        return self.db.query(Task).filter(Task.assigned_to_id == user_id).all()

    def save(self, task: Task) -> Task:
        self.db.add(task)
        self.db.flush()
        return task

    def delete(self, task: Task) -> None:
        self.db.delete(task)
        self.db.flush()
