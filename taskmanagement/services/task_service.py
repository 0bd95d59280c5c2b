"""
Task lifecycle operations.

Every mutation runs as one unit of work: the read of current state and the
following writes are committed together, or rolled back together when any
step fails. Services raise domain errors and never build HTTP responses.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..core.exceptions import ResourceNotFoundError
from ..models.task import Task, TaskStatus, TaskPriority, utcnow
from ..models.user import User
from ..repositories.paging import PageRequest, PageResult
from ..repositories.task_repository import TaskFilter, TaskRepository
from ..repositories.user_repository import UserRepository
from ..schemas.task import TaskInput, TaskResponse

logger = logging.getLogger(__name__)


def task_not_found(task_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"Task not found with id: {task_id}")


def user_not_found(user_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"User not found with id: {user_id}")


def to_task_response(task: Task) -> TaskResponse:
    """Map a task entity to its transfer object"""
    assignee = task.assigned_to
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=TaskStatus(task.status),
        priority=TaskPriority(task.priority),
        due_date=task.due_date,
        created_at=task.created_at,
        updated_at=task.updated_at,
        assigned_to_id=assignee.id if assignee is not None else None,
        assigned_to_name=assignee.name if assignee is not None else None,
    )


class TaskService:
    """Orchestrates task creation, listing, updates and deletion"""

    def __init__(self, db: Session):
        self.db = db
        self.tasks = TaskRepository(db)
        self.users = UserRepository(db)

    def _load_task(self, task_id: int) -> Task:
        task = self.tasks.find_by_id(task_id)
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise task_not_found(task_id)
        return task

    def _load_assignee(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning(f"Assignee {user_id} not found")
            raise user_not_found(user_id)
        return user

    def _commit(self, task: Task) -> Task:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(task)
        return task

    def create_task(self, task_input: TaskInput) -> TaskResponse:
        """Create a task, defaulting status to TODO and priority to MEDIUM"""
        try:
            assignee = self._load_assignee(task_input.assigned_to_id)

            now = utcnow()
            task = Task(
                title=task_input.title,
                description=task_input.description,
                status=(task_input.status or TaskStatus.TODO).value,
                priority=(task_input.priority or TaskPriority.MEDIUM).value,
                due_date=task_input.due_date,
                created_at=now,
                updated_at=now,
                assigned_to=assignee,
            )
            self.tasks.save(task)
        except Exception:
            self.db.rollback()
            raise

        self._commit(task)
        logger.info(f"Created task {task.id} '{task.title}'")
        return to_task_response(task)

    def get_all_tasks(
        self,
        status: Optional[TaskStatus] = None,
        priority: Optional[TaskPriority] = None,
        assigned_to_id: Optional[int] = None,
        page_request: PageRequest = PageRequest(),
    ) -> PageResult:
        """Page of tasks matching the conjunction of the supplied filters"""
        task_filter = TaskFilter(
            status=status,
            priority=priority,
            assigned_to_id=assigned_to_id,
        )
        return self.tasks.find_by_filters(task_filter, page_request).map(to_task_response)

    def get_task_by_id(self, task_id: int) -> TaskResponse:
        return to_task_response(self._load_task(task_id))

    def update_task(self, task_id: int, task_input: TaskInput) -> TaskResponse:
        """
        Full update of a task.

        Title, description and due date are always overwritten. Status and
        priority keep their current values when the input omits them. The
        assignee is replaced by the input's user, or cleared when omitted.
        """
        try:
            task = self._load_task(task_id)
            assignee = self._load_assignee(task_input.assigned_to_id)

            task.title = task_input.title
            task.description = task_input.description
            task.due_date = task_input.due_date
            if task_input.status:
                task.status = task_input.status.value
            if task_input.priority:
                task.priority = task_input.priority.value
            task.assigned_to = assignee
            task.touch()
            self.tasks.save(task)
        except Exception:
            self.db.rollback()
            raise

        self._commit(task)
        logger.info(f"Updated task {task.id}")
        return to_task_response(task)

    def update_task_status(self, task_id: int, status: TaskStatus) -> TaskResponse:
        """Set only the status of a task"""
        try:
            task = self._load_task(task_id)
            task.status = TaskStatus(status).value
            task.touch()
            self.tasks.save(task)
        except Exception:
            self.db.rollback()
            raise

        self._commit(task)
        logger.info(f"Task {task.id} status set to {task.status}")
        return to_task_response(task)

    def delete_task(self, task_id: int) -> None:
        try:
            task = self._load_task(task_id)
            self.tasks.delete(task)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Deleted task {task_id}")
