import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import DuplicateResourceError, ResourceNotFoundError
from ..models.user import User
from ..repositories.paging import PageRequest, PageResult
from ..repositories.task_repository import TaskRepository
from ..repositories.user_repository import UserRepository
from ..schemas.user import UserInput, UserResponse

logger = logging.getLogger(__name__)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


class UserService:
    """User registration and lookup"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.tasks = TaskRepository(db)

    def _load_user(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise ResourceNotFoundError(f"User not found with id: {user_id}")
        return user

    def create_user(self, user_input: UserInput) -> UserResponse:
        """Register a user; the email must not be taken"""
        email = str(user_input.email)
        if self.users.exists_by_email(email):
            logger.warning(f"Duplicate email rejected: {email}")
            raise DuplicateResourceError(f"Email already exists: {email}")

        user = User(name=user_input.name, email=email)
        try:
            self.users.save(user)
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            self.db.rollback()
            raise DuplicateResourceError(f"Email already exists: {email}")
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(user)
        logger.info(f"Created user {user.id} <{user.email}>")
        return to_user_response(user)

    def get_all_users(self, page_request: PageRequest = PageRequest()) -> PageResult:
        return self.users.find_all(page_request).map(to_user_response)

    def get_user_by_id(self, user_id: int) -> UserResponse:
        return to_user_response(self._load_user(user_id))

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user and clear the assignment on every task referencing it.

        The tasks themselves are kept.
        """
        try:
            user = self._load_user(user_id)
            released = self.tasks.find_by_assignee(user_id)
            for task in released:
                task.assigned_to = None
                task.touch()
                self.tasks.save(task)
            self.users.delete(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Deleted user {user_id}, unassigned {len(released)} task(s)")
