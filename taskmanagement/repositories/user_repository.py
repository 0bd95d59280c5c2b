from typing import Optional

from sqlalchemy.orm import Session

from ..models.user import User
from .paging import PageRequest, PageResult


class UserRepository:
    """Typed query operations over the users table"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def find_all(self, page_request: PageRequest) -> PageResult:
        query = self.db.query(User)
        total = query.count()
        users = (
            query.order_by(User.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        return PageResult(
            items=users,
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.flush()
