from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from ..core.config import get_settings
from ..core.database import get_db
from ..repositories.paging import PageRequest
from ..schemas.base import MAX_ID
from ..schemas.page import Page
from ..schemas.user import UserInput, UserResponse
from ..services.user_service import UserService

router = APIRouter()

settings = get_settings()


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_input: UserInput,
    service: UserService = Depends(get_user_service)
):
    """Register a user"""
    return service.create_user(user_input)


@router.get("", response_model=Page[UserResponse])
def get_users(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Page size"),
    service: UserService = Depends(get_user_service)
):
    result = service.get_all_users(PageRequest(page=page, size=size))
    return Page[UserResponse].from_result(result)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_ID, description="User ID"),
    service: UserService = Depends(get_user_service)
):
    return service.get_user_by_id(user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int = Path(..., ge=1, le=MAX_ID, description="User ID"),
    service: UserService = Depends(get_user_service)
):
    """Delete a user, unassigning their tasks"""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
