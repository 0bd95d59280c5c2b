from pydantic import EmailStr, Field, field_validator

from .base import CamelModel


class UserInput(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value


class UserResponse(CamelModel):
    id: int
    name: str
    email: EmailStr
