"""
Paged response schema shared by list endpoints.
"""
from typing import Generic, List, TypeVar
from pydantic import Field

from .base import CamelModel
from ..repositories.paging import PageResult

T = TypeVar("T")


class Page(CamelModel, Generic[T]):
    """Schema for a page of results"""
    content: List[T] = Field(..., description="Items on this page")
    total_elements: int = Field(..., description="Number of matching items across all pages")
    total_pages: int = Field(..., description="Number of pages")
    number: int = Field(..., description="Zero-based page index")
    size: int = Field(..., description="Requested page size")
    number_of_elements: int = Field(..., description="Number of items on this page")
    first: bool = Field(..., description="Whether this is the first page")
    last: bool = Field(..., description="Whether this is the last page")
    empty: bool = Field(..., description="Whether this page has no items")

    @classmethod
    def from_result(cls, result: PageResult) -> "Page":
        content = list(result.items)
        return cls(
            content=content,
            total_elements=result.total_elements,
            total_pages=result.total_pages,
            number=result.page,
            size=result.size,
            number_of_elements=len(content),
            first=result.is_first,
            last=result.is_last,
            empty=not content,
        )
