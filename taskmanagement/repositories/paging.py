"""
Page request and page result value objects.
"""
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and page size"""
    page: int = 0
    size: int = 10

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"Page index must not be negative: {self.page}")
        if self.size < 1:
            raise ValueError(f"Page size must be at least 1: {self.size}")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class PageResult(Generic[T]):
    """A slice of a result set plus the total count of matching rows"""
    items: List[T] = field(default_factory=list)
    total_elements: int = 0
    page: int = 0
    size: int = 10

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return (self.total_elements + self.size - 1) // self.size

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    def map(self, convert) -> "PageResult":
        """Return a page with the same metadata and converted items"""
        return PageResult(
            items=[convert(item) for item in self.items],
            total_elements=self.total_elements,
            page=self.page,
            size=self.size,
        )
