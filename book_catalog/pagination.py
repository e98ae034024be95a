"""
Pagination Value Objects

Clients address pages starting at 1; the database OFFSET starts at 0.
PageRequest holds the 0-based index and converts at construction:

    Page 1 → offset 0
    Page 2 → offset size
    Page 3 → offset 2 * size
"""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

MIN_PAGE = 1
MIN_PAGE_SIZE = 5


@dataclass(frozen=True)
class PageRequest:
    """A 0-based page index and a page size."""

    index: int
    size: int

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        """Build a request from a 1-based page number."""
        return cls(index=page - 1, size=size)

    @property
    def number(self) -> int:
        """1-based page number as seen by clients."""
        return self.index + 1

    @property
    def offset(self) -> int:
        return self.index * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a result set plus the count needed for navigation."""

    content: list[T]
    request: PageRequest
    total_items: int = field(default=0)

    @property
    def number(self) -> int:
        return self.request.number

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def total_pages(self) -> int:
        """ceil(total_items / size), never less than 1."""
        return max(1, math.ceil(self.total_items / self.request.size))

    def is_empty(self) -> bool:
        return not self.content
