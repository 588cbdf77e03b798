"""Generic paginated result."""

from dataclasses import dataclass
from math import ceil
from typing import Generic, TypeVar

T = TypeVar("T")


def page_offset(page: int, limit: int) -> int:
    """Rows to skip for a 1-based ``page``."""
    return (max(page, 1) - 1) * limit


@dataclass(frozen=True, kw_only=True)
class Page(Generic[T]):
    """One page of results plus the total matching count.

    Example:
        >>> page = Page(items=[a, b], total=12, page=1, limit=2)
        >>> page.total_pages, page.has_next, page.has_prev
        (6, True, False)
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1
