"""Common schemas used across multiple API endpoints.

Provides the paginated list envelope and small shared response bodies.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from src.application.dtos.pagination import Page

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        total: Total items matching the query.
        page: Current page number (1-indexed).
        limit: Items per page.
        total_pages: Total number of pages.
        has_next: Whether a following page exists.
        has_prev: Whether a preceding page exists.
    """

    total: int = Field(..., description="Total items available")
    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    total_pages: int = Field(..., description="Total number of pages")
    has_next: bool = Field(..., description="Whether a next page exists")
    has_prev: bool = Field(..., description="Whether a previous page exists")

    @classmethod
    def from_page(cls, page: Page) -> "PaginationMeta":
        return cls(
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )


class PaginatedResponse(BaseModel, Generic[T]):
    """List envelope: ``{items, meta}``."""

    items: list[T]
    meta: PaginationMeta


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., description="Human-readable outcome")


def reject_null(value: T | None) -> T:
    """Refuse an explicit JSON ``null`` for a field that cannot be cleared.

    PATCH bodies model omitted fields as ``None`` defaults; validators only run
    on values the client actually sent, so omission still means "unchanged".

    Raises:
        ValueError: If the client sent ``null``.
    """
    if value is None:
        raise ValueError("Field cannot be null")
    return value
