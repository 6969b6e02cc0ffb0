"""
Common response models and utilities.

Generic page wrapper and error schema.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Error response schema (FastAPI's HTTPException body)."""

    detail: str | list | dict = Field(description="Error message or validation errors")


class PageResponse(BaseModel, Generic[T]):
    """
    Generic paginated response wrapper.

    Mirrors a page of an ordered result set: the items plus enough
    metadata for a client to walk the remaining pages.
    """

    content: list[T]
    page: int = Field(description="Zero-based page index")
    size: int = Field(description="Requested page size")
    sort: str = Field(description="Field the page is ordered by")
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    has_next: bool
