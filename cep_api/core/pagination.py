"""
Pagination primitives.

PageRequest carries (page index, page size, sort field, direction) and
validates itself on construction. Page is the storage-agnostic slice
returned by every paginated read.

Dependencies: dataclasses, cep_api.core.exceptions
System role: Paged query contract shared by storage adapters and services
"""

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from cep_api.core.exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 2000
DEFAULT_SORT = "street"

SORTABLE_FIELDS: frozenset[str] = frozenset({
    "id",
    "postal_code",
    "street",
    "complement",
    "neighborhood",
    "city",
    "state_code",
    "region_code",
    "tax_region_code",
    "area_code",
    "finance_region_code",
    "created_at",
    "updated_at",
})


@dataclass(frozen=True)
class PageRequest:
    """
    Validated pagination parameters.

    Attributes:
        page: Zero-based page index
        size: Items per page (1..MAX_PAGE_SIZE)
        sort: Record field to order by
        descending: Sort direction (ascending by default)

    Raises:
        ValidationError: If any parameter is out of range or the sort field
            is not a record field
    """

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: str = DEFAULT_SORT
    descending: bool = False

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError("page deve ser maior ou igual a 0", field="page")
        if self.size <= 0:
            raise ValidationError("size deve ser maior que 0", field="size")
        if self.size > MAX_PAGE_SIZE:
            raise ValidationError(
                f"size deve ser no máximo {MAX_PAGE_SIZE}", field="size"
            )
        if self.sort not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Campo de ordenação inválido: {self.sort}",
                field="sort",
                details={"allowed": sorted(SORTABLE_FIELDS)},
            )

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of an ordered result set."""

    items: list[T]
    request: PageRequest
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return math.ceil(self.total_elements / self.request.size)

    @property
    def is_first(self) -> bool:
        return self.request.page == 0

    @property
    def is_last(self) -> bool:
        return self.request.page >= self.total_pages - 1

    @property
    def has_next(self) -> bool:
        return self.request.page + 1 < self.total_pages

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        """Return a page with func applied to each item, keeping the metadata."""
        return Page(
            items=[func(item) for item in self.items],
            request=self.request,
            total_elements=self.total_elements,
        )
