"""
Pagination types: list filter, paging normalization and PagedResult.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 200


def normalize_paging(page: int | None, page_size: int | None) -> tuple[int, int]:
    """page <= 0 -> 1; page_size outside (0, MAX_PAGE_SIZE] -> DEFAULT_PAGE_SIZE."""
    if page is None or page <= 0:
        page = DEFAULT_PAGE
    if page_size is None or page_size <= 0 or page_size > MAX_PAGE_SIZE:
        page_size = DEFAULT_PAGE_SIZE
    return page, page_size


@dataclass(frozen=True)
class BeneficiaryListFilter:
    """Optional filters + paging for the beneficiary list."""
    name: str | None = None                  # first or last names
    document_number: str | None = None
    identity_document_id: int | None = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def normalized(self) -> "BeneficiaryListFilter":
        page, page_size = normalize_paging(self.page, self.page_size)
        return replace(
            self,
            name=(self.name or "").strip() or None,
            document_number=(self.document_number or "").strip() or None,
            page=page,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus paging metadata. `total_pages` is derived."""
    items: tuple[T, ...] = field(default_factory=tuple)
    total_count: int = 0
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, items: Sequence[T], total_count: int, page: int, page_size: int) -> "PagedResult[T]":
        return cls(items=tuple(items), total_count=total_count, page=page, page_size=page_size)

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    def map(self, fn: Callable[[T], U]) -> "PagedResult[U]":
        """Same paging metadata, items transformed in order."""
        return PagedResult(
            items=tuple(fn(item) for item in self.items),
            total_count=self.total_count,
            page=self.page,
            page_size=self.page_size,
        )

    def __len__(self) -> int:
        return len(self.items)
