"""
Offset/limit pagination helpers.

Pure functions and containers shared by repositories and services.
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PaginationMeta:
    """Page metadata returned alongside a page of results."""

    page: int
    limit: int
    total: int
    total_pages: int


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """A single page of entities plus its metadata."""

    data: list[T]
    meta: PaginationMeta


def to_offset(page: int, limit: int) -> int:
    """Return the zero-based index of the first item on ``page``."""
    return (page - 1) * limit


def build_pagination_meta(total: int, page: int, limit: int) -> PaginationMeta:
    """Compute page metadata for a collection of ``total`` items.

    ``total_pages`` never drops below 1, so an empty collection still
    reports a single (empty) page.
    """
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=max(1, math.ceil(total / limit)),
    )
