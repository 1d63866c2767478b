"""
Pagination of sorted entry lists.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from folio.content.models import Entry
from folio.core.errors import ContractViolation, PageOutOfRange


@dataclass(frozen=True)
class Page:
    """One page of a paginated listing."""

    entries: list[Entry] = field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    total_entries: int = 0

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "total_pages": self.total_pages,
            "total_entries": self.total_entries,
            "entries": [e.to_dict() for e in self.entries],
        }


def _check_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ContractViolation(f"{name} must be a positive integer, got {value!r}")


def total_pages(count: int, page_size: int) -> int:
    _check_positive("page_size", page_size)
    return math.ceil(count / page_size)


def paginate(entries: Sequence[Entry], page: int, page_size: int) -> Page:
    """Slice one 1-based page out of a sorted sequence.

    Page 1 of an empty sequence is an empty page with zero total pages.

    Raises:
        ContractViolation: If page or page_size is not a positive integer
        PageOutOfRange: If page is past the last page
    """
    _check_positive("page", page)
    pages = total_pages(len(entries), page_size)

    if page > max(pages, 1):
        raise PageOutOfRange(page, pages)

    start = (page - 1) * page_size
    return Page(
        entries=list(entries[start : start + page_size]),
        page=page,
        total_pages=pages,
        total_entries=len(entries),
    )


def iter_pages(entries: Sequence[Entry], page_size: int) -> Iterator[Page]:
    """Yield every page in order; a single empty page for no entries."""
    pages = total_pages(len(entries), page_size)
    for number in range(1, max(pages, 1) + 1):
        yield paginate(entries, number, page_size)
