"""
Cross-links between entries.

Global links give every entry in a sorted listing its older ("prev")
and newer ("next") neighbour. Series navigation is a read-only query
over the entries of one series ordered by part number.

Both operate on the production-filtered, sorted listing so drafts never
show up as a neighbour.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from folio.content.models import Entry
from folio.series.registry import Series


@dataclass(frozen=True)
class SeriesNavigation:
    """Where an entry sits within its series."""

    prev: Entry | None
    next: Entry | None
    total: int
    current: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "prev": {"id": self.prev.id, "title": self.prev.title} if self.prev else None,
            "next": {"id": self.next.id, "title": self.next.title} if self.next else None,
            "total": self.total,
            "current": self.current,
        }


@dataclass(frozen=True)
class SeriesWithCount:
    """A series definition with the number of entries that belong to it."""

    series: Series
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {**self.series.to_dict(), "count": self.count}


def link_entries(entries: Sequence[Entry]) -> list[Entry]:
    """Annotate a newest-first listing with prev/next neighbours.

    The entry at ``i`` gets ``next`` from ``i - 1`` (newer) and ``prev``
    from ``i + 1`` (older). Returns new Entry objects; the input entries
    are left untouched, so linking twice gives the same result.
    """
    linked: list[Entry] = []
    last = len(entries) - 1
    for i, entry in enumerate(entries):
        newer = entries[i - 1] if i > 0 else None
        older = entries[i + 1] if i < last else None
        linked.append(
            replace(
                entry,
                next_id=newer.id if newer else None,
                next_title=newer.title if newer else None,
                prev_id=older.id if older else None,
                prev_title=older.title if older else None,
            )
        )
    return linked


def entries_by_series(entries: Iterable[Entry], series_id: str) -> list[Entry]:
    """Entries of one series, ordered by part.

    Entries without a part come last. Entries sharing a part keep their
    order from ``entries``.
    """
    members = [
        e for e in entries
        if e.metadata.series is not None and e.metadata.series.id == series_id
    ]
    return sorted(members, key=lambda e: e.metadata.series.sort_part)


def series_count(entries: Iterable[Entry], series_id: str) -> int:
    """Number of entries in a series; 0 for unknown ids."""
    return sum(
        1 for e in entries
        if e.metadata.series is not None and e.metadata.series.id == series_id
    )


def get_series_navigation(entry: Entry, entries: Iterable[Entry]) -> SeriesNavigation | None:
    """Series prev/next for an entry.

    Args:
        entry: The entry being viewed
        entries: The filtered, sorted listing to look for siblings in

    Returns:
        SeriesNavigation, or None if the entry has no series or is not
        part of ``entries``
    """
    ref = entry.metadata.series
    if ref is None:
        return None

    siblings = entries_by_series(entries, ref.id)
    index = next((i for i, e in enumerate(siblings) if e.id == entry.id), None)
    if index is None:
        return None

    return SeriesNavigation(
        prev=siblings[index - 1] if index > 0 else None,
        next=siblings[index + 1] if index < len(siblings) - 1 else None,
        total=len(siblings),
        current=index + 1,
    )


def series_list(series: Iterable[Series], entries: Iterable[Entry]) -> list[SeriesWithCount]:
    """Every defined series with its entry count, in definition order."""
    entries = list(entries)
    return [SeriesWithCount(series=s, count=series_count(entries, s.id)) for s in series]


def featured_series(
    series: Iterable[Series], entries: Iterable[Entry], limit: int = 3
) -> list[SeriesWithCount]:
    """The first ``limit`` series that have at least one entry."""
    return [s for s in series_list(series, entries) if s.count > 0][:limit]
