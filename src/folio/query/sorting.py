"""
Draft filtering and ordering of entries.
"""

from __future__ import annotations

from collections.abc import Iterable

from folio.content.models import Entry


def filter_drafts(entries: Iterable[Entry], production: bool) -> list[Entry]:
    """Drop draft entries when production is set; keep everything otherwise."""
    if not production:
        return list(entries)
    return [e for e in entries if not e.is_draft]


def sort_entries(entries: Iterable[Entry], pinned_first: bool = True) -> list[Entry]:
    """Order entries newest first, pinned entries ahead of the rest.

    Entries published at the same moment are ordered by id so the result
    does not depend on input order.
    """
    # Stable sorts, applied from least to most significant key
    ordered = sorted(entries, key=lambda e: e.id)
    ordered.sort(key=lambda e: e.published, reverse=True)
    if pinned_first:
        ordered.sort(key=lambda e: not e.is_pinned)
    return ordered


def get_sorted_entries(collection: Iterable[Entry], production: bool) -> list[Entry]:
    """Filter drafts (in production) and sort a collection.

    Args:
        collection: Entries of one collection; not modified
        production: Exclude entries marked as draft

    Returns:
        A new list, pinned entries first, each partition newest first
    """
    return sort_entries(filter_drafts(collection, production))


def get_sorted_tabs(tabs: Iterable[Entry]) -> list[Entry]:
    """Guitar tabs newest first. Tabs have no drafts and are never pinned."""
    return sort_entries(tabs, pinned_first=False)


def get_sorted_music(music: Iterable[Entry]) -> list[Entry]:
    """Music entries newest first."""
    return sort_entries(music, pinned_first=False)
