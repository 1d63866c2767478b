"""
Aggregation of entries by taxonomy and date.

These functions feed the category, tag and archive listing pages.
Counts and ordering here are visible site behaviour.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

from folio.content.models import Entry, TaxonomyCount
from folio.urls import PathKind, resolve_path


def tag_keys(entry: Entry) -> list[str]:
    return entry.tags


def category_keys(entry: Entry) -> list[str]:
    return [entry.category_label]


def aggregate_by(
    entries: Iterable[Entry],
    key_fn: Callable[[Entry], Iterable[str]],
    kind: PathKind | str,
    base_path: str = "/",
) -> list[TaxonomyCount]:
    """Count entries per key.

    Args:
        entries: Entries to aggregate
        key_fn: Returns the keys an entry contributes to; an entry with
            N keys counts once towards each of them
        kind: Path kind used to build each key's URL
        base_path: Site base path

    Returns:
        One TaxonomyCount per distinct key, sorted case-insensitively
    """
    counts: Counter[str] = Counter()
    for entry in entries:
        for key in dict.fromkeys(key_fn(entry)):
            counts[key] += 1

    return [
        TaxonomyCount(name=name, count=count, url=resolve_path(kind, name, base_path=base_path))
        for name, count in sorted(counts.items(), key=lambda kv: (kv[0].lower(), kv[0]))
    ]


def tag_list(entries: Iterable[Entry], base_path: str = "/") -> list[TaxonomyCount]:
    """All tags with entry counts."""
    return aggregate_by(entries, tag_keys, PathKind.TAG, base_path)


def category_list(entries: Iterable[Entry], base_path: str = "/") -> list[TaxonomyCount]:
    """All categories with entry counts; entries without one count as Uncategorized."""
    return aggregate_by(entries, category_keys, PathKind.CATEGORY, base_path)


def entries_by_tag(entries: Iterable[Entry], tag: str) -> list[Entry]:
    """Entries carrying tag, compared case-insensitively."""
    wanted = tag.lower()
    return [e for e in entries if any(t.lower() == wanted for t in e.tags)]


def entries_by_category(entries: Iterable[Entry], category: str) -> list[Entry]:
    """Entries in category, compared case-insensitively.

    Asking for the Uncategorized label returns entries with no category.
    """
    wanted = category.lower()
    return [e for e in entries if e.category_label.lower() == wanted]


def group_by_year_month(entries: Iterable[Entry]) -> dict[int, dict[int, list[Entry]]]:
    """Group entries into year -> month -> entries for archive views.

    Years and months appear in first-seen order and each bucket keeps
    the input order, so sorted input gives a newest-first archive.
    """
    grouped: dict[int, dict[int, list[Entry]]] = {}
    for entry in entries:
        published = entry.published
        grouped.setdefault(published.year, {}).setdefault(published.month, []).append(entry)
    return grouped


def site_stats(entries: Iterable[Entry]) -> dict[str, Any]:
    """Totals shown on the site's stats widget."""
    entries = list(entries)
    return {
        "total_posts": len(entries),
        "total_categories": len(category_list(entries)),
        "total_tags": len(tag_list(entries)),
    }


def tabs_by_artist(tabs: Iterable[Entry]) -> dict[str, list[Entry]]:
    """Group guitar tabs by artist, keeping input order within each artist."""
    grouped: dict[str, list[Entry]] = {}
    for tab in tabs:
        grouped.setdefault(getattr(tab.metadata, "artist", ""), []).append(tab)
    return grouped


def music_by_type(music: Iterable[Entry]) -> dict[str, list[Entry]]:
    """Split music entries into covers, originals, jams and lessons."""
    groups: dict[str, list[Entry]] = {"covers": [], "originals": [], "jams": [], "lessons": []}
    for entry in music:
        kind = getattr(entry.metadata, "type", "cover")
        groups[f"{kind}s"].append(entry)
    return groups
