"""
Validated content records.

Entries are built once at the store boundary by ``folio.content.schema``
and are immutable afterwards. Navigation fields are filled in by
``folio.linking`` which returns new Entry objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

UNCATEGORIZED = "Uncategorized"

POSTS = "posts"
TABS = "tabs"
MUSIC = "music"
COLLECTIONS = (POSTS, TABS, MUSIC)

TAB_DIFFICULTIES = ("beginner", "intermediate", "advanced", "expert")
MUSIC_TYPES = ("cover", "original", "jam", "lesson")


@dataclass(frozen=True)
class SeriesRef:
    """Position of an entry within a named series."""

    id: str
    part: int | None = None
    title: str | None = None

    @property
    def sort_part(self) -> tuple[bool, int]:
        """Sort key placing entries without a part after every numbered part."""
        return (self.part is None, self.part or 0)


@dataclass(frozen=True)
class EntryMetadata:
    """Front matter shared by every collection."""

    title: str
    published: datetime
    updated: datetime | None = None
    draft: bool = False
    description: str = ""
    tags: tuple[str, ...] = ()
    category: str | None = None
    lang: str = "en"
    pinned: bool = False
    series: SeriesRef | None = None
    permalink: str | None = None


@dataclass(frozen=True)
class TabMetadata(EntryMetadata):
    """Guitar tab front matter."""

    artist: str = ""
    difficulty: str = "beginner"
    album: str | None = None
    tuning: str = "standard"
    capo: int = 0
    key: str | None = None
    tempo: int | None = None


@dataclass(frozen=True)
class MusicMetadata(EntryMetadata):
    """Music video front matter."""

    type: str = "cover"
    youtube_id: str = ""
    original_artist: str | None = None
    original_song: str | None = None
    album: str | None = None
    gear: tuple[str, ...] = ()


@dataclass(frozen=True)
class Entry:
    """A single piece of site content."""

    id: str
    collection: str
    metadata: EntryMetadata
    body: str = ""
    path: Path | None = None

    # Populated by folio.linking.link_entries
    prev_id: str | None = None
    prev_title: str | None = None
    next_id: str | None = None
    next_title: str | None = None

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def published(self) -> datetime:
        return self.metadata.published

    @property
    def tags(self) -> list[str]:
        return list(self.metadata.tags)

    @property
    def is_draft(self) -> bool:
        return self.metadata.draft

    @property
    def is_pinned(self) -> bool:
        return self.metadata.pinned

    @property
    def category_label(self) -> str:
        """Category name, or the Uncategorized fallback."""
        return self.metadata.category or UNCATEGORIZED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        meta = self.metadata
        data: dict[str, Any] = {
            "id": self.id,
            "collection": self.collection,
            "title": meta.title,
            "published": meta.published.isoformat(),
            "updated": meta.updated.isoformat() if meta.updated else None,
            "draft": meta.draft,
            "pinned": meta.pinned,
            "tags": list(meta.tags),
            "category": meta.category,
        }
        if meta.series is not None:
            data["series"] = {
                "id": meta.series.id,
                "part": meta.series.part,
                "title": meta.series.title,
            }
        if self.prev_id or self.next_id:
            data["prev"] = {"id": self.prev_id, "title": self.prev_title} if self.prev_id else None
            data["next"] = {"id": self.next_id, "title": self.next_title} if self.next_id else None
        return data


@dataclass(frozen=True)
class TaxonomyCount:
    """A category or tag with its usage count and listing page URL."""

    name: str
    count: int
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "count": self.count, "url": self.url}
