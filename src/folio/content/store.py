"""
Entry store.

Read-only holder of validated entries, keyed by collection and id.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from folio.content.models import COLLECTIONS, Entry
from folio.content.scanner import ContentScanner
from folio.core.errors import DuplicateEntryError

logger = logging.getLogger(__name__)


class EntryStore:
    """Validated entries for every content collection."""

    def __init__(self, collections: dict[str, list[Entry]] | None = None):
        self._collections: dict[str, tuple[Entry, ...]] = {}
        self._index: dict[str, dict[str, Entry]] = {}
        for name in COLLECTIONS:
            self._add_collection(name, (collections or {}).get(name, []))
        for name, entries in (collections or {}).items():
            if name not in self._collections:
                self._add_collection(name, entries)

    def _add_collection(self, name: str, entries: Iterable[Entry]) -> None:
        index: dict[str, Entry] = {}
        for entry in entries:
            if entry.id in index:
                raise DuplicateEntryError(name, entry.id, path=entry.path)
            index[entry.id] = entry
        self._index[name] = index
        self._collections[name] = tuple(index.values())
        logger.debug("Loaded %d entries into %s", len(index), name)

    @classmethod
    def load(cls, site_root: Path | None = None, strict: bool = False) -> EntryStore:
        """Scan the site's content directories into a new store."""
        scanner = ContentScanner(site_root, strict=strict)
        return cls(scanner.scan_all())

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> EntryStore:
        """Build a store from entries, grouping them by their collection."""
        grouped: dict[str, list[Entry]] = {}
        for entry in entries:
            grouped.setdefault(entry.collection, []).append(entry)
        return cls(grouped)

    @property
    def collection_names(self) -> list[str]:
        return list(self._collections)

    def collection(self, name: str) -> list[Entry]:
        """Entries of a collection; empty for unknown names."""
        return list(self._collections.get(name, ()))

    def get(self, collection: str, entry_id: str) -> Entry | None:
        return self._index.get(collection, {}).get(entry_id)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._collections.values())
