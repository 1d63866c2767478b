"""
Content loading for the site.

Provides tools for:
- Scanning content collection files
- Validating front matter into typed records
- Holding entries in a read-only store
"""

from folio.content.models import (
    Entry,
    EntryMetadata,
    MusicMetadata,
    SeriesRef,
    TabMetadata,
    TaxonomyCount,
)
from folio.content.scanner import ContentScanner
from folio.content.schema import validate_metadata
from folio.content.store import EntryStore

__all__ = [
    "Entry",
    "EntryMetadata",
    "TabMetadata",
    "MusicMetadata",
    "SeriesRef",
    "TaxonomyCount",
    "ContentScanner",
    "EntryStore",
    "validate_metadata",
]
