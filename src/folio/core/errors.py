"""Exception types raised by folio.

Lookups that find nothing never raise; they return ``None``, an empty
list or a zero count. Exceptions are reserved for caller mistakes and
content that fails validation at load time.
"""

from __future__ import annotations

from pathlib import Path


class FolioError(Exception):
    """Base class for all folio errors."""


class ContractViolation(FolioError, ValueError):
    """A caller passed a value the API does not accept."""


class PageOutOfRange(ContractViolation):
    """A page number beyond the last page was requested."""

    def __init__(self, page: int, total_pages: int):
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Page {page} is out of range (total pages: {total_pages})")


class SchemaError(FolioError, ValueError):
    """Front matter failed validation."""

    def __init__(self, message: str, field: str | None = None, path: Path | None = None):
        self.field = field
        self.path = path
        location = f"{path}: " if path else ""
        prefix = f"{field}: " if field else ""
        super().__init__(f"{location}{prefix}{message}")


class DuplicateEntryError(SchemaError):
    """Two entries in one collection share an id."""

    def __init__(self, collection: str, entry_id: str, path: Path | None = None):
        self.collection = collection
        self.entry_id = entry_id
        super().__init__(
            f"duplicate id '{entry_id}' in collection '{collection}'",
            field="id",
            path=path,
        )
