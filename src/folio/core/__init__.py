"""Core utilities for folio."""

from folio.core.config import SiteConfig, get_paths, get_site_root, load_site_config
from folio.core.errors import (
    ContractViolation,
    DuplicateEntryError,
    FolioError,
    PageOutOfRange,
    SchemaError,
)

__all__ = [
    # Config
    "get_site_root",
    "get_paths",
    "load_site_config",
    "SiteConfig",
    # Errors
    "FolioError",
    "ContractViolation",
    "PageOutOfRange",
    "SchemaError",
    "DuplicateEntryError",
]
