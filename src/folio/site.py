"""
Site facade.

Bundles configuration, the entry store, series definitions and the URL
mapper, and exposes the listings the page templates consume.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from folio.content.models import MUSIC, POSTS, TABS, Entry
from folio.content.store import EntryStore
from folio.core.config import SiteConfig, load_site_config
from folio.core.errors import FolioError
from folio.linking import link_entries
from folio.query import get_sorted_entries, get_sorted_music, get_sorted_tabs
from folio.series.registry import Series, load_series
from folio.urls import UrlMapper

logger = logging.getLogger(__name__)


class Site:
    """Content and settings for one site."""

    def __init__(
        self,
        store: EntryStore,
        config: SiteConfig | None = None,
        series: list[Series] | None = None,
    ):
        self.store = store
        self.config = config or SiteConfig()
        self.series = series if series is not None else load_series(self.config.series)
        self.urls = UrlMapper(self.config.base_path, self.config.site_url)

    @classmethod
    def load(
        cls,
        site_root: Path | None = None,
        production: bool | None = None,
        strict: bool = False,
    ) -> Site:
        """Load config, content and series for the site at site_root.

        Args:
            site_root: Site root (auto-detected if not provided)
            production: Override the configured draft filtering
            strict: Fail on invalid content files instead of skipping them
        """
        config = load_site_config(site_root)
        if production is not None:
            config = replace(config, production=production)
        store = EntryStore.load(site_root, strict=strict)
        logger.debug("Loaded %d entries (production=%s)", len(store), config.production)
        return cls(store, config)

    def posts(self) -> list[Entry]:
        """Sorted posts with global prev/next links."""
        return link_entries(get_sorted_entries(self.store.collection(POSTS), self.config.production))

    def unlinked_posts(self) -> list[Entry]:
        """Sorted posts without navigation fields, for aggregation."""
        return get_sorted_entries(self.store.collection(POSTS), self.config.production)

    def post(self, entry_id: str) -> Entry | None:
        """A post from the linked listing; None if absent or filtered out."""
        return next((p for p in self.posts() if p.id == entry_id), None)

    def tabs(self) -> list[Entry]:
        return get_sorted_tabs(self.store.collection(TABS))

    def music(self) -> list[Entry]:
        return get_sorted_music(self.store.collection(MUSIC))


def load_site(include_drafts: bool = False) -> Site:
    """Load the current site for a CLI command.

    ``include_drafts`` turns off draft filtering; otherwise the configured
    (or FOLIO_ENV) production setting applies.
    """
    return Site.load(production=False if include_drafts else None)


def load_site_for_command(include_drafts: bool, console) -> Site:
    """load_site for CLI commands: report load errors in red and exit 1."""
    try:
        return load_site(include_drafts)
    except FolioError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
