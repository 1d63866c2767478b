"""Prev/next cross-links, globally and within a series."""

from folio.linking.resolver import (
    SeriesNavigation,
    SeriesWithCount,
    entries_by_series,
    featured_series,
    get_series_navigation,
    link_entries,
    series_count,
    series_list,
)

__all__ = [
    "link_entries",
    "entries_by_series",
    "series_count",
    "series_list",
    "featured_series",
    "get_series_navigation",
    "SeriesNavigation",
    "SeriesWithCount",
]
