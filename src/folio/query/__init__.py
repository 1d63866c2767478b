"""Query layer over validated entries: sorting, pagination and aggregation."""

from folio.query.aggregate import (
    aggregate_by,
    category_list,
    entries_by_category,
    entries_by_tag,
    group_by_year_month,
    music_by_type,
    site_stats,
    tag_list,
    tabs_by_artist,
)
from folio.query.pagination import Page, iter_pages, paginate
from folio.query.sorting import (
    filter_drafts,
    get_sorted_entries,
    get_sorted_music,
    get_sorted_tabs,
    sort_entries,
)

__all__ = [
    "get_sorted_entries",
    "get_sorted_tabs",
    "get_sorted_music",
    "filter_drafts",
    "sort_entries",
    "Page",
    "paginate",
    "iter_pages",
    "aggregate_by",
    "tag_list",
    "category_list",
    "entries_by_tag",
    "entries_by_category",
    "group_by_year_month",
    "site_stats",
    "tabs_by_artist",
    "music_by_type",
]
