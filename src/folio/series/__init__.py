"""Series definitions and CLI commands."""

from folio.series.registry import (
    Series,
    SeriesStatus,
    get_series_by_id,
    load_series,
    sorted_series,
)

__all__ = [
    "Series",
    "SeriesStatus",
    "load_series",
    "get_series_by_id",
    "sorted_series",
]
