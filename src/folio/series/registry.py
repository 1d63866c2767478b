"""
Series definitions.

Series are defined statically in site configuration. Entries point at a
series by id; nothing here changes when entries are processed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from folio.core.errors import SchemaError


class SeriesStatus(str, Enum):
    """Publication status of a series."""

    ONGOING = "ongoing"
    PAUSED = "paused"
    COMPLETED = "completed"


# Legacy spellings accepted in series data
_STATUS_ALIASES = {"hiatus": SeriesStatus.PAUSED}

_STATUS_ORDER = {
    SeriesStatus.ONGOING: 0,
    SeriesStatus.PAUSED: 1,
    SeriesStatus.COMPLETED: 2,
}


@dataclass(frozen=True)
class Series:
    """A named, ordered grouping of entries."""

    id: str
    title: str
    description: str = ""
    status: SeriesStatus = SeriesStatus.ONGOING

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
        }


def parse_status(value: Any) -> SeriesStatus:
    """Parse a status string, accepting the ``hiatus`` alias."""
    if value is None:
        return SeriesStatus.ONGOING
    text = str(value).strip().lower()
    if text in _STATUS_ALIASES:
        return _STATUS_ALIASES[text]
    try:
        return SeriesStatus(text)
    except ValueError:
        raise SchemaError(
            f"must be one of {', '.join(s.value for s in SeriesStatus)}, got {value!r}",
            field="status",
        )


def load_series(data: Iterable[dict[str, Any]]) -> list[Series]:
    """Build Series objects from raw series definitions.

    Raises:
        SchemaError: On a missing id or title, duplicate id or unknown status
    """
    result: list[Series] = []
    seen: set[str] = set()

    for raw in data:
        if not isinstance(raw, dict):
            raise SchemaError(f"series definition must be a mapping, got {raw!r}")
        series_id = str(raw.get("id") or "").strip()
        if not series_id:
            raise SchemaError("is required", field="series.id")
        if series_id in seen:
            raise SchemaError(f"duplicate series id '{series_id}'", field="series.id")
        title = str(raw.get("title") or "").strip()
        if not title:
            raise SchemaError(f"is required for series '{series_id}'", field="series.title")
        seen.add(series_id)
        result.append(
            Series(
                id=series_id,
                title=title,
                description=str(raw.get("description") or ""),
                status=parse_status(raw.get("status")),
            )
        )

    return result


def get_series_by_id(series: Iterable[Series], series_id: str) -> Series | None:
    for s in series:
        if s.id == series_id:
            return s
    return None


def sorted_series(series: Iterable[Series]) -> list[Series]:
    """Ongoing series first, then paused, then completed."""
    return sorted(series, key=lambda s: _STATUS_ORDER[s.status])
