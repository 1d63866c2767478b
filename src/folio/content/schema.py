"""
Front matter validation.

Turns the raw front matter dict of a content file into the typed
metadata record for its collection. Required fields are checked,
defaults filled in and dates coerced, so the query layer only ever sees
fully-defaulted records.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

from folio.content.models import (
    MUSIC,
    MUSIC_TYPES,
    POSTS,
    TAB_DIFFICULTIES,
    TABS,
    EntryMetadata,
    MusicMetadata,
    SeriesRef,
    TabMetadata,
)
from folio.core.errors import SchemaError

LANGUAGES = ("en", "ne")


def coerce_datetime(value: Any, field: str, path: Path | None = None) -> datetime:
    """Coerce a date, datetime or ISO string to a naive datetime.

    Timezone-aware values are converted to UTC so that every published
    date in a collection compares cleanly against every other.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time())
    elif isinstance(value, str) and value.strip():
        try:
            result = datetime.fromisoformat(value.strip())
        except ValueError:
            raise SchemaError(f"invalid date {value!r}", field=field, path=path)
    else:
        raise SchemaError(f"expected a date, got {value!r}", field=field, path=path)

    if result.tzinfo is not None:
        result = result.astimezone(timezone.utc).replace(tzinfo=None)
    return result


def _required_str(fm: dict[str, Any], field: str, path: Path | None) -> str:
    value = fm.get(field)
    if value is None or not str(value).strip():
        raise SchemaError("is required", field=field, path=path)
    return str(value).strip()


def _optional_str(fm: dict[str, Any], field: str) -> str | None:
    value = fm.get(field)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _bool(fm: dict[str, Any], field: str, path: Path | None, default: bool = False) -> bool:
    value = fm.get(field, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise SchemaError(f"expected true/false, got {value!r}", field=field, path=path)
    return value


def _str_list(fm: dict[str, Any], field: str, path: Path | None) -> tuple[str, ...]:
    value = fm.get(field)
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"expected a list, got {value!r}", field=field, path=path)
    return tuple(str(v) for v in value if v is not None and str(v).strip())


def _int(
    fm: dict[str, Any],
    field: str,
    path: Path | None,
    default: int | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int | None:
    value = fm.get(field, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"expected an integer, got {value!r}", field=field, path=path)
    if minimum is not None and value < minimum:
        raise SchemaError(f"must be >= {minimum}, got {value}", field=field, path=path)
    if maximum is not None and value > maximum:
        raise SchemaError(f"must be <= {maximum}, got {value}", field=field, path=path)
    return value


def _choice(
    fm: dict[str, Any],
    field: str,
    choices: tuple[str, ...],
    path: Path | None,
    default: str | None = None,
) -> str:
    value = fm.get(field, default)
    if value is None:
        raise SchemaError("is required", field=field, path=path)
    if value not in choices:
        raise SchemaError(
            f"must be one of {', '.join(choices)}, got {value!r}", field=field, path=path
        )
    return value


def parse_series_ref(value: Any, path: Path | None = None) -> SeriesRef | None:
    """Parse the ``series`` front matter field.

    Accepts a mapping with ``id``, ``part`` and ``title`` keys. A missing
    part is allowed; such entries sort last within their series.
    """
    if value is None:
        return None
    if not isinstance(value, dict):
        raise SchemaError(f"expected a mapping, got {value!r}", field="series", path=path)

    series_id = value.get("id")
    if series_id is None or not str(series_id).strip():
        raise SchemaError("is required", field="series.id", path=path)

    part = value.get("part")
    if part is not None:
        if isinstance(part, bool) or not isinstance(part, int) or part <= 0:
            raise SchemaError(
                f"must be a positive integer, got {part!r}", field="series.part", path=path
            )

    title = value.get("title")
    return SeriesRef(
        id=str(series_id).strip(),
        part=part,
        title=str(title) if title else None,
    )


def _common_fields(fm: dict[str, Any], path: Path | None) -> dict[str, Any]:
    updated = fm.get("updated")
    return {
        "title": _required_str(fm, "title", path),
        "published": coerce_datetime(fm.get("published"), "published", path),
        "updated": coerce_datetime(updated, "updated", path) if updated is not None else None,
        "draft": _bool(fm, "draft", path),
        "description": _optional_str(fm, "description") or "",
        "tags": _str_list(fm, "tags", path),
        "pinned": _bool(fm, "pinned", path),
    }


def validate_post(fm: dict[str, Any], path: Path | None = None) -> EntryMetadata:
    """Validate blog post front matter."""
    return EntryMetadata(
        **_common_fields(fm, path),
        category=_optional_str(fm, "category"),
        lang=_choice(fm, "lang", LANGUAGES, path, default="en"),
        series=parse_series_ref(fm.get("series"), path),
        permalink=_optional_str(fm, "permalink"),
    )


def validate_tab(fm: dict[str, Any], path: Path | None = None) -> TabMetadata:
    """Validate guitar tab front matter."""
    return TabMetadata(
        **_common_fields(fm, path),
        artist=_required_str(fm, "artist", path),
        difficulty=_choice(fm, "difficulty", TAB_DIFFICULTIES, path),
        album=_optional_str(fm, "album"),
        tuning=_optional_str(fm, "tuning") or "standard",
        capo=_int(fm, "capo", path, default=0, minimum=0, maximum=12),
        key=_optional_str(fm, "key"),
        tempo=_int(fm, "tempo", path, minimum=1),
    )


def validate_music(fm: dict[str, Any], path: Path | None = None) -> MusicMetadata:
    """Validate music video front matter.

    ``youtube`` may be a mapping with an ``id`` key or a bare video id.
    """
    youtube = fm.get("youtube")
    if isinstance(youtube, dict):
        youtube = youtube.get("id")
    if youtube is None or not str(youtube).strip():
        raise SchemaError("is required", field="youtube.id", path=path)

    return MusicMetadata(
        **_common_fields(fm, path),
        type=_choice(fm, "type", MUSIC_TYPES, path, default="cover"),
        youtube_id=str(youtube).strip(),
        original_artist=_optional_str(fm, "originalArtist"),
        original_song=_optional_str(fm, "originalSong"),
        album=_optional_str(fm, "album"),
        gear=_str_list(fm, "gear", path),
    )


VALIDATORS: dict[str, Callable[[dict[str, Any], Path | None], EntryMetadata]] = {
    POSTS: validate_post,
    TABS: validate_tab,
    MUSIC: validate_music,
}


def validate_metadata(
    collection: str, front_matter: dict[str, Any], path: Path | None = None
) -> EntryMetadata:
    """Validate front matter for the given collection.

    Raises:
        SchemaError: If the front matter is invalid or the collection unknown
    """
    validator = VALIDATORS.get(collection)
    if validator is None:
        raise SchemaError(f"unknown collection '{collection}'", path=path)
    if not isinstance(front_matter, dict):
        raise SchemaError("front matter must be a mapping", path=path)
    return validator(front_matter, path)
