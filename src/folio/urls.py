"""
Site-relative URL construction.

Maps entry ids and taxonomy values to canonical paths under a single
configurable base path. Every path ends with a trailing slash. Category
and tag values are lower-cased before encoding, so "DevOps" and "devops"
share one listing page.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from folio.core.errors import ContractViolation

# Characters encodeURIComponent leaves untouched
_COMPONENT_SAFE = "-_.!~*'()"


class PathKind(str, Enum):
    """Kinds of site paths."""

    POST = "post"
    CATEGORY = "category"
    TAG = "tag"
    SERIES = "series"
    TAB = "tab"
    MUSIC = "music"
    PAGE = "page"


_PREFIXES = {
    PathKind.POST: "posts",
    PathKind.CATEGORY: "categories",
    PathKind.TAG: "tags",
    PathKind.SERIES: "series",
    PathKind.TAB: "tabs",
    PathKind.MUSIC: "music",
}


def join_base(path: str, base_path: str = "/") -> str:
    """Prefix a site-relative path with the base path.

    >>> join_base("/posts/my-post/", "/portfolio")
    '/portfolio/posts/my-post/'
    """
    base = base_path or "/"
    if not base.startswith("/"):
        base = f"/{base}"
    if not base.endswith("/"):
        base = f"{base}/"
    clean = path.lstrip("/") if path else ""
    return f"{base}{clean}"


def absolute_url(path: str, site_url: str = "https://example.com") -> str:
    """Turn a resolved site path (base path included) into an absolute URL."""
    return f"{site_url.rstrip('/')}/{path.lstrip('/')}"


def encode_taxonomy(value: str) -> str:
    """Canonical URL segment for a category or tag."""
    return quote(value.strip().lower(), safe=_COMPONENT_SAFE)


def _check_value(kind: PathKind, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ContractViolation(f"{kind.value} path requires a non-empty value, got {value!r}")
    if kind in (PathKind.CATEGORY, PathKind.TAG):
        # quote() leaves dots alone, so these would become relative segments
        if value.strip() in (".", ".."):
            raise ContractViolation(f"malformed {kind.value} value {value!r}")
        return value
    clean = value.strip().strip("/")
    segments = clean.split("/")
    if not clean or any(seg in ("", ".", "..") for seg in segments):
        raise ContractViolation(f"malformed {kind.value} identifier {value!r}")
    return clean


def resolve_path(kind: PathKind | str, value: str, page: int = 1, base_path: str = "/") -> str:
    """Resolve a content identifier or taxonomy value to its site path.

    Args:
        kind: What the value names; a PathKind or its string value
        value: Entry id, taxonomy name or series id. For PathKind.PAGE
            the collection path being paginated (e.g. ``"posts"``)
        page: Page number, only used with PathKind.PAGE
        base_path: Site base path prefix

    Raises:
        ContractViolation: If kind is unknown, value is malformed or
            page is less than 1
    """
    try:
        kind = PathKind(kind)
    except ValueError:
        raise ContractViolation(f"unknown path kind {kind!r}")

    value = _check_value(kind, value)

    if kind is PathKind.PAGE:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ContractViolation(f"page must be a positive integer, got {page!r}")
        if page == 1:
            return join_base(f"{value}/", base_path)
        return join_base(f"{value}/page/{page}/", base_path)

    if kind in (PathKind.CATEGORY, PathKind.TAG):
        segment = encode_taxonomy(value)
    else:
        segment = value

    return join_base(f"{_PREFIXES[kind]}/{segment}/", base_path)


def _normalize(path: str) -> str:
    return path.rstrip("/").lower()


def paths_equal(path_a: str, path_b: str) -> bool:
    """Compare paths ignoring case and trailing slashes."""
    return _normalize(path_a) == _normalize(path_b)


def path_matches(current_path: str, pattern: str) -> bool:
    """Check whether current_path falls under pattern.

    Matches exactly, with a trailing ``/*`` wildcard, or as a
    descendant of pattern.
    """
    current = _normalize(current_path)
    normalized = _normalize(pattern)

    if current == normalized:
        return True
    if normalized.endswith("/*"):
        return current.startswith(normalized[:-2])
    return current.startswith(normalized + "/")


class UrlMapper:
    """URL helpers bound to a site's base path and origin."""

    def __init__(self, base_path: str = "/", site_url: str = "https://example.com"):
        self.base_path = base_path
        self.site_url = site_url

    def resolve(self, kind: PathKind | str, value: str, page: int = 1) -> str:
        return resolve_path(kind, value, page=page, base_path=self.base_path)

    def post(self, entry_id: str) -> str:
        return self.resolve(PathKind.POST, entry_id)

    def category(self, name: str) -> str:
        return self.resolve(PathKind.CATEGORY, name)

    def tag(self, name: str) -> str:
        return self.resolve(PathKind.TAG, name)

    def series(self, series_id: str) -> str:
        return self.resolve(PathKind.SERIES, series_id)

    def tab(self, entry_id: str) -> str:
        return self.resolve(PathKind.TAB, entry_id)

    def music(self, entry_id: str) -> str:
        return self.resolve(PathKind.MUSIC, entry_id)

    def page(self, collection_path: str, page: int) -> str:
        return self.resolve(PathKind.PAGE, collection_path, page=page)

    def absolute(self, path: str) -> str:
        """Absolute URL for a path returned by one of the resolvers."""
        return absolute_url(path, self.site_url)
