"""
Content scanner.

Scans the site's content collections, parses front matter and builds
validated Entry records.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

import frontmatter
import yaml

from folio.content.models import COLLECTIONS, Entry
from folio.content.schema import validate_metadata
from folio.core.config import get_paths
from folio.core.errors import DuplicateEntryError, SchemaError

logger = logging.getLogger(__name__)


def slugify_segment(segment: str) -> str:
    """Convert one path segment to a URL-friendly slug."""
    slug = segment.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def entry_id_for(path: Path, collection_dir: Path) -> str:
    """Derive a stable entry id from a file's location.

    ``posts/devops/Docker Basics.md`` becomes ``devops/docker-basics`` and
    ``posts/my-post/index.md`` becomes ``my-post``.
    """
    rel = path.relative_to(collection_dir)
    parts = list(rel.parent.parts)
    if rel.stem != "index" or not parts:
        parts.append(rel.stem)
    return "/".join(slugify_segment(p) for p in parts)


class ContentScanner:
    """Scans content collection directories."""

    def __init__(self, site_root: Path | None = None, strict: bool = False):
        """Initialize scanner.

        Args:
            site_root: Site root directory (auto-detected if not provided)
            strict: Raise on invalid files instead of skipping them
        """
        paths = get_paths(site_root)
        self.site_root = paths.root
        self.strict = strict
        self.collection_dirs = {
            "posts": paths.posts,
            "tabs": paths.tabs,
            "music": paths.music,
        }

    def scan_all(self) -> dict[str, list[Entry]]:
        """Scan every collection.

        Returns:
            Mapping of collection name to its entries
        """
        return {name: self.scan_collection(name) for name in COLLECTIONS}

    def scan_collection(self, collection: str) -> list[Entry]:
        """Scan a single collection.

        Drafts are included; draft filtering is a query concern. A file
        whose id repeats an earlier one is skipped (raised in strict mode).

        Returns:
            Entries in file path order
        """
        if collection not in self.collection_dirs:
            logger.warning("Unknown collection: %s", collection)
            return []

        content_dir = self.collection_dirs[collection]
        if not content_dir.is_dir():
            logger.debug("Collection directory %s does not exist", content_dir)
            return []

        return list(self._scan_directory(content_dir, collection))

    def _scan_directory(self, directory: Path, collection: str) -> Iterator[Entry]:
        seen: set[str] = set()
        for path in sorted(directory.rglob("*.md")):
            if path.is_dir() or path.is_symlink():
                continue
            if any(part.startswith((".", "_")) for part in path.relative_to(directory).parts):
                continue

            try:
                entry = self.parse_file(path, directory, collection)
                if entry.id in seen:
                    raise DuplicateEntryError(collection, entry.id, path=path)
            except SchemaError as e:
                if self.strict:
                    raise
                logger.warning("Skipping %s", e)
                continue

            seen.add(entry.id)
            yield entry

    def parse_file(self, path: Path, collection_dir: Path, collection: str) -> Entry:
        """Parse and validate a single content file.

        A ``slug`` front matter key overrides the path-derived id.

        Raises:
            SchemaError: If the file cannot be parsed or fails validation
        """
        try:
            post = frontmatter.load(path)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise SchemaError(f"unreadable front matter ({e})", path=path)

        metadata = validate_metadata(collection, dict(post.metadata), path)
        slug = post.metadata.get("slug")
        entry_id = str(slug).strip("/") if slug else entry_id_for(path, collection_dir)

        return Entry(
            id=entry_id,
            collection=collection,
            metadata=metadata,
            body=post.content.strip(),
            path=path,
        )
