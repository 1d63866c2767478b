"""Shared test fixtures for folio package."""

from datetime import datetime
from pathlib import Path

import pytest
import yaml

from folio.content.models import Entry, EntryMetadata, SeriesRef


@pytest.fixture
def make_entry():
    """Factory fixture for building validated entries in memory."""
    def _make(
        entry_id: str = "post",
        published: str = "2024-01-01",
        title: str | None = None,
        tags: list[str] | None = None,
        category: str | None = None,
        draft: bool = False,
        pinned: bool = False,
        series: tuple[str, int | None] | None = None,
        collection: str = "posts",
    ) -> Entry:
        metadata = EntryMetadata(
            title=title or entry_id.replace("-", " ").title(),
            published=datetime.fromisoformat(published),
            draft=draft,
            tags=tuple(tags or ()),
            category=category,
            pinned=pinned,
            series=SeriesRef(id=series[0], part=series[1]) if series else None,
        )
        return Entry(id=entry_id, collection=collection, metadata=metadata)

    return _make


@pytest.fixture
def mock_site_root(tmp_path, monkeypatch):
    """Create a mock site with folio.yaml and content directories."""
    config = {
        "base_path": "/",
        "site_url": "https://example.com",
        "page_size": 2,
        "series": [
            {
                "id": "getting-started",
                "title": "Getting Started",
                "description": "A beginner series",
                "status": "completed",
            },
            {
                "id": "deep-dive",
                "title": "Deep Dive",
                "status": "ongoing",
            },
        ],
    }
    (tmp_path / "folio.yaml").write_text(yaml.dump(config), encoding="utf-8")

    for collection in ("posts", "tabs", "music"):
        (tmp_path / "content" / collection).mkdir(parents=True)

    monkeypatch.delenv("FOLIO_ENV", raising=False)
    monkeypatch.delenv("FOLIO_SITE_ROOT", raising=False)

    # Mock get_site_root to return our tmp_path
    from folio.core import config as config_module
    config_module.get_site_root.cache_clear()
    monkeypatch.setattr(config_module, "get_site_root", lambda: tmp_path)

    return tmp_path


@pytest.fixture
def create_content_file(mock_site_root):
    """Factory fixture for creating markdown content files with front matter."""
    def _create(
        collection: str = "posts",
        slug: str = "test-post",
        title: str = "Test Post",
        published: str = "2024-01-01",
        body: str = "Test content.",
        extra_fm: dict | None = None,
        draft: bool = False,
    ) -> Path:
        content_dir = mock_site_root / "content" / collection / slug
        content_dir.mkdir(parents=True, exist_ok=True)

        fm = {"title": title, "published": published, "draft": draft}
        if extra_fm:
            fm.update(extra_fm)

        fm_str = yaml.dump(fm, default_flow_style=False)
        content = f"---\n{fm_str}---\n\n{body}\n"

        index_file = content_dir / "index.md"
        index_file.write_text(content, encoding="utf-8")
        return index_file

    return _create
