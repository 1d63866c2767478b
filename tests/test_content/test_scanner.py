"""Tests for the content scanner and entry store."""

from __future__ import annotations

from datetime import datetime

import pytest

from folio.content.models import Entry, EntryMetadata
from folio.content.scanner import ContentScanner, entry_id_for, slugify_segment
from folio.content.store import EntryStore
from folio.core.errors import DuplicateEntryError, SchemaError


class TestEntryIds:
    """Test id derivation from file paths."""

    def test_index_file_uses_directory(self, tmp_path):
        assert entry_id_for(tmp_path / "my-post" / "index.md", tmp_path) == "my-post"

    def test_plain_file_uses_stem(self, tmp_path):
        assert entry_id_for(tmp_path / "hello.md", tmp_path) == "hello"

    def test_nested_path(self, tmp_path):
        path = tmp_path / "DevOps" / "Docker Basics.md"
        assert entry_id_for(path, tmp_path) == "devops/docker-basics"

    def test_top_level_index(self, tmp_path):
        assert entry_id_for(tmp_path / "index.md", tmp_path) == "index"

    def test_slugify_segment(self):
        assert slugify_segment("Hello, World!  Again") == "hello-world-again"


class TestContentScanner:
    """Test scanning content directories."""

    def test_scans_posts(self, create_content_file):
        create_content_file(slug="post-a", title="Post A", extra_fm={"tags": ["python"]})
        create_content_file(slug="post-b", title="Post B")
        scanner = ContentScanner()
        entries = scanner.scan_collection("posts")
        assert [e.id for e in entries] == ["post-a", "post-b"]
        assert entries[0].title == "Post A"
        assert entries[0].tags == ["python"]
        assert entries[0].body.strip() == "Test content."

    def test_includes_drafts(self, create_content_file):
        create_content_file(slug="wip", draft=True)
        entries = ContentScanner().scan_collection("posts")
        assert entries[0].is_draft

    def test_skips_invalid_files(self, create_content_file, mock_site_root):
        create_content_file(slug="good")
        bad = mock_site_root / "content" / "posts" / "bad.md"
        bad.write_text("---\npublished: 2024-01-01\n---\nNo title\n", encoding="utf-8")
        entries = ContentScanner().scan_collection("posts")
        assert [e.id for e in entries] == ["good"]

    def test_strict_mode_raises(self, mock_site_root):
        bad = mock_site_root / "content" / "posts" / "bad.md"
        bad.write_text("---\ntitle: Untimed\n---\nbody\n", encoding="utf-8")
        with pytest.raises(SchemaError):
            ContentScanner(strict=True).scan_collection("posts")

    def test_duplicate_id_skips_later_file(self, create_content_file, mock_site_root, caplog):
        create_content_file(slug="foo", title="From Directory")
        flat = mock_site_root / "content" / "posts" / "foo.md"
        flat.write_text("---\ntitle: From File\npublished: 2024-01-01\n---\n", encoding="utf-8")
        entries = ContentScanner().scan_collection("posts")
        assert [(e.id, e.title) for e in entries] == [("foo", "From Directory")]
        assert "duplicate id 'foo'" in caplog.text

    def test_duplicate_id_strict_raises(self, create_content_file, mock_site_root):
        create_content_file(slug="foo")
        flat = mock_site_root / "content" / "posts" / "foo.md"
        flat.write_text("---\ntitle: Foo\npublished: 2024-01-01\n---\n", encoding="utf-8")
        with pytest.raises(DuplicateEntryError):
            ContentScanner(strict=True).scan_collection("posts")

    def test_skips_hidden_and_underscore_files(self, create_content_file, mock_site_root):
        create_content_file(slug="visible")
        posts = mock_site_root / "content" / "posts"
        (posts / "_partial.md").write_text("---\ntitle: x\npublished: 2024-01-01\n---\n")
        (posts / ".hidden.md").write_text("---\ntitle: x\npublished: 2024-01-01\n---\n")
        assert [e.id for e in ContentScanner().scan_collection("posts")] == ["visible"]

    def test_slug_override(self, create_content_file):
        create_content_file(slug="2024-01-01-long-name", extra_fm={"slug": "short"})
        assert [e.id for e in ContentScanner().scan_collection("posts")] == ["short"]

    def test_missing_directory(self, mock_site_root):
        import shutil

        shutil.rmtree(mock_site_root / "content" / "music")
        assert ContentScanner().scan_collection("music") == []

    def test_unknown_collection(self, mock_site_root):
        assert ContentScanner().scan_collection("recipes") == []

    def test_scans_tabs(self, create_content_file):
        create_content_file(
            collection="tabs",
            slug="wonderwall",
            title="Wonderwall",
            extra_fm={"artist": "Oasis", "difficulty": "beginner"},
        )
        entries = ContentScanner().scan_collection("tabs")
        assert entries[0].metadata.artist == "Oasis"
        assert entries[0].collection == "tabs"


def _entry(entry_id: str, collection: str = "posts") -> Entry:
    return Entry(
        id=entry_id,
        collection=collection,
        metadata=EntryMetadata(title=entry_id, published=datetime(2024, 1, 1)),
    )


class TestEntryStore:
    """Test the entry store."""

    def test_load(self, create_content_file):
        create_content_file(slug="post-a")
        store = EntryStore.load()
        assert store.get("posts", "post-a") is not None
        assert store.collection("tabs") == []
        assert len(store) == 1

    def test_get_missing_returns_none(self):
        store = EntryStore.from_entries([_entry("a")])
        assert store.get("posts", "nope") is None
        assert store.get("nope", "a") is None

    def test_unknown_collection_is_empty(self):
        assert EntryStore().collection("recipes") == []

    def test_groups_by_collection(self):
        store = EntryStore.from_entries([_entry("a"), _entry("t", "tabs")])
        assert [e.id for e in store.collection("posts")] == ["a"]
        assert [e.id for e in store.collection("tabs")] == ["t"]

    def test_duplicate_ids_rejected(self):
        with pytest.raises(DuplicateEntryError) as exc_info:
            EntryStore.from_entries([_entry("a"), _entry("a")])
        assert exc_info.value.entry_id == "a"

    def test_same_id_in_different_collections(self):
        store = EntryStore.from_entries([_entry("a"), _entry("a", "tabs")])
        assert len(store) == 2

    def test_collection_returns_copy(self):
        store = EntryStore.from_entries([_entry("a")])
        store.collection("posts").clear()
        assert len(store.collection("posts")) == 1
