"""Tests for taxonomy analysis."""

from __future__ import annotations

import pytest

from folio.core.errors import ContractViolation
from folio.taxonomy.analyzer import (
    collect_taxonomy,
    find_near_duplicates,
    find_orphans,
    taxonomy_stats,
    variant_reason,
)
from folio.urls import resolve_path


class TestCollectTaxonomy:
    """Test taxonomy collection from entries."""

    def test_counts_tags(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["python", "ml"]),
            make_entry("post-b", tags=["python", "rust"]),
        ])
        assert data.tags.counts == {"python": 2, "ml": 1, "rust": 1}

    def test_repeated_tag_counts_once(self, make_entry):
        data = collect_taxonomy([make_entry("post-a", tags=["python", "python"])])
        assert data.tags.counts["python"] == 1

    def test_categories_with_fallback(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", category="AI"),
            make_entry("post-b", category="AI"),
            make_entry("post-c"),
        ])
        assert data.categories.counts == {"AI": 2, "Uncategorized": 1}

    def test_tracks_entries_per_term(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["python"]),
            make_entry("post-b", tags=["python"]),
        ])
        assert data.tags.entries["python"] == ["post-a", "post-b"]

    def test_unknown_taxonomy(self, make_entry):
        with pytest.raises(ContractViolation):
            collect_taxonomy([]).usage("authors")


class TestVariantReason:
    @pytest.mark.parametrize(
        "a,b,reason",
        [
            ("Python", "python", "case_mismatch"),
            ("machine-learning", "machine learning", "hyphen_space"),
            ("data_science", "data-science", "underscore_hyphen"),
            ("algorithm", "algorithms", "plural"),
            ("Box", "boxes", "plural"),
            ("python", "rust", None),
            ("python", "python", None),
        ],
    )
    def test_reasons(self, a, b, reason):
        assert variant_reason(a, b) == reason

    def test_case_mismatches_share_a_url(self):
        assert variant_reason("DevOps", "devops") == "case_mismatch"
        assert resolve_path("tag", "DevOps") == resolve_path("tag", "devops")


class TestFindNearDuplicates:
    def test_reports_pair_with_counts(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["Python"]),
            make_entry("post-b", tags=["python"]),
            make_entry("post-c", tags=["python"]),
        ])
        (dup,) = find_near_duplicates(data)
        assert dup.terms == ("Python", "python")
        assert dup.reason == "case_mismatch"
        assert dup.counts == {"Python": 1, "python": 2}
        assert dup.to_dict()["terms"] == ["Python", "python"]

    def test_no_false_positives(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["python"]),
            make_entry("post-b", tags=["rust"]),
        ])
        assert find_near_duplicates(data) == []

    def test_categories(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", category="AI"),
            make_entry("post-b", category="ai"),
        ])
        assert find_near_duplicates(data, "categories")[0].reason == "case_mismatch"


class TestFindOrphans:
    def test_finds_orphan_tags(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["python", "rare-tag"]),
            make_entry("post-b", tags=["python"]),
        ])
        orphans = find_orphans(data)
        assert orphans["tags"] == ["rare-tag"]
        assert orphans["categories"] == []

    def test_min_count(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["a", "b"]),
            make_entry("post-b", tags=["a", "b"]),
            make_entry("post-c", tags=["a"]),
        ])
        assert find_orphans(data, min_count=3)["tags"] == ["b"]


class TestTaxonomyStats:
    def test_ranked_by_count_then_name(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["c", "b", "a"]),
            make_entry("post-b", tags=["a", "b"]),
            make_entry("post-c", tags=["a"]),
        ])
        assert taxonomy_stats(data).tags == [("a", 3), ("b", 2), ("c", 1)]

    def test_co_occurrence(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["python", "ml"]),
            make_entry("post-b", tags=["ml", "python"]),
        ])
        stats = taxonomy_stats(data)
        assert stats.co_occurrences == [(("ml", "python"), 2)]
        assert stats.to_dict()["co_occurrences"] == {"ml+python": 2}

    def test_limit_keeps_full_totals(self, make_entry):
        data = collect_taxonomy([
            make_entry("post-a", tags=["a", "b", "c", "d"]),
            make_entry("post-b", tags=["a", "b", "c"]),
        ])
        stats = taxonomy_stats(data, limit=2)
        assert len(stats.tags) == 2
        assert stats.totals["total_tags"] == 4
        assert stats.totals["total_tag_usages"] == 7
