"""Taxonomy hygiene for tags and categories.

Finds terms that split one topic across several spellings, terms only a
single entry uses, and tags that tend to appear together.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any

from folio.content.models import Entry
from folio.core.errors import ContractViolation
from folio.urls import encode_taxonomy

TAXONOMIES = ("tags", "categories")


@dataclass
class TermUsage:
    """Use counts of one taxonomy's terms, and the entries using each."""

    counts: Counter[str] = field(default_factory=Counter)
    entries: dict[str, list[str]] = field(default_factory=dict)

    def add(self, term: str, entry_id: str) -> None:
        self.counts[term] += 1
        self.entries.setdefault(term, []).append(entry_id)

    def ranked(self, limit: int = 0) -> list[tuple[str, int]]:
        """Terms by descending count, then by name. ``limit=0`` keeps all."""
        ranked = sorted(self.counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:limit] if limit else ranked


@dataclass
class TaxonomyData:
    tags: TermUsage = field(default_factory=TermUsage)
    categories: TermUsage = field(default_factory=TermUsage)
    tag_sets: list[tuple[str, ...]] = field(default_factory=list)

    def usage(self, taxonomy: str) -> TermUsage:
        if taxonomy not in TAXONOMIES:
            raise ContractViolation(f"unknown taxonomy {taxonomy!r}")
        return self.tags if taxonomy == "tags" else self.categories


@dataclass(frozen=True)
class NearDuplicate:
    """Two spellings of what is probably one term."""

    terms: tuple[str, str]
    reason: str
    counts: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        return {"terms": list(self.terms), "reason": self.reason, "counts": dict(self.counts)}


@dataclass(frozen=True)
class TaxonomyStats:
    tags: list[tuple[str, int]]
    categories: list[tuple[str, int]]
    co_occurrences: list[tuple[tuple[str, str], int]]
    totals: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "tags": [{"tag": name, "count": count} for name, count in self.tags],
            "categories": [{"category": name, "count": count} for name, count in self.categories],
            "co_occurrences": {f"{a}+{b}": count for (a, b), count in self.co_occurrences},
            **self.totals,
        }


def collect_taxonomy(entries: Iterable[Entry]) -> TaxonomyData:
    """Record which entries use which tags and categories.

    Entries without a category count under Uncategorized, as on the
    category listing page.
    """
    data = TaxonomyData()
    for entry in entries:
        for tag in dict.fromkeys(entry.tags):
            data.tags.add(tag, entry.id)
        data.categories.add(entry.category_label, entry.id)
        if entry.tags:
            data.tag_sets.append(tuple(sorted(set(entry.tags))))
    return data


def _is_plural_pair(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return any(
        longer == shorter + suffix
        for shorter, longer in ((a, b), (b, a))
        for suffix in ("s", "es")
    )


# Checked in order; the first rule that matches names the pair.
# case_mismatch pairs already resolve to one listing URL.
_VARIANT_RULES: list[tuple[str, Callable[[str, str], bool]]] = [
    ("case_mismatch", lambda a, b: encode_taxonomy(a) == encode_taxonomy(b)),
    ("hyphen_space", lambda a, b: a.replace("-", " ") == b.replace("-", " ")),
    ("underscore_hyphen", lambda a, b: a.replace("_", "-") == b.replace("_", "-")),
    ("plural", _is_plural_pair),
]


def variant_reason(a: str, b: str) -> str | None:
    """Why ``a`` and ``b`` look like spellings of one term, or None."""
    if a == b:
        return None
    return next((reason for reason, rule in _VARIANT_RULES if rule(a, b)), None)


def find_near_duplicates(data: TaxonomyData, taxonomy: str = "tags") -> list[NearDuplicate]:
    """Pairs of terms in one taxonomy that differ only by case, separator or plural."""
    usage = data.usage(taxonomy)
    found = []
    for a, b in combinations(sorted(usage.counts), 2):
        reason = variant_reason(a, b)
        if reason:
            found.append(
                NearDuplicate(
                    terms=(a, b),
                    reason=reason,
                    counts={a: usage.counts[a], b: usage.counts[b]},
                )
            )
    return found


def find_orphans(data: TaxonomyData, min_count: int = 2) -> dict[str, list[str]]:
    """Terms used by fewer than ``min_count`` entries, per taxonomy."""
    return {
        name: sorted(term for term, count in data.usage(name).counts.items() if count < min_count)
        for name in TAXONOMIES
    }


def taxonomy_stats(data: TaxonomyData, limit: int = 0) -> TaxonomyStats:
    """Term frequencies and tag co-occurrence.

    ``limit`` trims the ranked term lists; totals always cover every term.
    """
    pairs: Counter[tuple[str, str]] = Counter()
    for tags in data.tag_sets:
        pairs.update(combinations(tags, 2))

    return TaxonomyStats(
        tags=data.tags.ranked(limit),
        categories=data.categories.ranked(limit),
        co_occurrences=sorted(pairs.items(), key=lambda kv: (-kv[1], kv[0])),
        totals={
            "total_tags": len(data.tags.counts),
            "total_categories": len(data.categories.counts),
            "total_tag_usages": sum(data.tags.counts.values()),
            "total_category_usages": sum(data.categories.counts.values()),
        },
    )
