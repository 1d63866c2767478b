"""CLI commands for tags and categories.

``tags`` and ``categories`` print the data behind the taxonomy listing
pages. ``audit``, ``orphans`` and ``stats`` report on taxonomy hygiene.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Callable

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _query_options(func: Callable) -> Callable:
    func = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(func)
    func = click.option("--include-drafts", is_flag=True, help="Include drafts")(func)
    return func


def _load_posts(include_drafts: bool):
    from folio.site import load_site_for_command

    site = load_site_for_command(include_drafts, console)
    return site, site.unlinked_posts()


def _echo_json(data) -> None:
    click.echo(json_module.dumps(data, indent=2))


@click.group(name="taxonomy")
def taxonomy() -> None:
    """Tags and categories: listings, audit, orphans, stats."""
    pass


def _print_counts(label: str, counts, as_json: bool) -> None:
    if as_json:
        _echo_json([c.to_dict() for c in counts])
        return
    if not counts:
        console.print(f"[yellow]No {label.lower()} found.[/yellow]")
        return

    table = Table(title=f"{label} ({len(counts)})")
    table.add_column("Name", style="cyan")
    table.add_column("Posts", justify="right")
    table.add_column("URL", style="dim")
    for c in counts:
        table.add_row(c.name, str(c.count), c.url)
    console.print(table)


@taxonomy.command(name="tags")
@_query_options
def tags_cmd(as_json: bool, include_drafts: bool) -> None:
    """List tags with post counts and listing URLs."""
    from folio.query import tag_list

    site, posts = _load_posts(include_drafts)
    _print_counts("Tags", tag_list(posts, site.config.base_path), as_json)


@taxonomy.command(name="categories")
@_query_options
def categories_cmd(as_json: bool, include_drafts: bool) -> None:
    """List categories with post counts and listing URLs."""
    from folio.query import category_list

    site, posts = _load_posts(include_drafts)
    _print_counts("Categories", category_list(posts, site.config.base_path), as_json)


@taxonomy.command(name="audit")
@_query_options
@click.option(
    "--taxonomy",
    "which",
    type=click.Choice(["tags", "categories", "both"]),
    default="both",
    help="Which taxonomy to audit",
)
def audit_cmd(as_json: bool, include_drafts: bool, which: str) -> None:
    """Find terms that differ only by case, separator or plural."""
    from folio.taxonomy.analyzer import TAXONOMIES, collect_taxonomy, find_near_duplicates

    _, posts = _load_posts(include_drafts)
    data = collect_taxonomy(posts)
    names = TAXONOMIES if which == "both" else (which,)
    found = [dup for name in names for dup in find_near_duplicates(data, name)]

    if as_json:
        _echo_json([dup.to_dict() for dup in found])
        return
    if not found:
        console.print("[green]No near-duplicate taxonomy terms found.[/green]")
        return

    table = Table(title=f"Near-Duplicate Terms ({len(found)})")
    table.add_column("Term", style="cyan")
    table.add_column("Variant", style="cyan")
    table.add_column("Reason", style="yellow")
    table.add_column("Posts", style="dim")
    for dup in found:
        a, b = dup.terms
        table.add_row(a, b, dup.reason, f"{dup.counts[a]} / {dup.counts[b]}")
    console.print(table)


@taxonomy.command(name="orphans")
@_query_options
@click.option("--min-count", default=2, type=int, help="Terms used by fewer posts are orphans")
def orphans_cmd(as_json: bool, include_drafts: bool, min_count: int) -> None:
    """Find terms used by fewer than --min-count posts."""
    from folio.taxonomy.analyzer import collect_taxonomy, find_orphans

    _, posts = _load_posts(include_drafts)
    data = collect_taxonomy(posts)
    orphans = find_orphans(data, min_count=min_count)

    if as_json:
        _echo_json(orphans)
        return

    for name, terms in orphans.items():
        if not terms:
            console.print(f"[green]No orphan {name}.[/green]")
            continue
        usage = data.usage(name)
        table = Table(title=f"Orphan {name.capitalize()} ({len(terms)})")
        table.add_column("Term", style="cyan")
        table.add_column("Used By", style="dim")
        for term in terms:
            table.add_row(term, ", ".join(usage.entries[term]))
        console.print(table)


@taxonomy.command(name="stats")
@_query_options
@click.option("--limit", default=20, type=int, help="Max terms to show (0=all)")
def stats_cmd(as_json: bool, include_drafts: bool, limit: int) -> None:
    """Show term frequencies and tags that appear together."""
    from folio.query import site_stats
    from folio.taxonomy.analyzer import collect_taxonomy, taxonomy_stats

    _, posts = _load_posts(include_drafts)
    stats = taxonomy_stats(collect_taxonomy(posts), limit=limit)

    if as_json:
        _echo_json({**stats.to_dict(), **site_stats(posts)})
        return

    totals = stats.totals
    console.print(
        f"[bold]{len(posts)}[/bold] posts, [bold]{totals['total_tags']}[/bold] tags "
        f"({totals['total_tag_usages']} uses), "
        f"[bold]{totals['total_categories']}[/bold] categories"
    )

    if stats.tags:
        table = Table(title="Tag Frequency")
        table.add_column("Tag", style="cyan")
        table.add_column("Posts", justify="right")
        for name, count in stats.tags:
            table.add_row(name, str(count))
        console.print(table)

    if stats.co_occurrences:
        table = Table(title="Tags Used Together")
        table.add_column("Pair", style="cyan")
        table.add_column("Posts", justify="right")
        for (a, b), count in stats.co_occurrences[:10]:
            table.add_row(f"{a} + {b}", str(count))
        console.print(table)
