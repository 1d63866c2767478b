"""CLI commands for blog posts.

Listing, pagination, single-post navigation and the date archive.
"""

from __future__ import annotations

import calendar
import json as json_module

import click
from rich.console import Console
from rich.table import Table

from folio.core.errors import FolioError

console = Console()


def _tags_str(tags: list[str], limit: int = 4) -> str:
    text = ", ".join(tags[:limit])
    if len(tags) > limit:
        text += f" +{len(tags) - limit}"
    return text


# ---------------------------------------------------------------------------
# Click command group
# ---------------------------------------------------------------------------


@click.group(name="posts")
def posts() -> None:
    """Query blog posts."""
    pass


# ---------------------------------------------------------------------------
# folio posts list
# ---------------------------------------------------------------------------


@posts.command(name="list")
@click.option("-p", "--page", "page_number", default=1, type=int, help="Page number (1-based)")
@click.option("--page-size", default=None, type=int, help="Override configured page size")
@click.option("-t", "--tag", default=None, help="Only posts with this tag")
@click.option("-c", "--category", default=None, help="Only posts in this category")
@click.option("--include-drafts", is_flag=True, help="Include draft posts")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_posts(
    page_number: int,
    page_size: int | None,
    tag: str | None,
    category: str | None,
    include_drafts: bool,
    as_json: bool,
) -> None:
    """List posts, pinned first then newest first, one page at a time."""
    from folio.query import entries_by_category, entries_by_tag, paginate
    from folio.site import load_site_for_command

    site = load_site_for_command(include_drafts, console)
    items = site.posts()
    if tag:
        items = entries_by_tag(items, tag)
    if category:
        items = entries_by_category(items, category)

    try:
        size = page_size if page_size is not None else site.config.page_size
        page = paginate(items, page_number, size)
    except FolioError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if as_json:
        click.echo(json_module.dumps(page.to_dict(), indent=2))
        return

    if not page.entries:
        console.print("[yellow]No posts found.[/yellow]")
        return

    table = Table(title=f"Posts (page {page.page}/{page.total_pages}, {page.total_entries} total)")
    table.add_column("Date", style="cyan", width=12)
    table.add_column("ID", style="dim")
    table.add_column("Title", no_wrap=False)
    table.add_column("Tags", style="dim")
    table.add_column("Flags", justify="center")

    for entry in page.entries:
        flags = []
        if entry.is_pinned:
            flags.append("P")
        if entry.is_draft:
            flags.append("D")
        if entry.metadata.series:
            flags.append("S")
        table.add_row(
            entry.published.strftime("%Y-%m-%d"),
            entry.id,
            entry.title,
            _tags_str(entry.tags),
            " ".join(flags),
        )

    console.print(table)
    if page.has_next:
        console.print(f"[dim]Next page: folio posts list --page {page.page + 1}[/dim]")


# ---------------------------------------------------------------------------
# folio posts show
# ---------------------------------------------------------------------------


@posts.command(name="show")
@click.argument("entry_id")
@click.option("--include-drafts", is_flag=True, help="Include draft posts")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show_post(entry_id: str, include_drafts: bool, as_json: bool) -> None:
    """Show a post with its URL and prev/next navigation."""
    from folio.linking import get_series_navigation
    from folio.site import load_site_for_command

    site = load_site_for_command(include_drafts, console)
    listing = site.posts()
    entry = next((p for p in listing if p.id == entry_id), None)
    if entry is None:
        console.print(f"[red]Post not found: {entry_id}[/red]")
        raise SystemExit(1)

    nav = get_series_navigation(entry, listing)

    if as_json:
        data = entry.to_dict()
        data["url"] = site.urls.post(entry.id)
        data["series_navigation"] = nav.to_dict() if nav else None
        click.echo(json_module.dumps(data, indent=2))
        return

    console.print(f"[bold]{entry.title}[/bold]")
    console.print(f"  [dim]URL:[/dim] {site.urls.post(entry.id)}")
    console.print(f"  [dim]Published:[/dim] {entry.published:%Y-%m-%d}")
    console.print(f"  [dim]Category:[/dim] {entry.category_label}")
    if entry.tags:
        console.print(f"  [dim]Tags:[/dim] {', '.join(entry.tags)}")
    if entry.next_id:
        console.print(f"  [cyan]Newer:[/cyan] {entry.next_title} ({entry.next_id})")
    if entry.prev_id:
        console.print(f"  [cyan]Older:[/cyan] {entry.prev_title} ({entry.prev_id})")
    if nav:
        console.print(
            f"  [magenta]Series {entry.metadata.series.id}:[/magenta] "
            f"part {nav.current} of {nav.total}"
        )
        if nav.prev:
            console.print(f"    [dim]Previous:[/dim] {nav.prev.title}")
        if nav.next:
            console.print(f"    [dim]Next:[/dim] {nav.next.title}")


# ---------------------------------------------------------------------------
# folio posts archive
# ---------------------------------------------------------------------------


@posts.command(name="archive")
@click.option("--include-drafts", is_flag=True, help="Include draft posts")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def archive(include_drafts: bool, as_json: bool) -> None:
    """Show posts grouped by year and month."""
    from folio.query import group_by_year_month
    from folio.site import load_site_for_command

    site = load_site_for_command(include_drafts, console)
    grouped = group_by_year_month(site.unlinked_posts())

    if as_json:
        output = {
            str(year): {
                str(month): [{"id": e.id, "title": e.title} for e in entries]
                for month, entries in months.items()
            }
            for year, months in grouped.items()
        }
        click.echo(json_module.dumps(output, indent=2))
        return

    if not grouped:
        console.print("[yellow]No posts found.[/yellow]")
        return

    for year, months in grouped.items():
        count = sum(len(entries) for entries in months.values())
        console.print(f"[bold]{year}[/bold] [dim]({count})[/dim]")
        for month, entries in months.items():
            console.print(f"  [cyan]{calendar.month_name[month]}[/cyan]")
            for entry in entries:
                console.print(f"    {entry.published:%d}  {entry.title}")
