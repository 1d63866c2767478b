"""CLI commands for series."""

from __future__ import annotations

import json as json_module

import click
from rich.console import Console
from rich.table import Table

console = Console()

_STATUS_STYLES = {"ongoing": "green", "paused": "yellow", "completed": "blue"}


@click.group(name="series")
def series() -> None:
    """Query series and their posts."""
    pass


@series.command(name="list")
@click.option("--include-drafts", is_flag=True, help="Count draft posts too")
@click.option("--featured", is_flag=True, help="Only the featured series")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_series(include_drafts: bool, featured: bool, as_json: bool) -> None:
    """List defined series with their post counts."""
    from folio.linking import featured_series, series_list
    from folio.series.registry import sorted_series
    from folio.site import load_site_for_command

    site = load_site_for_command(include_drafts, console)
    posts = site.unlinked_posts()
    if featured:
        rows = featured_series(site.series, posts)
    else:
        rows = series_list(sorted_series(site.series), posts)

    if as_json:
        click.echo(json_module.dumps([r.to_dict() for r in rows], indent=2))
        return

    if not rows:
        console.print("[yellow]No series defined.[/yellow]")
        return

    table = Table(title=f"Series ({len(rows)})")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Posts", justify="right")

    for row in rows:
        status = row.series.status.value
        style = _STATUS_STYLES.get(status, "white")
        table.add_row(
            row.series.id,
            row.series.title,
            f"[{style}]{status}[/{style}]",
            str(row.count),
        )

    console.print(table)


@series.command(name="show")
@click.argument("series_id")
@click.option("--include-drafts", is_flag=True, help="Include draft posts")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show_series(series_id: str, include_drafts: bool, as_json: bool) -> None:
    """Show the posts of a series in part order.

    Unknown series ids show an empty series rather than failing.
    """
    from folio.linking import entries_by_series
    from folio.series.registry import get_series_by_id
    from folio.site import load_site_for_command

    site = load_site_for_command(include_drafts, console)
    definition = get_series_by_id(site.series, series_id)
    members = entries_by_series(site.unlinked_posts(), series_id)

    if as_json:
        output = {
            "id": series_id,
            "series": definition.to_dict() if definition else None,
            "url": site.urls.series(series_id),
            "count": len(members),
            "posts": [
                {"id": e.id, "title": e.title, "part": e.metadata.series.part}
                for e in members
            ],
        }
        click.echo(json_module.dumps(output, indent=2))
        return

    title = definition.title if definition else series_id
    console.print(f"[bold]{title}[/bold] [dim]{site.urls.series(series_id)}[/dim]")
    if definition and definition.description:
        console.print(f"[dim]{definition.description}[/dim]")
    if not members:
        console.print("[yellow]No posts in this series.[/yellow]")
        return

    table = Table()
    table.add_column("Part", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Published", style="dim")
    for entry in members:
        part = entry.metadata.series.part
        table.add_row(str(part) if part is not None else "-", entry.title, f"{entry.published:%Y-%m-%d}")
    console.print(table)
