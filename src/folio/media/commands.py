"""CLI commands for guitar tabs and music videos."""

from __future__ import annotations

import json as json_module

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _entry_row(entry, url: str) -> dict:
    return {
        "id": entry.id,
        "title": entry.title,
        "published": entry.published.isoformat(),
        "url": url,
    }


@click.group(name="tabs")
def tabs() -> None:
    """Query guitar tabs."""
    pass


@tabs.command(name="list")
@click.option("--by-artist", is_flag=True, help="Group tabs by artist")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tabs(by_artist: bool, as_json: bool) -> None:
    """List guitar tabs, newest first."""
    from folio.query import tabs_by_artist
    from folio.site import load_site_for_command

    site = load_site_for_command(False, console)
    items = site.tabs()

    if as_json:
        if by_artist:
            output = {
                artist: [_entry_row(t, site.urls.tab(t.id)) for t in group]
                for artist, group in tabs_by_artist(items).items()
            }
        else:
            output = [
                {**_entry_row(t, site.urls.tab(t.id)), "artist": t.metadata.artist}
                for t in items
            ]
        click.echo(json_module.dumps(output, indent=2))
        return

    if not items:
        console.print("[yellow]No tabs found.[/yellow]")
        return

    if by_artist:
        for artist, group in tabs_by_artist(items).items():
            console.print(f"[bold]{artist}[/bold] [dim]({len(group)})[/dim]")
            for tab in group:
                console.print(f"  {tab.title} [dim]{tab.metadata.difficulty}[/dim]")
        return

    table = Table(title=f"Tabs ({len(items)})")
    table.add_column("Date", style="cyan", width=12)
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Difficulty", style="dim")
    for tab in items:
        table.add_row(
            f"{tab.published:%Y-%m-%d}", tab.title, tab.metadata.artist, tab.metadata.difficulty
        )
    console.print(table)


@click.group(name="music")
def music() -> None:
    """Query music videos."""
    pass


@music.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_music(as_json: bool) -> None:
    """List music videos grouped by type."""
    from folio.query import music_by_type
    from folio.site import load_site_for_command

    site = load_site_for_command(False, console)
    groups = music_by_type(site.music())

    if as_json:
        output = {
            name: [_entry_row(m, site.urls.music(m.id)) for m in entries]
            for name, entries in groups.items()
        }
        click.echo(json_module.dumps(output, indent=2))
        return

    if not any(groups.values()):
        console.print("[yellow]No music found.[/yellow]")
        return

    for name, entries in groups.items():
        if not entries:
            continue
        console.print(f"[bold]{name.capitalize()}[/bold] [dim]({len(entries)})[/dim]")
        for entry in entries:
            console.print(f"  {entry.published:%Y-%m-%d}  {entry.title}")
