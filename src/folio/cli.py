"""
Main CLI dispatcher for folio.

Usage:
    folio posts [list|show|archive]
    folio taxonomy [tags|categories|audit|orphans|stats]
    folio series [list|show]
    folio tabs list
    folio music list
    folio url KIND VALUE
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from folio import __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="folio")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def main(verbose: bool) -> None:
    """Content queries for the portfolio site.

    Sorted listings, taxonomy counts, series navigation and URLs, as
    computed at build time.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@main.command()
@click.argument(
    "kind",
    type=click.Choice(["post", "category", "tag", "series", "tab", "music", "page"]),
)
@click.argument("value")
@click.option("-p", "--page", default=1, type=int, help="Page number (for kind 'page')")
@click.option("--absolute", is_flag=True, help="Print an absolute URL")
def url(kind: str, value: str, page: int, absolute: bool) -> None:
    """Print the site path for an entry id, taxonomy term or series.

    For kind 'page', VALUE is the collection path being paginated.
    """
    from folio.core.config import load_site_config
    from folio.core.errors import ContractViolation
    from folio.urls import UrlMapper

    try:
        config = load_site_config()
    except FileNotFoundError:
        from folio.core.config import SiteConfig

        config = SiteConfig()

    mapper = UrlMapper(config.base_path, config.site_url)
    try:
        path = mapper.resolve(kind, value, page=page)
    except ContractViolation as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    click.echo(mapper.absolute(path) if absolute else path)


# Import and register command groups (imports after main definition intentional)
from folio.media.commands import music, tabs  # noqa: E402
from folio.posts.commands import posts  # noqa: E402
from folio.series.commands import series  # noqa: E402
from folio.taxonomy.commands import taxonomy  # noqa: E402

main.add_command(posts)
main.add_command(taxonomy)
main.add_command(series)
main.add_command(tabs)
main.add_command(music)


if __name__ == "__main__":
    main()
