"""Command line front-end for managing search locations."""

import asyncio
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from gamedirs import __version__
from gamedirs.games import GameFile
from gamedirs.games import GameScanner
from gamedirs.registry import LocationRegistry
from gamedirs.registry import SearchLocationResult
from gamedirs.store import create_store
from gamedirs.utils.fs import LocalFilesystem
from gamedirs.utils.validation import normalize_location

APP_NAME = "gamedirs"
STORE_FILE = "settings.json"

console = Console()


def default_store_path() -> Path:
    """Settings file in the per-user application directory."""
    return Path(click.get_app_dir(APP_NAME)) / STORE_FILE


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_result(result: SearchLocationResult, location: str) -> None:
    if result == SearchLocationResult.ALREADY_ADDED:
        console.print(f"[yellow]⊘[/yellow] {result.message}: {escape(location)}")
    else:
        console.print(f"[green]✓[/green] {result.message}: {escape(location)}")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GAMEDIRS_STORE",
    default=None,
    help="Settings file holding the search locations (default: per-user app dir)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, store_path: Path | None, verbose: bool) -> None:
    """Game Dirs - Manage the folders an emulator scans for games."""
    setup_logging(verbose)
    ctx.obj = LocationRegistry(create_store(store_path or default_store_path()))


@cli.command("list")
@click.pass_obj
def list_locations(registry: LocationRegistry) -> None:
    """List registered search locations."""
    try:
        locations = registry.list()
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()

    if not locations:
        console.print("[yellow]No search locations registered[/yellow]")
        return

    table = Table(title="Search Locations")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Location", style="green")

    for index, location in enumerate(locations, start=1):
        table.add_row(str(index), escape(location))

    console.print(table)


@cli.command()
@click.argument("location", type=str)
@click.pass_obj
def add(registry: LocationRegistry, location: str) -> None:
    """
    Add a search location.

    LOCATION can be a local directory or a URI:
      ~/Games/3DS
      file:///sdcard/Games
      content://com.android.externalstorage.documents/tree/primary%3AGames
    """
    try:
        normalized = normalize_location(location)
        result = registry.add(normalized)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()

    print_result(result, normalized)


@cli.command()
@click.argument("location", type=str, required=False)
@click.option("--index", type=click.IntRange(min=1), default=None, help="Delete by position shown in 'list'")
@click.pass_obj
def delete(registry: LocationRegistry, location: str | None, index: int | None) -> None:
    """Delete a search location.

    Deleting a location that is not registered is not an error.
    """
    if (location is None) == (index is None):
        raise click.UsageError("Give either LOCATION or --index")

    try:
        if index is not None:
            locations = registry.list()
            if index > len(locations):
                raise IndexError(f"No search location at index {index} ({len(locations)} registered)")
            target = locations[index - 1]
        else:
            target = normalize_location(location, must_exist=False)

        result = registry.delete(target)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()

    print_result(result, target)


async def _collect_games(registry: LocationRegistry) -> list[GameFile]:
    scanner = GameScanner(LocalFilesystem())
    return [game async for game in scanner.scan(registry.list())]


@cli.command()
@click.pass_obj
def scan(registry: LocationRegistry) -> None:
    """Scan all search locations for games."""
    try:
        games = asyncio.run(_collect_games(registry))
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()

    if not games:
        console.print("[yellow]No games found in search locations[/yellow]")
        return

    table = Table(title="Games")
    table.add_column("Name", style="green")
    table.add_column("Type", style="cyan")
    table.add_column("Size (MB)", justify="right")
    table.add_column("Path", style="dim")

    for game in games:
        table.add_row(escape(game.name), game.extension, f"{game.size / 1024 / 1024:.2f}", escape(game.path))

    console.print(table)
    console.print(f"\n[bold]Summary:[/bold] {len(games)} game(s) found")


if __name__ == "__main__":
    cli()
