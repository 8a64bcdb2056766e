"""ABOUTME: CLI entry point for dexsearch commands.
ABOUTME: Provides search, help, and validate commands via Typer."""

import logging
import random
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dexsearch.catalog import Catalog, load_catalog
from dexsearch.config import load_catalog_config
from dexsearch.logs import PACKAGE_LOGGER, init_logging
from dexsearch.search import HELP_LINES, DexSearcher, DexSearchError, EmptyQueryError
from dexsearch.settings import settings

app = typer.Typer(
    name="dexsearch",
    help="Search the Pokemon catalog by type, tier, color, moves, ability, and generation.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Show debug logging"),
) -> None:
    """Initialize logging from the configured logging.yml."""
    level = "DEBUG" if debug else None
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path, level=level)
    elif level is not None:
        logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def _load(catalog_dir: Path | None, verbose: bool = False) -> Catalog:
    """Load the catalog, exiting with an error message on failure."""
    catalog_dir = catalog_dir or settings.catalog_dir
    if verbose:
        console.print(f"[blue]Loading catalog from {catalog_dir}[/]")
    try:
        source_config = load_catalog_config() if settings.catalog_config_path.exists() else None
        return load_catalog(catalog_dir, source_config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading catalog:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _print_help() -> None:
    for line in HELP_LINES:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


@app.command("search")
def search_command(
    query: str = typer.Argument("", help='Comma-separated parameters, e.g. "dragon type, uber"'),
    catalog_dir: Path | None = typer.Option(None, "--catalog-dir", "-c", help="Directory with the catalog CSVs"),
    broadcast: bool = typer.Option(False, "--broadcast", "-b", help="Treat the search as broadcast to a room"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for sampling large results"),
) -> None:
    """Search for Pokemon matching every given parameter."""
    catalog = _load(catalog_dir)
    searcher = DexSearcher(catalog, rng=random.Random(seed) if seed is not None else None)

    try:
        result = searcher.run(query, broadcasting=broadcast)
    except EmptyQueryError:
        _print_help()
        return
    except DexSearchError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from None

    console.print(result.format(), markup=False, highlight=False, soft_wrap=True)


@app.command("help")
def help_command() -> None:
    """Show how to write a search query."""
    _print_help()


@app.command()
def validate(
    catalog_dir: Path | None = typer.Option(None, "--catalog-dir", "-c", help="Directory with the catalog CSVs"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
) -> None:
    """Load the catalog and report what it contains."""
    catalog = _load(catalog_dir, verbose)
    legal = sum(1 for entry in catalog.all_entries() if entry.legal)

    console.print("[green]Catalog loaded:[/]")
    console.print(f"  species: {len(catalog)} ({legal} legal)")
    console.print(f"  moves: {len(catalog.moves)}")
    console.print(f"  abilities: {len(catalog.abilities)}")


if __name__ == "__main__":
    app()
