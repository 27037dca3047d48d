from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .errors import SwapiBrowserError
from .fetcher import Fetcher
from .logging import setup_logging
from .settings import Settings, load_settings
from .tui.components import render_error

app = typer.Typer(
    add_completion=False,
    help="swapi-browser: browse Star Wars films, characters, planets and starships",
    rich_markup_mode="rich",
)
console = Console()


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="API root to browse (overrides SWAPI_BASE_URL)",
    ),
):
    """
    [bold]swapi-browser[/bold]: page through the film catalog from your terminal.

    [dim]Run without arguments to launch the interactive browser.[/dim]

    [bold]Examples:[/bold]
      python -m swapi_browser                 # Interactive menu
      python -m swapi_browser films           # Film list as a table
      python -m swapi_browser films --json    # Raw film list
    """
    overrides = {"SWAPI_BASE_URL": base_url} if base_url else {}
    settings = load_settings(**overrides)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        setup_logging(settings)
        code = _interactive_menu(settings)
        raise typer.Exit(code=code)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("films", help="[bold cyan]L[/bold cyan]ist films without entering the menu")
def films(
    ctx: typer.Context,
    json_out: bool = typer.Option(False, "--json", help="Output the raw film list as JSON"),
):
    settings: Settings = ctx.obj or load_settings()
    setup_logging(settings)

    with Fetcher.from_settings(settings) as fetcher:
        try:
            items = fetcher.films()
        except SwapiBrowserError as exc:
            render_error(console, "Could not load films", str(exc))
            raise typer.Exit(code=1)

    if json_out:
        typer.echo(json.dumps(items, indent=2, ensure_ascii=False))
        return

    table = Table(title="[bold]Films[/bold]")
    table.add_column("Episode", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Director")
    table.add_column("Release Date", style="dim")
    for film in sorted(items, key=lambda f: f.get("episode_id") or 0):
        table.add_row(
            str(film.get("episode_id") or "N/A"),
            str(film.get("title") or "N/A"),
            str(film.get("director") or "N/A"),
            str(film.get("release_date") or "N/A"),
        )
    console.print(table)


@app.command("version", help="Show version")
def version():
    typer.echo(__version__)


# ═══════════════════════════════════════════════════════════════════════════════
# INTERACTIVE MENU
# ═══════════════════════════════════════════════════════════════════════════════

def _interactive_menu(settings: Settings) -> int:
    """Launch the screen-based browser; returns the process exit code."""
    from .tui.navigator import Navigator
    from .tui.router import Router
    from .tui.state import UIState
    # Import screens to register them
    from .tui import screens  # noqa: F401

    with Fetcher.from_settings(settings) as fetcher:
        router = Router(
            console=console,
            settings=settings,
            state=UIState(),
            nav=Navigator(),
            fetcher=fetcher,
        )
        try:
            return router.run()
        except KeyboardInterrupt:
            console.print("\n[dim]Interrupted. Goodbye![/]")
            return 0


def main():
    app()
