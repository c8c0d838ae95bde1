"""Typer application root for the spur-search CLI."""

import logging
from importlib.metadata import version

import typer
from rich.console import Console

from spur_search.cli.events import events_app
from spur_search.cli.search import search
from spur_search.core.logging import set_log_level

console = Console()

app = typer.Typer(
    name="spur-search",
    help="Find events by party size, cost, category and distance.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"spur-search {version('spur-search')}")
        raise typer.Exit()


def _verbose_callback(value: bool) -> None:
    """Enable DEBUG-level logging when --verbose is passed."""
    if value:
        set_log_level(logging.DEBUG)


@app.callback()
def main(
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    _verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable detailed debug output.",
        callback=_verbose_callback,
        is_eager=True,
    ),
) -> None:
    """Find events by party size, cost, category and distance."""


app.add_typer(events_app, name="events", help="Manage the local event store.")

# Register search as a top-level command (not a sub-group).
app.command(name="search")(search)
