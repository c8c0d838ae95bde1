"""Local event store subcommands (import, list, remove)."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from spur_search.core import Event, EventStoreError, RecordError
from spur_search.database import EventRegistry

console = Console()

events_app = typer.Typer(no_args_is_help=True)


@events_app.command("import")
def import_events(
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="JSON file mapping event keys to event records.",
        ),
    ],
    db: Annotated[
        Optional[str],
        typer.Option("--db", help="Path to the event database."),
    ] = None,
) -> None:
    """Import events from a JSON export of the event database."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Cannot read {path}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from None

    if not isinstance(data, dict):
        console.print(
            f"[red]Invalid file:[/red] {path} must hold a JSON object "
            "mapping event keys to records."
        )
        raise typer.Exit(code=1)

    # Warn now rather than silently dropping records at search time.
    for event_id, record in data.items():
        try:
            Event.from_record(event_id, record)
        except RecordError as e:
            console.print(f"[yellow]Warning:[/yellow] {escape(str(e))}")

    try:
        stored = EventRegistry(db_path=db).import_events(data)
    except EventStoreError as e:
        console.print(f"[red]Import failed:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None

    console.print(f"[green]Imported {stored} event(s).[/green]")


@events_app.command("list")
def list_events(
    db: Annotated[
        Optional[str],
        typer.Option("--db", help="Path to the event database."),
    ] = None,
) -> None:
    """List all stored events."""
    try:
        rows = EventRegistry(db_path=db).list_events()
    except EventStoreError as e:
        console.print(f"[red]Cannot list events:[/red] {escape(e.message)}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None

    if not rows:
        console.print("[yellow]No events found.[/yellow]")
        return

    table = Table(
        title="[bold]Stored Events[/bold]",
        border_style="dim",
        header_style="bold",
    )
    table.add_column("Key", style="cyan")
    table.add_column("Title")
    table.add_column("Cost", justify="right")
    table.add_column("Attendees", justify="right")
    table.add_column("Added At", style="dim")

    for row in rows:
        try:
            event = Event.from_record(row.event_id, row.record)
        except RecordError as e:
            table.add_row(
                row.event_id,
                Text(f"malformed: {e.reason}", style="red"),
                "-",
                "-",
                row.added_at[:19],
            )
            continue
        table.add_row(
            row.event_id,
            Text(event.details.title or "-"),
            f"{event.details.cost:.2f}",
            f"{event.attendee_count}/{event.details.party_size}",
            row.added_at[:19],
        )

    console.print(table)


@events_app.command("remove")
def remove(
    event_id: Annotated[
        str,
        typer.Argument(help="Key of the event to remove."),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    db: Annotated[
        Optional[str],
        typer.Option("--db", help="Path to the event database."),
    ] = None,
) -> None:
    """Remove an event from the local store."""
    registry = EventRegistry(db_path=db)

    row = registry.get_event(event_id)
    if row is None:
        console.print(f"[red]Event not found:[/red] {event_id}")
        console.print(
            "  [dim italic]Hint: Run 'spur-search events list' to see "
            "available keys.[/dim italic]"
        )
        raise typer.Exit(code=1)

    detail = Table(show_header=False, box=None, padding=(0, 2))
    detail.add_column("Key", style="bold")
    detail.add_column("Value")
    detail.add_row("Event", Text(row.event_id, style="cyan"))
    details = row.record.get("details")
    title = details.get("title") if isinstance(details, dict) else None
    detail.add_row("Title", Text(str(title) if title else "-"))
    detail.add_row("Added", Text(row.added_at, style="dim"))
    console.print(Panel(detail, title="[bold yellow]Remove Event[/bold yellow]", expand=False))

    if not yes:
        confirmed = typer.confirm("Remove this event?")
        if not confirmed:
            console.print("[dim]Cancelled.[/dim]")
            raise typer.Exit(code=0)

    try:
        registry.remove_event(event_id)
    except EventStoreError as e:
        console.print(f"[red]Removal failed:[/red] {e.message}")
        console.print(
            "  [dim italic]Hint: Check that the data directory is writable.[/dim italic]"
        )
        raise typer.Exit(code=1) from None

    console.print(f"[green]Removed:[/green] {event_id}")
