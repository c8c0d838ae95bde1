"""Search command for finding events in the local event store."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from spur_search.config import get_settings
from spur_search.core import (
    Event,
    EventStoreError,
    GeoPoint,
    SearchCriteria,
    SearchError,
    SortStrategy,
)
from spur_search.database import EventRegistry
from spur_search.search import SearchEngine

console = Console()

_TITLE_LIMIT = 60


def _seats_text(event: Event) -> Text:
    """
    Return a colour-coded "available/capacity" seat count.

    Red when the event is full, yellow when five or fewer seats remain.
    """
    available = event.available_capacity
    label = f"{max(available, 0)}/{event.details.party_size}"
    if available <= 0:
        return Text(label, style="red")
    if available <= 5:
        return Text(label, style="yellow")
    return Text(label, style="green")


def _render_results(results: list[Event]) -> None:
    table = Table(show_lines=False, expand=True, border_style="dim")
    table.add_column("#", style="bold", width=3, justify="right")
    table.add_column("Event", style="cyan")
    table.add_column("Cost", justify="right")
    table.add_column("Seats", justify="right")
    table.add_column("Categories", style="dim")
    table.add_column("Distance", justify="right")

    for i, event in enumerate(results, 1):
        title = event.details.title or event.event_id
        if len(title) > _TITLE_LIMIT:
            title = title[:_TITLE_LIMIT] + "..."
        distance = f"{event.distance:.1f} km" if event.distance is not None else "-"
        table.add_row(
            str(i),
            Text(title),
            f"{event.details.cost:.2f}",
            _seats_text(event),
            Text(", ".join(sorted(event.details.categories)) or "-"),
            distance,
        )

    console.print(table)


def search(
    party_size: Annotated[
        Optional[int],
        typer.Option("--party-size", "-p", min=0, help="Seats needed."),
    ] = None,
    max_cost: Annotated[
        Optional[float],
        typer.Option("--max-cost", "-c", min=0, help="Maximum cost per person."),
    ] = None,
    category: Annotated[
        Optional[list[str]],
        typer.Option("--category", "-g", help="Accepted category (repeatable)."),
    ] = None,
    max_distance: Annotated[
        Optional[float],
        typer.Option("--max-distance", "-d", min=0, help="Maximum distance in km."),
    ] = None,
    lat: Annotated[
        Optional[float],
        typer.Option("--lat", help="Your latitude."),
    ] = None,
    lng: Annotated[
        Optional[float],
        typer.Option("--lng", help="Your longitude."),
    ] = None,
    sort: Annotated[
        Optional[SortStrategy],
        typer.Option("--sort", "-s", help="Order by distance or cost."),
    ] = None,
    descending: Annotated[
        Optional[bool],
        typer.Option("--desc/--asc", help="Reverse the order."),
    ] = None,
    db: Annotated[
        Optional[str],
        typer.Option("--db", help="Path to the event database."),
    ] = None,
) -> None:
    """
    Search stored events.

    Examples:

        spur-search search -p 2 -c 20 --sort cost

        spur-search search -g music -g food -d 5 --lat 40.0 --lng -83.0
    """
    if (lat is None) != (lng is None):
        console.print("[red]Invalid location:[/red] pass both --lat and --lng.")
        raise typer.Exit(code=1)

    settings = get_settings()
    try:
        criteria = SearchCriteria(
            party_size=party_size,
            cost=max_cost,
            categories=frozenset(category) if category else None,
            distance=max_distance,
            user_location=GeoPoint(lat, lng) if lat is not None else None,
            sort_strategy=sort or SortStrategy(settings.search.default_sort),
            descending=(
                descending if descending is not None else settings.search.descending
            ),
        )
        engine = SearchEngine(EventRegistry(db_path=db))
        results = engine.filter_and_sort(criteria)
    except SearchError as e:
        console.print(f"[red]Invalid search:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None
    except EventStoreError as e:
        console.print(f"[red]Event store unavailable:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None

    if not results:
        console.print("[yellow]No events found.[/yellow]")
        console.print(
            "[dim italic]Hint: Loosen your filters, or check that events are "
            "imported with 'spur-search events list'.[/dim italic]"
        )
        return

    console.print(f"\n[bold]Found {len(results)} event(s)[/bold]\n")
    _render_results(results)
