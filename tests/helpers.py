"""
Shared test helper utilities for Spur Search tests.

Plain functions (not pytest fixtures) that can be imported directly
by test modules. Kept separate from conftest.py because conftest.py
is for fixtures only.
"""

from typing import Any, Optional

from spur_search.core.types import Event, EventDetails, GeoPoint


def make_record(
    *,
    title: Optional[str] = "Event",
    cost: Any = 10,
    party_size: Any = 4,
    attendees: Optional[list] = None,
    categories: Optional[list[str]] = None,
    latitude: float = 0.0,
    longitude: float = 0.0,
) -> dict:
    """
    Factory for raw store records in the shape the event database holds.

    Not a fixture; accepts parameters so tests can build records with
    different values.
    """
    return {
        "attendees": list(attendees or []),
        "details": {
            "title": title,
            "cost": cost,
            "partySize": party_size,
            "categories": list(categories or []),
            "region": {"latitude": latitude, "longitude": longitude},
        },
    }


def make_event(
    event_id: str = "evt",
    *,
    cost: float = 10.0,
    party_size: int = 4,
    attendee_count: int = 0,
    categories: tuple[str, ...] = (),
    latitude: float = 0.0,
    longitude: float = 0.0,
    distance: Optional[float] = None,
) -> Event:
    """Factory for Event instances with sensible defaults."""
    return Event(
        event_id=event_id,
        details=EventDetails(
            cost=cost,
            party_size=party_size,
            categories=frozenset(categories),
            region=GeoPoint(latitude, longitude),
        ),
        attendees=tuple(range(attendee_count)),
        distance=distance,
    )
