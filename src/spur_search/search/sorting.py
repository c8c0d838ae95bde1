"""
Result ordering for event search.

Sorting never mutates its input. Distances are attached by returning
copies of each event with ``distance`` set, so a shared snapshot can be
searched by several callers at once.

Ascending sorts are stable: events with equal keys keep their input
order. A descending sort is exactly the ascending result reversed.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from spur_search.core import Event, GeoPoint, InvalidCriteriaError, SearchCriteria, SortStrategy
from spur_search.search.geo import haversine_km


def add_distances(events: Iterable[Event], user_location: GeoPoint) -> list[Event]:
    """Return copies of ``events`` annotated with their distance from ``user_location``."""
    return [
        replace(e, distance=haversine_km(e.details.region, user_location))
        for e in events
    ]


def sort_by_distance(events: Iterable[Event], descending: bool = False) -> list[Event]:
    """
    Order events nearest first (farthest first when ``descending``).

    Every event must already carry a distance (see ``add_distances``).

    Raises:
        InvalidCriteriaError: If an event has no distance annotation.
    """
    events = list(events)
    missing = [e.event_id for e in events if e.distance is None]
    if missing:
        raise InvalidCriteriaError(
            "Cannot sort by distance without distances",
            details=f"{len(missing)} event(s) lack a distance, e.g. {missing[0]}",
        )
    result = sorted(events, key=lambda e: e.distance)
    if descending:
        result.reverse()
    return result


def sort_by_cost(events: Iterable[Event], descending: bool = False) -> list[Event]:
    """Order events cheapest first (most expensive first when ``descending``)."""
    result = sorted(events, key=lambda e: e.details.cost)
    if descending:
        result.reverse()
    return result


def sort_events(events: Sequence[Event], criteria: SearchCriteria) -> list[Event]:
    """
    Annotate distances and order events as ``criteria`` requests.

    Args:
        events: Filtered events. Not modified.
        criteria: Supplies the user location, strategy and direction.

    Returns:
        New ordered list. When a user location is given every event
        carries its distance in kilometres.

    Raises:
        InvalidCriteriaError: If sorting by distance without a user location.
    """
    if criteria.user_location is not None:
        events = add_distances(events, criteria.user_location)
    elif criteria.sort_strategy is SortStrategy.DISTANCE:
        raise InvalidCriteriaError(
            "Sorting by distance requires a user location",
            details="Provide user_location or sort by cost.",
        )

    if criteria.sort_strategy is SortStrategy.DISTANCE:
        return sort_by_distance(events, descending=criteria.descending)
    return sort_by_cost(events, descending=criteria.descending)
