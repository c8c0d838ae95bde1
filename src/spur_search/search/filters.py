"""
Filter predicates for event search.

Each predicate takes a sequence of events and one criterion value and
returns a new list holding the events that match. Inputs are never
mutated, so predicates compose in any order and yield the same set.

``apply_filters`` runs them in a fixed order (party size, cost,
categories, distance), skipping every criterion that is unset.

Usage:
    from spur_search.search.filters import apply_filters

    matching = apply_filters(events, criteria)
"""

from collections.abc import Iterable, Sequence

from spur_search.core import Event, GeoPoint, InvalidCriteriaError, SearchCriteria, get_logger
from spur_search.search.geo import haversine_km

logger = get_logger(__name__)


def filter_party_size(events: Iterable[Event], party_size: int) -> list[Event]:
    """Keep events with at least ``party_size`` seats still available."""
    return [e for e in events if party_size <= e.available_capacity]


def filter_cost(events: Iterable[Event], max_cost: float) -> list[Event]:
    """Keep events costing at most ``max_cost``."""
    return [e for e in events if e.details.cost <= max_cost]


def filter_categories(events: Iterable[Event], categories: Iterable[str]) -> list[Event]:
    """
    Keep events that carry at least one of ``categories``.

    Matching is OR across categories: an event tagged "music" passes a
    request for {"music", "food"}. An empty request matches nothing.
    """
    wanted = frozenset(categories)
    return [e for e in events if not e.details.categories.isdisjoint(wanted)]


def filter_distance(
    events: Iterable[Event],
    max_distance: float,
    user_location: GeoPoint,
) -> list[Event]:
    """Keep events at most ``max_distance`` kilometres from ``user_location``."""
    return [
        e
        for e in events
        if haversine_km(e.details.region, user_location) <= max_distance
    ]


def apply_filters(events: Sequence[Event], criteria: SearchCriteria) -> list[Event]:
    """
    Apply every set criterion to ``events``.

    Args:
        events: Events to filter. Not modified.
        criteria: Search criteria; unset (None) criteria are skipped.

    Returns:
        New list of matching events in input order. May be empty.

    Raises:
        InvalidCriteriaError: If a distance filter is requested without
            a user location.
    """
    if criteria.distance is not None and criteria.user_location is None:
        raise InvalidCriteriaError(
            "Distance filter requires a user location",
            details=f"distance={criteria.distance} km but user_location is unset.",
        )

    result = list(events)

    if criteria.party_size is not None:
        result = filter_party_size(result, criteria.party_size)
        logger.debug("Party size >= %d: %d events left", criteria.party_size, len(result))
    if criteria.cost is not None:
        result = filter_cost(result, criteria.cost)
        logger.debug("Cost <= %.2f: %d events left", criteria.cost, len(result))
    if criteria.categories is not None:
        result = filter_categories(result, criteria.categories)
        logger.debug(
            "Categories %s: %d events left",
            ", ".join(sorted(criteria.categories)) or "(none)",
            len(result),
        )
    if criteria.distance is not None:
        result = filter_distance(result, criteria.distance, criteria.user_location)
        logger.debug("Distance <= %.2f km: %d events left", criteria.distance, len(result))

    return result
