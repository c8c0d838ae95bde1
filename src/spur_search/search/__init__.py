"""Search module: filtering and ordering of events.

This module provides the search pipeline:
    - haversine_km: Great-circle distance in kilometres
    - filter_* / apply_filters: Per-criterion filter predicates
    - sort_* / sort_events: Distance annotation and ordering
    - SearchEngine: Facade running filter then sort over an event store

Usage:
    from spur_search.search import SearchEngine

    engine = SearchEngine(store)
    results = engine.filter_and_sort(criteria)
"""

from spur_search.search.engine import SearchEngine
from spur_search.search.filters import (
    apply_filters,
    filter_categories,
    filter_cost,
    filter_distance,
    filter_party_size,
)
from spur_search.search.geo import haversine_km
from spur_search.search.sorting import (
    add_distances,
    sort_by_cost,
    sort_by_distance,
    sort_events,
)

__all__ = [
    "SearchEngine",
    # Distance
    "haversine_km",
    # Filters
    "filter_party_size",
    "filter_cost",
    "filter_categories",
    "filter_distance",
    "apply_filters",
    # Sorting
    "add_distances",
    "sort_by_distance",
    "sort_by_cost",
    "sort_events",
]
