"""Spur Search: event discovery by party size, cost, category and distance.

This package provides the search pipeline behind the Spur event browser:
reading events from an event store, filtering them against a user's
criteria and ordering the matches by distance or cost.

Usage:
    from spur_search import __version__
    from spur_search.database import EventRegistry
    from spur_search.search import SearchEngine
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("spur-search")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Re-export lightweight core types for convenience.
from spur_search.core import (
    Event,
    EventDetails,
    GeoPoint,
    SearchCriteria,
    SortStrategy,
    SpurSearchError,
)

__all__ = [
    "__version__",
    # Core types
    "GeoPoint",
    "EventDetails",
    "Event",
    "SortStrategy",
    "SearchCriteria",
    # Base exception
    "SpurSearchError",
]
