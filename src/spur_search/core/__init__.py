"""Core module: types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (GeoPoint, EventDetails, Event, SortStrategy, SearchCriteria)
    - Exception hierarchy (SpurSearchError and subclasses)
    - Logging utilities (get_logger, configure_logging)

Usage:
    from spur_search.core import (
        Event,
        SearchCriteria,
        SortStrategy,
        RecordError,
        get_logger,
    )
"""

from spur_search.core.exceptions import (
    ConfigurationError,
    EventStoreError,
    InvalidCriteriaError,
    RecordError,
    SearchError,
    SpurSearchError,
)
from spur_search.core.logging import configure_logging, get_logger, set_log_level
from spur_search.core.types import (
    Event,
    EventDetails,
    GeoPoint,
    SearchCriteria,
    SortStrategy,
)

__all__ = [
    # Types
    "GeoPoint",
    "EventDetails",
    "Event",
    "SortStrategy",
    "SearchCriteria",
    # Exceptions
    "SpurSearchError",
    "ConfigurationError",
    "RecordError",
    "EventStoreError",
    "SearchError",
    "InvalidCriteriaError",
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
]
