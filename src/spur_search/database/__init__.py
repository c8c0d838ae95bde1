"""Database module: event store interface and implementations.

This module provides the data-access layer the search engine reads from:
    - EventStore: Read interface (``fetch_all()`` snapshot)
    - InMemoryEventStore: Store backed by a mapping of raw records
    - EventRegistry: SQLite store with import/list/remove operations
    - EventRow: Dataclass representing a registry entry

Usage:
    from spur_search.database import EventRegistry

    registry = EventRegistry()
    registry.import_events(records)
    snapshot = registry.fetch_all()
"""

from spur_search.database.registry import EventRegistry, EventRow
from spur_search.database.store import EventSnapshot, EventStore, InMemoryEventStore

__all__ = [
    # Interface
    "EventStore",
    "EventSnapshot",
    # Implementations
    "InMemoryEventStore",
    "EventRegistry",
    # Supporting types
    "EventRow",
]
