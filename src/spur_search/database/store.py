"""
Read interface for event stores.

The search engine depends only on ``EventStore``: anything with a
``fetch_all()`` method returning a snapshot that maps each unique event
key to its raw record. Implementations raise ``EventStoreError`` when
the store is unavailable.
"""

from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from spur_search.core import get_logger

logger = get_logger(__name__)

EventSnapshot = Mapping[str, Mapping[str, Any]]


@runtime_checkable
class EventStore(Protocol):
    """Anything that can hand out a one-shot snapshot of all events."""

    def fetch_all(self) -> EventSnapshot:
        """Return every stored event keyed by its unique identifier.

        Raises:
            EventStoreError: If the store cannot be read.
        """
        ...


class InMemoryEventStore:
    """
    Event store backed by a plain mapping.

    Useful when the caller already holds the raw records, e.g. a response
    fetched from a hosted key/value database, and in tests.
    """

    def __init__(self, records: Optional[EventSnapshot] = None) -> None:
        self._records: dict[str, Mapping[str, Any]] = dict(records or {})

    def fetch_all(self) -> EventSnapshot:
        """Return a shallow copy of the stored records."""
        logger.debug("Snapshot of %d in-memory events", len(self._records))
        return dict(self._records)

    def __len__(self) -> int:
        return len(self._records)
