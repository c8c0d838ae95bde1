"""
Search engine for filtering and ordering events.

This module provides the high-level search interface that coordinates the
event store snapshot, the filter predicates and the sort step. It serves
as the single entry point for the CLI and any UI layer.

Usage:
    from spur_search.database import EventRegistry
    from spur_search.search import SearchEngine

    engine = SearchEngine(EventRegistry())
    results = engine.filter_and_sort(SearchCriteria(party_size=2))
"""

from collections.abc import Sequence

from spur_search.core import Event, RecordError, SearchCriteria, get_logger
from spur_search.database.store import EventStore
from spur_search.search.filters import apply_filters
from spur_search.search.sorting import sort_events

logger = get_logger(__name__)


class SearchEngine:
    """
    Facade for event search over an event store.

    The engine is built once at application startup and handed the store
    it reads from; it keeps no other state, so one instance can serve any
    number of independent searches.

    Each search reads a fresh snapshot from the store. Malformed records
    are logged and skipped rather than failing the search. Store failures
    (``EventStoreError``) are never caught here and reach the caller.

    Example:
        >>> engine = SearchEngine(InMemoryEventStore(records))
        >>> criteria = SearchCriteria(cost=20, sort_strategy=SortStrategy.COST)
        >>> for event in engine.filter_and_sort(criteria):
        ...     print(event.event_id, event.details.cost)
    """

    def __init__(self, store: EventStore) -> None:
        """
        Initialise the search engine.

        Args:
            store: Event store to read snapshots from.
        """
        self._store = store
        logger.debug("SearchEngine initialised with %s", type(store).__name__)

    def load_events(self) -> list[Event]:
        """
        Fetch a snapshot from the store and convert it into events.

        Returns:
            Events in store order, without the records that were malformed.

        Raises:
            EventStoreError: If the store cannot be read.
        """
        snapshot = self._store.fetch_all()

        events: list[Event] = []
        skipped = 0
        for event_id, record in snapshot.items():
            try:
                events.append(Event.from_record(event_id, record))
            except RecordError as e:
                skipped += 1
                logger.warning("Skipping event %s: %s", e.event_id, e.reason)

        if skipped:
            logger.info(
                "Loaded %d events (%d malformed records skipped)",
                len(events),
                skipped,
            )
        else:
            logger.debug("Loaded %d events", len(events))
        return events

    def filter(self, criteria: SearchCriteria) -> list[Event]:
        """
        Return the stored events matching every set criterion.

        Args:
            criteria: Filters to apply; unset criteria are skipped.

        Returns:
            Matching events in store order. May be empty.

        Raises:
            EventStoreError: If the store cannot be read.
            InvalidCriteriaError: If the criteria cannot be evaluated.
        """
        events = self.load_events()
        if criteria.is_unfiltered:
            return events
        return apply_filters(events, criteria)

    def sort(self, events: Sequence[Event], criteria: SearchCriteria) -> list[Event]:
        """
        Return ``events`` ordered as ``criteria`` requests.

        The returned events carry their distance from the user when a user
        location is given; ``events`` itself is left unchanged.

        Raises:
            InvalidCriteriaError: If sorting by distance without a location.
        """
        return sort_events(events, criteria)

    def filter_and_sort(self, criteria: SearchCriteria) -> list[Event]:
        """
        Filter stored events and order the matches.

        Args:
            criteria: Filters, user location and ordering.

        Returns:
            Ordered list of matching events. May be empty.

        Raises:
            EventStoreError: If the store cannot be read.
            InvalidCriteriaError: If the criteria cannot be evaluated.
        """
        logger.info(
            "Searching: party_size=%s, cost=%s, categories=%s, distance=%s, "
            "sort=%s%s",
            criteria.party_size if criteria.party_size is not None else "any",
            criteria.cost if criteria.cost is not None else "any",
            ",".join(sorted(criteria.categories)) if criteria.categories is not None else "any",
            criteria.distance if criteria.distance is not None else "any",
            criteria.sort_strategy.value,
            " (descending)" if criteria.descending else "",
        )

        events = self.filter(criteria)
        results = self.sort(events, criteria)

        logger.info("Search returned %d events", len(results))
        return results
