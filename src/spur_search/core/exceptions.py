"""
Custom exception hierarchy for Spur Search.

All exceptions inherit from SpurSearchError, allowing callers to catch
all project-specific errors with a single except clause when desired.

Exception hierarchy:
    SpurSearchError (base)
    ├── ConfigurationError: Invalid or missing configuration
    ├── RecordError: A single raw event record is malformed
    ├── EventStoreError: Event store unavailable or operation failed
    └── SearchError: Search operation failures
        └── InvalidCriteriaError: Criteria that cannot be evaluated
"""

from typing import Optional


class SpurSearchError(Exception):
    """
    Base exception for all Spur Search errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message} — {self.details}"
        return self.message


class ConfigurationError(SpurSearchError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Unknown sort strategy in SEARCH_DEFAULT_SORT
        - Unreadable .env file
    """

    pass


class RecordError(SpurSearchError):
    """
    Raised when a raw event record cannot be converted into an Event.

    The search engine catches this per record, logs it and skips the
    record, so one bad entry never aborts a whole search.

    Args:
        event_id: Store key of the offending record.
        reason: What is wrong with the record.
    """

    def __init__(self, event_id: str, reason: str) -> None:
        self.event_id = event_id
        self.reason = reason
        super().__init__(f"Malformed event record: {event_id}", details=reason)


class EventStoreError(SpurSearchError):
    """
    Raised when the event store cannot be read or written.

    Examples:
        - Database file cannot be opened
        - SQLite write errors
        - Duplicate event key on insert

    The search pipeline never catches this error; it always reaches the
    caller.
    """

    pass


class SearchError(SpurSearchError):
    """
    Raised when search operations fail.
    """

    pass


class InvalidCriteriaError(SearchError):
    """
    Raised when search criteria cannot be evaluated.

    Examples:
        - Negative party size, cost or distance
        - Distance filter without a user location
        - Sorting by distance without a user location
    """

    pass
