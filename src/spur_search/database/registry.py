"""
SQLite event registry.

A small local event store: each event is one row holding its unique key
and its raw record encoded as JSON. It satisfies the ``EventStore`` read
interface used by the search engine and adds the write operations the
CLI needs (import, remove).

Usage:
    from spur_search.database import EventRegistry

    registry = EventRegistry()
    registry.add_event("evt-1", {"attendees": [], "details": {...}})
    snapshot = registry.fetch_all()
"""

import json
import sqlite3
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from spur_search.config import get_settings
from spur_search.core import EventStoreError, get_logger

logger = get_logger(__name__)


@dataclass
class EventRow:
    """
    A single row from the events table.

    Attributes:
        event_id: Unique event key.
        record: Raw event record as stored.
        added_at: ISO timestamp of when the event was stored.
    """

    event_id: str
    record: dict[str, Any]
    added_at: str


class EventRegistry:
    """
    SQLite-backed event store.

    The database file and its parent directory are created on first use.
    The table schema is created via ``CREATE TABLE IF NOT EXISTS``, so
    repeated initialisation is safe. Each operation opens its own
    connection, so one registry may be shared by concurrent readers.

    Example:
        >>> registry = EventRegistry()
        >>> registry.import_events({"evt-1": record})
        1
        >>> registry.count()
        1
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        """
        Initialise the event registry.

        Args:
            db_path: Path to SQLite database file. If None, uses
                     ``settings.database.events_path``.

        Raises:
            EventStoreError: If the database cannot be created.
        """
        self._db_path = db_path or get_settings().database.events_path

        try:
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise EventStoreError(
                "Failed to create event database directory",
                details=str(e),
            ) from e

        self._create_table()

        logger.debug("EventRegistry initialised: %s", self._db_path)

    @property
    def db_path(self) -> str:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        """Create a new database connection with row factory enabled."""
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _create_table(self) -> None:
        """Create the events table if it does not exist."""
        sql = """
            CREATE TABLE IF NOT EXISTS events (
                event_id TEXT PRIMARY KEY,
                record TEXT NOT NULL,
                added_at TEXT NOT NULL
            )
        """
        try:
            with self._connect() as conn:
                conn.execute(sql)
        except sqlite3.Error as e:
            raise EventStoreError(
                "Failed to create events table",
                details=str(e),
            ) from e

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def add_event(self, event_id: str, record: Mapping[str, Any]) -> None:
        """
        Store a new event record.

        The record is stored as given; it is validated only when searched.

        Args:
            event_id: Unique event key.
            record: Raw event record (must be JSON-serialisable).

        Raises:
            EventStoreError: If the key already exists or the insert fails.
        """
        self.import_events({event_id: record}, replace=False)

    def import_events(
        self,
        records: Mapping[str, Mapping[str, Any]],
        replace: bool = True,
    ) -> int:
        """
        Store many event records in a single transaction.

        Args:
            records: Mapping from unique event key to raw record.
            replace: Overwrite existing events with the same key. When
                     False a duplicate key fails the whole import.

        Returns:
            Number of records written.

        Raises:
            EventStoreError: If a record cannot be encoded or the write fails.
        """
        verb = "INSERT OR REPLACE" if replace else "INSERT"
        sql = f"{verb} INTO events (event_id, record, added_at) VALUES (?, ?, ?)"
        added_at = datetime.now(timezone.utc).isoformat()

        try:
            rows = [
                (str(event_id), json.dumps(dict(record)), added_at)
                for event_id, record in records.items()
            ]
        except (TypeError, ValueError) as e:
            raise EventStoreError(
                "Event record is not JSON-serialisable",
                details=str(e),
            ) from e

        try:
            with self._connect() as conn:
                conn.executemany(sql, rows)
        except sqlite3.IntegrityError as e:
            raise EventStoreError(
                "Event already exists",
                details=str(e),
            ) from e
        except sqlite3.Error as e:
            raise EventStoreError(
                "Failed to store events",
                details=str(e),
            ) from e

        logger.info("Stored %d events in %s", len(rows), self._db_path)
        return len(rows)

    def remove_event(self, event_id: str) -> bool:
        """
        Remove an event by key.

        Returns:
            True if an event was removed, False if not found.

        Raises:
            EventStoreError: If the delete fails.
        """
        sql = "DELETE FROM events WHERE event_id = ?"
        try:
            with self._connect() as conn:
                cursor = conn.execute(sql, (event_id,))
                removed = cursor.rowcount > 0
        except sqlite3.Error as e:
            raise EventStoreError(
                "Failed to remove event",
                details=str(e),
            ) from e

        if removed:
            logger.info("Removed event: %s", event_id)
        else:
            logger.warning("Event not found: %s", event_id)
        return removed

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_event(self, event_id: str) -> Optional[EventRow]:
        """
        Retrieve a single stored event by key.

        Returns:
            EventRow if found, None otherwise.

        Raises:
            EventStoreError: If the query fails or the record is corrupt.
        """
        sql = "SELECT * FROM events WHERE event_id = ?"
        try:
            with self._connect() as conn:
                row = conn.execute(sql, (event_id,)).fetchone()
        except sqlite3.Error as e:
            raise EventStoreError(
                "Failed to retrieve event",
                details=str(e),
            ) from e
        if row is None:
            return None
        return self._row_to_event_row(row)

    def list_events(self) -> list[EventRow]:
        """
        List all stored events ordered by key.

        Raises:
            EventStoreError: If the query fails or a record is corrupt.
        """
        sql = "SELECT * FROM events ORDER BY event_id"
        try:
            with self._connect() as conn:
                rows = conn.execute(sql).fetchall()
        except sqlite3.Error as e:
            raise EventStoreError(
                "Failed to list events",
                details=str(e),
            ) from e
        return [self._row_to_event_row(row) for row in rows]

    def fetch_all(self) -> dict[str, dict[str, Any]]:
        """
        Return a snapshot of every stored event keyed by event id.

        Raises:
            EventStoreError: If the query fails or a record is corrupt.
        """
        snapshot = {row.event_id: row.record for row in self.list_events()}
        logger.debug("Fetched %d events from %s", len(snapshot), self._db_path)
        return snapshot

    def count(self) -> int:
        """
        Count stored events.

        Raises:
            EventStoreError: If the query fails.
        """
        sql = "SELECT COUNT(*) FROM events"
        try:
            with self._connect() as conn:
                row = conn.execute(sql).fetchone()
        except sqlite3.Error as e:
            raise EventStoreError(
                "Failed to count events",
                details=str(e),
            ) from e
        return row[0]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _row_to_event_row(row: sqlite3.Row) -> EventRow:
        """
        Convert a SQLite Row to an EventRow dataclass.

        Raises:
            EventStoreError: If the stored record is not valid JSON.
        """
        try:
            record = json.loads(row["record"])
        except (TypeError, ValueError) as e:
            raise EventStoreError(
                f"Corrupt event record: {row['event_id']}",
                details=str(e),
            ) from e
        return EventRow(
            event_id=row["event_id"],
            record=record,
            added_at=row["added_at"],
        )
