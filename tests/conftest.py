"""
Shared pytest fixtures for Spur Search tests.

This module provides reusable test data and temporary resources used
across both unit and integration tests:

    - raw_records: Store snapshot with varied cost, capacity and location
    - sample_events: The same records converted to Event objects
    - memory_store: InMemoryEventStore holding raw_records
    - tmp_db_path: Isolated SQLite database path
    - registry: EventRegistry on tmp_db_path, pre-loaded with raw_records
"""

import pytest

from spur_search.core.types import Event
from spur_search.database import EventRegistry, InMemoryEventStore
from tests.helpers import make_record


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------


@pytest.fixture
def raw_records() -> dict[str, dict]:
    """
    Four events around Columbus, Ohio (39.96, -83.00).

    Chosen so that every filter removes at least one event:
        - concert: 1 seat left, most expensive, ~1 km away
        - picnic: free, 8 seats left, ~11 km away
        - trivia: 4 seats left, ~111 km away
        - gala: full, ~0 km away
    """
    return {
        "concert": make_record(
            title="Concert",
            cost=45,
            party_size=3,
            attendees=["a", "b"],
            categories=["music", "nightlife"],
            latitude=39.969,
            longitude=-83.0,
        ),
        "picnic": make_record(
            title="Picnic",
            cost=0,
            party_size=10,
            attendees=["c", "d"],
            categories=["outdoors", "food"],
            latitude=40.06,
            longitude=-83.0,
        ),
        "trivia": make_record(
            title="Trivia",
            cost=5,
            party_size=6,
            attendees=["e", "f"],
            categories=["games", "food"],
            latitude=40.96,
            longitude=-83.0,
        ),
        "gala": make_record(
            title="Gala",
            cost=30,
            party_size=2,
            attendees=["g", "h"],
            categories=["music"],
            latitude=39.96,
            longitude=-83.0,
        ),
    }


@pytest.fixture
def sample_events(raw_records: dict[str, dict]) -> list[Event]:
    """raw_records as Event objects, in store order."""
    return [Event.from_record(key, record) for key, record in raw_records.items()]


@pytest.fixture
def memory_store(raw_records: dict[str, dict]) -> InMemoryEventStore:
    return InMemoryEventStore(raw_records)


# ---------------------------------------------------------------------------
# Temporary database
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_db_path(tmp_path) -> str:
    """
    Isolated SQLite database path inside pytest's tmp directory.

    Each test receives a unique temporary directory, so databases never
    collide or persist between runs.
    """
    return str(tmp_path / "data" / "test_events.sqlite")


@pytest.fixture
def registry(tmp_db_path: str, raw_records: dict[str, dict]) -> EventRegistry:
    """An EventRegistry pre-loaded with raw_records."""
    reg = EventRegistry(db_path=tmp_db_path)
    reg.import_events(raw_records)
    return reg
