"""Core data types for Spur Search.

This module defines the domain objects used throughout the search pipeline:
    - GeoPoint: A latitude/longitude pair
    - EventDetails: Cost, capacity, categories and location of an event
    - Event: A bookable occasion read from the event store
    - SortStrategy: How search results are ordered
    - SearchCriteria: Filters and ordering requested by the caller

Design notes:
    - Dataclasses are used for simplicity (no runtime validation library)
    - Event and EventDetails are frozen; the sorting step returns copies
      carrying a computed ``distance`` instead of mutating the snapshot
    - Every criterion defaults to None, meaning "no filter requested";
      0 and the empty set are real filter values
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any, Optional

from spur_search.core.exceptions import InvalidCriteriaError, RecordError


@dataclass(frozen=True)
class GeoPoint:
    """A point on the Earth's surface in decimal degrees.

    The valid range is [-90, 90] x [-180, 180]; it is not validated here.

    Attributes:
        latitude: Degrees north of the equator
        longitude: Degrees east of the prime meridian
    """

    latitude: float
    longitude: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GeoPoint":
        """Build a GeoPoint from a coordinate mapping.

        Accepts ``{"latitude", "longitude"}`` as well as the short
        ``{"lat", "lng"}`` keys that map regions are stored with.

        Raises:
            KeyError: If either coordinate is missing.
            TypeError, ValueError: If a coordinate is not a finite number.
        """
        return cls(
            latitude=_to_float(_coordinate(data, "latitude", "lat")),
            longitude=_to_float(_coordinate(data, "longitude", "lng")),
        )


@dataclass(frozen=True)
class EventDetails:
    """Descriptive record attached to every event.

    Attributes:
        cost: Price per person, never negative
        party_size: Total capacity of the event
        categories: Category labels (e.g. "music", "outdoors")
        region: Where the event takes place
        title: Optional display title
        description: Optional display description
    """

    cost: float
    party_size: int
    categories: frozenset[str]
    region: GeoPoint
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Event:
    """A bookable occasion as stored in the event database.

    ``attendees`` is kept only for its length; identities are irrelevant
    to searching. ``attendee_count <= details.party_size`` is expected but
    not enforced.

    Attributes:
        event_id: Store key of the event
        details: Cost, capacity, categories and location
        attendees: Current attendees
        distance: Kilometres from the searching user, set by sorting
    """

    event_id: str
    details: EventDetails
    # Attendee entries may be mappings; keep them out of the hash
    attendees: tuple = field(default_factory=tuple, hash=False)
    distance: Optional[float] = None

    @property
    def attendee_count(self) -> int:
        """Number of people already attending."""
        return len(self.attendees)

    @property
    def available_capacity(self) -> int:
        """Seats left; zero or negative means the event is full."""
        return self.details.party_size - self.attendee_count

    @classmethod
    def from_record(cls, event_id: str, record: Mapping[str, Any]) -> "Event":
        """Create an Event from a raw store record.

        The store key becomes the event identifier. Missing ``attendees``
        or ``categories`` are read as empty, because key/value stores drop
        empty collections. Numeric strings are accepted for ``cost`` and
        ``partySize``.

        Args:
            event_id: Unique key of the record in the store
            record: Raw record with ``attendees`` and a ``details`` mapping
                    holding ``cost``, ``partySize``, ``categories`` and
                    ``region``

        Returns:
            Event instance

        Raises:
            RecordError: If the record is malformed.
        """
        if not isinstance(record, Mapping):
            raise RecordError(event_id, "record is not a mapping")

        details = record.get("details")
        if not isinstance(details, Mapping):
            raise RecordError(event_id, "missing 'details'")

        try:
            cost = _to_float(details["cost"])
        except KeyError:
            raise RecordError(event_id, "missing 'cost'") from None
        except (TypeError, ValueError):
            raise RecordError(
                event_id, f"non-numeric cost: {details['cost']!r}"
            ) from None
        if cost < 0:
            raise RecordError(event_id, f"negative cost: {cost}")

        try:
            party_size = _to_int(details["partySize"])
        except KeyError:
            raise RecordError(event_id, "missing 'partySize'") from None
        except (TypeError, ValueError):
            raise RecordError(
                event_id, f"non-integer partySize: {details['partySize']!r}"
            ) from None

        region = details.get("region")
        if not isinstance(region, Mapping):
            raise RecordError(event_id, "missing 'region'")
        try:
            point = GeoPoint.from_mapping(region)
        except KeyError as e:
            raise RecordError(event_id, f"region missing {e}") from None
        except (TypeError, ValueError):
            raise RecordError(event_id, "non-numeric region coordinates") from None

        try:
            categories = _to_categories(details.get("categories"))
        except TypeError:
            raise RecordError(
                event_id, f"invalid categories: {details.get('categories')!r}"
            ) from None

        return cls(
            event_id=str(event_id),
            details=EventDetails(
                cost=cost,
                party_size=party_size,
                categories=categories,
                region=point,
                title=_to_optional_str(details.get("title")),
                description=_to_optional_str(details.get("description")),
            ),
            attendees=_to_attendees(record.get("attendees")),
        )


class SortStrategy(Enum):
    """Orderings supported by the search engine.

    Values:
        DISTANCE: Nearest event first
        COST: Cheapest event first
    """

    DISTANCE = "distance"
    COST = "cost"


@dataclass(frozen=True)
class SearchCriteria:
    """Filters and ordering for one search request.

    A criterion left as None is skipped during filtering.

    Attributes:
        party_size: Seats the user needs
        cost: Maximum cost per person
        categories: Accepted categories; an event matches any of them
        distance: Maximum distance in kilometres from ``user_location``
        user_location: Where the user is searching from
        sort_strategy: How results are ordered
        descending: Reverse the final order

    Example:
        >>> criteria = SearchCriteria(
        ...     party_size=2,
        ...     cost=20,
        ...     sort_strategy=SortStrategy.COST,
        ... )
    """

    party_size: Optional[int] = None
    cost: Optional[float] = None
    categories: Optional[frozenset[str]] = None
    distance: Optional[float] = None
    user_location: Optional[GeoPoint] = None
    sort_strategy: SortStrategy = SortStrategy.DISTANCE
    descending: bool = False

    def __post_init__(self) -> None:
        """Validate and normalise criteria values."""
        # Use object.__setattr__ because the dataclass is frozen
        if self.categories is not None and not isinstance(self.categories, frozenset):
            try:
                categories = _to_categories(self.categories)
            except TypeError:
                raise InvalidCriteriaError(
                    f"Invalid categories: {self.categories!r}",
                    details="Expected a category name or a collection of names.",
                ) from None
            object.__setattr__(self, "categories", categories)
        if not isinstance(self.sort_strategy, SortStrategy):
            try:
                strategy = SortStrategy(self.sort_strategy)
            except ValueError:
                raise InvalidCriteriaError(
                    f"Unknown sort strategy: {self.sort_strategy!r}",
                    details="Expected 'distance' or 'cost'.",
                ) from None
            object.__setattr__(self, "sort_strategy", strategy)

        if self.party_size is not None and (
            isinstance(self.party_size, bool) or not isinstance(self.party_size, int)
        ):
            raise InvalidCriteriaError(
                f"Invalid party size: {self.party_size!r}",
                details="Party size must be a whole number.",
            )
        for name in ("cost", "distance"):
            value = getattr(self, name)
            if value is not None and (
                isinstance(value, bool)
                or not isinstance(value, Real)
                or not math.isfinite(value)
            ):
                raise InvalidCriteriaError(
                    f"Invalid {name}: {value!r}",
                    details="Expected a finite number.",
                )

        for name in ("party_size", "cost", "distance"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidCriteriaError(
                    f"Invalid {name.replace('_', ' ')}: {value}",
                    details="Search criteria must not be negative.",
                )

    @property
    def is_unfiltered(self) -> bool:
        """True when no filter criterion is set."""
        return (
            self.party_size is None
            and self.cost is None
            and self.categories is None
            and self.distance is None
        )


# ---------------------------------------------------------------------------
# Record coercion helpers
# ---------------------------------------------------------------------------


def _coordinate(data: Mapping[str, Any], name: str, alias: str) -> Any:
    if name in data:
        return data[name]
    if alias in data:
        return data[alias]
    raise KeyError(name)


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"{value!r} is not a finite number")
    return result


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value} is not a whole number")
        return int(value)
    return int(value)


def _to_optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _to_attendees(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        return tuple(value.values())
    if isinstance(value, (str, bytes)):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    return ()


def _to_categories(value: Any) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    if isinstance(value, Mapping):
        return frozenset(str(key) for key, enabled in value.items() if enabled)
    return frozenset(str(item) for item in value)
