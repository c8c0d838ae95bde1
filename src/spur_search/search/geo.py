"""Great-circle distance between two points on the Earth."""

import math

from spur_search.config.constants import EARTH_RADIUS_KM
from spur_search.core.types import GeoPoint


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """
    Return the great-circle distance between two points in kilometres.

    Uses the Haversine formula on a sphere of radius ``EARTH_RADIUS_KM``.
    The result is 0.0 for identical points and symmetric in its arguments.

    Args:
        a: First point.
        b: Second point.

    Returns:
        Distance in kilometres.

    Example:
        >>> round(haversine_km(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)), 1)
        111.2
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push h a hair above 1.0 for antipodal points
    h = min(1.0, h)
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))
