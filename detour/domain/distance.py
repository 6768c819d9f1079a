"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of radius ``EARTH_RADIUS_KM``.  Results
are great-circle distances, not road distances, so they are a lower bound
on what a driver actually covers.

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate

EARTH_RADIUS_KM = 6_371.0


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def distance_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = to_radians(lat1), to_radians(lat2)
    dlat = to_radians(lat2 - lat1)
    dlon = to_radians(lon2 - lon1)
    # math.sin / math.cos raise on +-inf; non-finite input yields NaN instead.
    if not all(map(math.isfinite, (lat1_r, lat2_r, dlat, dlon))):
        return math.nan

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push ``a`` just past 1 for antipodal points.
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius_km * c


def distance_between(
    point_a: Coordinate, point_b: Coordinate, radius_km: float = EARTH_RADIUS_KM
) -> float:
    """Great-circle distance in km between two :class:`Coordinate` values."""
    return distance_km(point_a.lat, point_a.lon, point_b.lat, point_b.lon, radius_km)
