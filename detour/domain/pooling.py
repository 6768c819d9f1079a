"""
Shortest Detour Between Two Trips
=================================

Given trip A -> B and trip C -> D, estimate the extra distance one driver
covers by also serving the other trip's passenger.

Candidate routings
------------------
Only two routings are compared:

* **Driver AB**  -- ``AC + CD + BD - AB``
* **Driver CD**  -- ``AC + AB + BD - CD``

The result is the smaller of the two.  Other orderings (e.g. dropping
the passenger before reaching one's own destination) are not evaluated,
so this is a heuristic and not an optimal pickup/drop-off solver.

The raw value is returned; it is never clamped at zero.

Complexity: O(1) -- four Haversine evaluations.
"""

from __future__ import annotations

from dataclasses import dataclass

from .distance import EARTH_RADIUS_KM, distance_between
from .entities import Coordinate
from .enums import Driver


@dataclass(frozen=True)
class DetourOptions:
    driver_ab: float
    driver_cd: float

    @property
    def best_driver(self) -> Driver:
        return Driver.AB if self.driver_ab < self.driver_cd else Driver.CD

    @property
    def shortest(self) -> float:
        return self.driver_ab if self.best_driver is Driver.AB else self.driver_cd


def detour_options(
    coord_a: Coordinate,
    coord_b: Coordinate,
    coord_c: Coordinate,
    coord_d: Coordinate,
    radius_km: float = EARTH_RADIUS_KM,
) -> DetourOptions:
    """Compute both candidate detour costs (km) for trips A->B and C->D."""
    ab = distance_between(coord_a, coord_b, radius_km)
    cd = distance_between(coord_c, coord_d, radius_km)
    ac = distance_between(coord_a, coord_c, radius_km)
    bd = distance_between(coord_b, coord_d, radius_km)

    # Term order keeps the result bit-identical when the trips are swapped.
    return DetourOptions(
        driver_ab=ac + cd + bd - ab,
        driver_cd=ac + ab + bd - cd,
    )


def shortest_detour(
    coord_a: Coordinate,
    coord_b: Coordinate,
    coord_c: Coordinate,
    coord_d: Coordinate,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Return the shortest detour distance in km."""
    return detour_options(coord_a, coord_b, coord_c, coord_d, radius_km).shortest
