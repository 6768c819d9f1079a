"""
Boundary checks for coordinates coming from callers.

The domain functions accept any numbers and never raise.  Callers that
take coordinates from the outside world go through this module instead,
which rejects out-of-range or non-finite values before doing any math.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, ValidationError

from detour.config import settings
from detour.domain.entities import Coordinate, InvalidCoordinate
from detour.domain.pooling import detour_options

logger = logging.getLogger(__name__)


class CoordinateIn(BaseModel):
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)

    model_config = {"frozen": True}

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.longitude, self.latitude)


def validate_coordinate(point: Coordinate) -> Coordinate:
    """Return *point* as a checked ``Coordinate`` or raise ``InvalidCoordinate``."""
    try:
        checked = CoordinateIn(longitude=point.lon, latitude=point.lat)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        logger.warning("Rejected coordinate %s (%s)", point, fields)
        raise InvalidCoordinate(f"Invalid {fields} in {point}") from exc
    return checked.to_coordinate()


def checked_shortest_detour(
    coord_a: Coordinate,
    coord_b: Coordinate,
    coord_c: Coordinate,
    coord_d: Coordinate,
) -> float:
    """Shortest detour (km) for trips A->B and C->D, using configured settings."""
    points = (coord_a, coord_b, coord_c, coord_d)
    if settings.validate_coordinates:
        points = tuple(validate_coordinate(p) for p in points)

    options = detour_options(*points, radius_km=settings.earth_radius_km)
    logger.debug(
        "Detour candidates: AB=%.4f km, CD=%.4f km -> driver %s",
        options.driver_ab,
        options.driver_cd,
        options.best_driver.value,
    )
    return options.shortest
