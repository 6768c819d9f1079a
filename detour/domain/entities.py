"""
Domain value objects and exceptions.

``Coordinate`` is deliberately permissive: it stores whatever two numbers
it is given.  Range checks live in :mod:`detour.validation`.
"""

from __future__ import annotations

from dataclasses import dataclass


class InvalidCoordinate(ValueError):
    """Raised when a coordinate falls outside the valid lat/lon ranges."""


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    lon: float
    lat: float

    @property
    def longitude(self) -> float:
        return self.lon

    @property
    def latitude(self) -> float:
        return self.lat
