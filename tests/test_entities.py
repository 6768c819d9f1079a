"""Unit tests for the Coordinate value object."""

import dataclasses

import pytest

from detour.domain.entities import Coordinate


class TestCoordinate:
    def test_positional_order_is_lon_lat(self):
        point = Coordinate(-88.2, 40.1)
        assert point.lon == -88.2
        assert point.lat == 40.1

    def test_long_name_aliases(self):
        point = Coordinate(lon=-88.2, lat=40.1)
        assert point.longitude == point.lon
        assert point.latitude == point.lat

    def test_is_immutable(self):
        point = Coordinate(-88.2, 40.1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.lat = 0.0

    def test_equal_by_value(self):
        assert Coordinate(1.0, 2.0) == Coordinate(1.0, 2.0)
        assert hash(Coordinate(1.0, 2.0)) == hash(Coordinate(1.0, 2.0))

    def test_out_of_range_is_not_rejected(self):
        """The value type itself stays permissive."""
        point = Coordinate(500.0, -200.0)
        assert point.lon == 500.0
