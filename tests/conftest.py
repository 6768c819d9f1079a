"""
Shared test fixtures.

Reference points are four locations around the UIUC campus; trip A->B and
trip C->D run roughly north, a few hundred metres apart.
"""

import pytest

from detour.domain.entities import Coordinate


@pytest.fixture
def coord_a() -> Coordinate:
    return Coordinate(-88.221674, 40.105706)


@pytest.fixture
def coord_b() -> Coordinate:
    return Coordinate(-88.219271, 40.110588)


@pytest.fixture
def coord_c() -> Coordinate:
    return Coordinate(-88.215988, 40.108266)


@pytest.fixture
def coord_d() -> Coordinate:
    return Coordinate(-88.215773, 40.114084)
