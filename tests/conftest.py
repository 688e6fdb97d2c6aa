"""Shared fixtures for the projection test suite."""

import pytest

from geospatial.ellipsoids import WGS84
from projections import AzimuthalEquidistant, LambertConformalConic, LongitudeLatitude


@pytest.fixture
def lon_lat():
    return LongitudeLatitude()


@pytest.fixture
def lcc():
    """LCC centered at (30, 30) with standard parallels 30 and 60."""
    return LambertConformalConic(30.0, 30.0, 30.0, 60.0, WGS84)


@pytest.fixture
def aeqd():
    """Azimuthal Equidistant centered at (30, 30)."""
    return AzimuthalEquidistant(30.0, 30.0, WGS84)
