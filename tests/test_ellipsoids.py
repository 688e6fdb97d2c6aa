"""
Tests for reference ellipsoids and geodesic calculations.
"""

import numpy as np
import pytest

from common.errors import ConfigurationError
from common.units import Q_
from geospatial.ellipsoids import (
    CLARKE1866,
    Ellipsoid,
    PRESETS,
    SPHERE,
    WGS84,
    get_ellipsoid,
)
from geospatial.geodesics import geod_for, geodesic_direct, geodesic_inverse


class TestEllipsoid:
    """Defining and derived parameters"""

    def test_wgs84_derived_parameters(self):
        assert WGS84.a == 6378137.0
        assert WGS84.b == pytest.approx(6356752.314245, abs=1e-6)
        assert WGS84.e2 == pytest.approx(0.00669437999014, abs=1e-14)
        assert WGS84.e == pytest.approx(np.sqrt(WGS84.e2))
        assert WGS84.ep2 == pytest.approx(0.00673949674228, abs=1e-14)
        assert not WGS84.is_sphere

    def test_sphere(self):
        assert SPHERE.is_sphere
        assert SPHERE.a == 6370997.0
        assert SPHERE.b == SPHERE.a
        assert SPHERE.e == 0.0

    def test_clarke1866_from_axes(self):
        assert CLARKE1866.a == 6378206.4
        assert CLARKE1866.b == pytest.approx(6356583.8, abs=1e-6)

    def test_from_eccentricity_squared(self):
        ellps = Ellipsoid.from_eccentricity_squared(WGS84.a, WGS84.e2)
        assert ellps.f == pytest.approx(WGS84.f, rel=1e-12)

    def test_length_quantity_accepted(self):
        ellps = Ellipsoid(a=Q_(6378.137, "km"), f=WGS84.f)
        assert ellps.a == pytest.approx(WGS84.a)

    @pytest.mark.parametrize("a, f", [
        (0.0, 0.0),
        (-1.0, 0.0),
        (float("nan"), 0.0),
        (6378137.0, 1.0),
        (6378137.0, -0.1),
    ])
    def test_invalid_parameters_rejected(self, a, f):
        with pytest.raises(ConfigurationError):
            Ellipsoid(a=a, f=f)

    def test_invalid_eccentricity_rejected(self):
        with pytest.raises(ConfigurationError):
            Ellipsoid.from_eccentricity_squared(6378137.0, 1.0)

    @pytest.mark.parametrize("e2", ["flat", None])
    def test_non_numeric_eccentricity_rejected(self, e2):
        with pytest.raises(ConfigurationError) as excinfo:
            Ellipsoid.from_eccentricity_squared(6378137.0, e2)
        assert excinfo.value.parameter == "e2"

    def test_minor_axis_larger_than_major_rejected(self):
        with pytest.raises(ConfigurationError):
            Ellipsoid.from_axes(6356752.0, 6378137.0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WGS84.a = 1.0


class TestAuxiliaryFunctions:
    """Snyder's m and t terms"""

    def test_m_at_equator_is_one(self):
        assert WGS84.m(0.0) == 1.0

    def test_t_at_poles(self):
        assert WGS84.t(np.pi / 2) == 0.0
        assert WGS84.t(-np.pi / 2) == float("inf")

    def test_t_at_equator_is_one(self):
        assert WGS84.t(0.0) == pytest.approx(1.0)

    def test_conformal_latitude_on_sphere_is_geodetic(self):
        phi = np.radians(37.5)
        assert SPHERE.conformal_latitude(phi) == pytest.approx(phi, abs=1e-14)

    def test_radii_of_curvature_at_equator(self):
        assert WGS84.radius_of_curvature_prime_vertical(0.0) == WGS84.a
        assert WGS84.radius_of_curvature_meridian(0.0) == pytest.approx(
            WGS84.a * (1 - WGS84.e2)
        )


class TestPresets:
    """Preset lookup"""

    def test_presets_keyed_by_name(self):
        for name, ellps in PRESETS.items():
            assert ellps.name == name

    def test_lookup_is_case_insensitive(self):
        assert get_ellipsoid("wgs84") is WGS84
        assert get_ellipsoid("CLRK66") is CLARKE1866

    def test_unknown_name_rejected(self):
        with pytest.raises(ConfigurationError, match="bogus"):
            get_ellipsoid("bogus")


class TestGeodesics:
    """Geodesic problems on the ellipsoid"""

    def test_one_degree_along_equator(self):
        result = geodesic_inverse(0.0, 0.0, 1.0, 0.0)
        assert result.distance_m == pytest.approx(111319.49079327357, rel=1e-9)
        assert result.azimuth_forward_deg == pytest.approx(90.0)

    def test_coincident_points(self):
        result = geodesic_inverse(30.0, 30.0, 30.0, 30.0)
        assert result.distance_m == 0.0

    def test_direct_inverts_inverse(self):
        result = geodesic_inverse(30.0, 30.0, 25.0, 45.0, ellipsoid=CLARKE1866)
        lon, lat, _ = geodesic_direct(
            30.0, 30.0, result.azimuth_forward_deg, result.distance_m,
            ellipsoid=CLARKE1866
        )
        assert lon == pytest.approx(25.0, abs=1e-9)
        assert lat == pytest.approx(45.0, abs=1e-9)

    def test_solver_shared_by_equal_axes(self):
        renamed = Ellipsoid(a=WGS84.a, f=WGS84.f, name="WGS84 copy")
        assert renamed != WGS84
        assert geod_for(renamed) is geod_for(WGS84)
