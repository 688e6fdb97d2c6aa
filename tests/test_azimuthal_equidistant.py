"""
Tests for the geodesic and modified (series) Azimuthal Equidistant projections.
"""

import numpy as np
import pytest
from pyproj import Proj

from common.errors import DomainError
from geospatial.ellipsoids import CLARKE1866, GRS80, SPHERE, WGS84, WGS72
from geospatial.geodesics import geodesic_inverse
from projections import AzimuthalEquidistant, ModifiedAzimuthalEquidistant
from tests.reference_points import GLOBAL_GEO_POINTS, LOCAL_GEO_POINTS, MAP_POINTS


class TestAzimuthalEquidistant:
    """Geodesic AEQD"""

    def test_reference_forward(self, aeqd):
        x, y = aeqd.project(25.0, 45.0)
        assert x == pytest.approx(-398563.2994422894, abs=1e-6)
        assert y == pytest.approx(1674853.7525355904, abs=1e-6)

    def test_reference_inverse(self, aeqd):
        lon, lat = aeqd.inverse_project(200000.0, 300000.0)
        assert lon == pytest.approx(32.132000374279365, abs=1e-7)
        assert lat == pytest.approx(32.68850065409422, abs=1e-7)

    def test_center_maps_to_origin(self, aeqd):
        x, y = aeqd.project(30.0, 30.0)
        assert x == pytest.approx(0.0, abs=1e-9)
        assert y == pytest.approx(0.0, abs=1e-9)

    def test_distance_from_center_is_true(self, aeqd):
        for lon, lat in GLOBAL_GEO_POINTS:
            x, y = aeqd.project(lon, lat)
            expected = geodesic_inverse(30.0, 30.0, lon, lat).distance_m
            assert np.hypot(x, y) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("ellipsoid", [WGS84, GRS80, WGS72, SPHERE])
    def test_against_proj(self, ellipsoid):
        proj = AzimuthalEquidistant(30.0, 30.0, ellipsoid)
        ref = Proj(proj.proj4_string)

        for lon, lat in GLOBAL_GEO_POINTS + LOCAL_GEO_POINTS:
            ref_x, ref_y = ref(lon, lat)
            x, y = proj.project(lon, lat)
            assert x == pytest.approx(ref_x, abs=1e-4)
            assert y == pytest.approx(ref_y, abs=1e-4)

        for x, y in MAP_POINTS:
            ref_lon, ref_lat = ref(x, y, inverse=True)
            lon, lat = proj.inverse_project(x, y)
            assert lon == pytest.approx(ref_lon, abs=1e-8)
            assert lat == pytest.approx(ref_lat, abs=1e-8)

    def test_round_trip(self, aeqd):
        for lon, lat in GLOBAL_GEO_POINTS + LOCAL_GEO_POINTS:
            lon_back, lat_back = aeqd.inverse_project(*aeqd.project(lon, lat))
            assert lon_back == pytest.approx(lon, abs=1e-9)
            assert lat_back == pytest.approx(lat, abs=1e-9)

    def test_beyond_antipode_is_domain_error(self, aeqd):
        with pytest.raises(DomainError) as excinfo:
            aeqd.inverse_project(0.0, 4.0 * WGS84.a)
        assert excinfo.value.parameter == "(x, y)"

    def test_beyond_half_meridian_is_domain_error(self):
        # inside π·a but past the antipode along the meridian
        proj = AzimuthalEquidistant(0.0, 0.0)
        with pytest.raises(DomainError) as excinfo:
            proj.inverse_project(0.0, 20_030_000.0)
        assert excinfo.value.parameter == "(x, y)"

    def test_just_short_of_half_meridian_accepted(self):
        proj = AzimuthalEquidistant(0.0, 0.0)
        lon, lat = proj.inverse_project(0.0, 19_990_000.0)
        x, y = proj.project(lon, lat)
        assert x == pytest.approx(0.0, abs=1e-3)
        assert y == pytest.approx(19_990_000.0, abs=1e-3)

    def test_unchecked_passes_antipode(self):
        proj = AzimuthalEquidistant(0.0, 0.0)
        lon, lat = proj.inverse_project_unchecked(0.0, 20_030_000.0)
        assert np.isfinite(lon) and np.isfinite(lat)

    def test_ellipsoid_exposed(self, aeqd):
        assert aeqd.ellipsoid is WGS84
        assert not aeqd.preserves_angles


class TestModifiedAzimuthalEquidistant:
    """Snyder's Micronesia form, checked against his numerical example"""

    @pytest.fixture
    def guam(self):
        return ModifiedAzimuthalEquidistant(145.7416589, 15.18491194, CLARKE1866)

    def test_snyder_example_forward(self, guam):
        x, y = guam.project(145.7930300, 15.24652583)
        assert x == pytest.approx(34176.20 - 28657.52, abs=1e-2)
        assert y == pytest.approx(74017.88 - 67199.99, abs=1e-2)

    def test_snyder_example_inverse(self, guam):
        lon, lat = guam.inverse_project(34176.20 - 28657.52, 74017.88 - 67199.99)
        assert lon == pytest.approx(145.7930300, abs=1e-7)
        assert lat == pytest.approx(15.2465258, abs=1e-7)

    def test_center_maps_to_origin(self, guam):
        x, y = guam.project(145.7416589, 15.18491194)
        assert x == pytest.approx(0.0, abs=1e-6)
        assert y == pytest.approx(0.0, abs=1e-6)

    def test_close_to_geodesic_form_near_center(self):
        modified = ModifiedAzimuthalEquidistant(30.0, 30.0, WGS84)
        geodesic = AzimuthalEquidistant(30.0, 30.0, WGS84)

        x_mod, y_mod = modified.project(30.1, 30.1)
        x_geo, y_geo = geodesic.project(30.1, 30.1)
        assert x_mod == pytest.approx(x_geo, abs=1e-2)
        assert y_mod == pytest.approx(y_geo, abs=1e-2)

    def test_equatorial_center_inverse(self):
        proj = ModifiedAzimuthalEquidistant(10.0, 0.0, WGS84)
        lon, lat = proj.inverse_project(0.0, 0.0)
        assert lon == pytest.approx(10.0, abs=1e-12)
        assert lat == pytest.approx(0.0, abs=1e-12)
