"""
Tests for ConversionPipe.
"""

import pytest

from common.errors import ConfigurationError, DomainError
from projections import ConversionPipe, EquidistantCylindrical
from tests.reference_points import LOCAL_GEO_POINTS, MAP_POINTS

TOLERANCE = 1e-4


class TestConversionPipe:
    """Conversion between planar systems"""

    def test_forward_through_identity(self, lon_lat, lcc):
        x, y = lon_lat.pipe_to(lcc).convert(25.0, 45.0)
        assert (x, y) == lcc.project(25.0, 45.0)

    def test_inverse_through_identity(self, lon_lat, lcc):
        x, y = lcc.project(25.0, 45.0)
        assert lcc.pipe_to(lon_lat).convert(x, y) == lcc.inverse_project(x, y)

    def test_chain_recovers_origin(self, lon_lat, lcc, aeqd):
        lcc_x, lcc_y = lon_lat.pipe_to(lcc).convert(25.0, 45.0)
        aeqd_x, aeqd_y = lcc.pipe_to(aeqd).convert(lcc_x, lcc_y)
        lon, lat = aeqd.pipe_to(lon_lat).convert(aeqd_x, aeqd_y)

        expected_x, expected_y = aeqd.project(25.0, 45.0)
        assert aeqd_x == pytest.approx(expected_x, abs=TOLERANCE)
        assert aeqd_y == pytest.approx(expected_y, abs=TOLERANCE)
        assert lon == pytest.approx(25.0, abs=1e-8)
        assert lat == pytest.approx(45.0, abs=1e-8)

    def test_self_pipe_is_identity(self, lcc):
        pipe = lcc.pipe_to(lcc)
        for point in MAP_POINTS:
            x, y = pipe.convert(*point)
            assert x == pytest.approx(point[0], abs=TOLERANCE)
            assert y == pytest.approx(point[1], abs=TOLERANCE)

    def test_invert_swaps_direction(self, lcc, aeqd):
        pipe = lcc.pipe_to(aeqd)
        inverted = pipe.invert()
        assert inverted.source is aeqd
        assert inverted.target is lcc
        assert inverted.invert() == pipe

        for lon, lat in LOCAL_GEO_POINTS:
            x, y = lcc.project(lon, lat)
            x_back, y_back = inverted.convert(*pipe.convert(x, y))
            assert x_back == pytest.approx(x, abs=TOLERANCE)
            assert y_back == pytest.approx(y, abs=TOLERANCE)

    def test_unchecked_matches_checked(self, lcc, aeqd):
        pipe = lcc.pipe_to(aeqd)
        for point in MAP_POINTS:
            assert pipe.convert_unchecked(*point) == pytest.approx(pipe.convert(*point))

    def test_errors_propagate_unchanged(self, lon_lat, lcc):
        with pytest.raises(DomainError) as excinfo:
            lon_lat.pipe_to(lcc).convert(10.0, -90.0)
        assert excinfo.value.parameter == "lat"

    def test_source_error_propagates(self, lcc):
        eqc = EquidistantCylindrical(0.0, 0.0)
        with pytest.raises(DomainError):
            eqc.pipe_to(lcc).convert(0.0, 1e8)

    def test_non_projection_rejected(self, lcc):
        with pytest.raises(ConfigurationError):
            ConversionPipe(lcc, "WGS84")

    def test_immutable(self, lcc, aeqd):
        pipe = ConversionPipe(lcc, aeqd)
        with pytest.raises(AttributeError):
            pipe.source = aeqd
