"""
Tests for the shared infrastructure: errors, units, configuration, logging.
"""

import logging

import pytest

from common.config import BatchConfig, DEFAULT_BATCH_CONFIG
from common.errors import (
    ConfigurationError,
    ConvergenceError,
    DomainError,
    MappingError,
    ProjectionError,
)
from common.logging_config import get_logger, set_level
from common.units import Q_, angle_in_degrees, length_in_meters


class TestErrorHierarchy:
    """Error classes and the builtin types they extend"""

    def test_configuration_error_is_value_error(self):
        err = ConfigurationError("bad", parameter="a", value=-1.0)
        assert isinstance(err, MappingError)
        assert isinstance(err, ValueError)
        assert not isinstance(err, ProjectionError)
        assert err.parameter == "a"
        assert err.value == -1.0

    def test_domain_error_carries_constraint(self):
        err = DomainError("lat", 95.0, "latitude must lie within [-90, 90] degrees")
        assert isinstance(err, ProjectionError)
        assert isinstance(err, ValueError)
        assert err.parameter == "lat"
        assert err.value == 95.0
        assert "lat=95.0" in str(err)
        assert "[-90, 90]" in str(err)

    def test_convergence_error_is_arithmetic_error(self):
        err = ConvergenceError(last_estimate=45.1, iterations=15)
        assert isinstance(err, ProjectionError)
        assert isinstance(err, ArithmeticError)
        assert not isinstance(err, DomainError)
        assert err.iterations == 15
        assert err.last_estimate == 45.1


class TestUnits:
    """Conversion of construction parameters"""

    def test_bare_numbers_pass_through(self):
        assert angle_in_degrees(30, "lat") == 30.0
        assert length_in_meters(6378137.0, "a") == 6378137.0

    def test_radians_converted_to_degrees(self):
        assert angle_in_degrees(Q_(0.5, "radian"), "lat") == pytest.approx(28.64788975654116)

    def test_kilometers_converted_to_meters(self):
        assert length_in_meters(Q_(6378.137, "km"), "a") == pytest.approx(6378137.0)

    def test_wrong_dimension_rejected(self):
        with pytest.raises(ConfigurationError, match="incompatible units"):
            angle_in_degrees(Q_(1.0, "meter"), "ref_lat")

    def test_non_numeric_rejected(self):
        with pytest.raises(ConfigurationError) as excinfo:
            length_in_meters("large", "a")
        assert excinfo.value.parameter == "a"


class TestBatchConfig:
    """Batch configuration validation"""

    def test_defaults(self):
        assert DEFAULT_BATCH_CONFIG.max_workers is None
        assert DEFAULT_BATCH_CONFIG.parallel_threshold == 1024
        assert not DEFAULT_BATCH_CONFIG.is_serial

    def test_serial(self):
        assert BatchConfig(max_workers=1).is_serial

    @pytest.mark.parametrize("kwargs", [
        {"max_workers": 0},
        {"max_workers": -2},
        {"parallel_threshold": -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ConfigurationError):
            BatchConfig(**kwargs)

    def test_from_dict(self):
        config = BatchConfig.from_dict({"max_workers": 2, "parallel_threshold": 10})
        assert config == BatchConfig(max_workers=2, parallel_threshold=10)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError, match="max_worker"):
            BatchConfig.from_dict({"max_worker": 2})


class TestLogging:
    """Library logger configuration"""

    def test_get_logger_attaches_single_handler(self):
        first = get_logger("projections.test_logger")
        second = get_logger("projections.test_logger")
        assert first is second
        assert len(first.handlers) == 1

    def test_set_level_applies_to_library_loggers(self):
        library = get_logger("projections.test_level")
        other = logging.getLogger("unrelated.test_level")
        other.setLevel(logging.ERROR)
        try:
            set_level(logging.DEBUG)
            assert library.level == logging.DEBUG
            assert other.level == logging.ERROR
        finally:
            set_level(logging.INFO)
        assert library.level == logging.INFO
