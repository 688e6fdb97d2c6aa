"""
Common utilities and infrastructure for the map projection library.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- The error taxonomy
- Unit conversion for construction parameters
- Logging and runtime configuration
"""

from common.constants import GeodeticConstants
from common.errors import (
    MappingError,
    ConfigurationError,
    ProjectionError,
    DomainError,
    ConvergenceError,
)
from common.units import Q_, ureg, angle_in_degrees, length_in_meters
from common.config import BatchConfig, DEFAULT_BATCH_CONFIG
from common.logging_config import get_logger

__all__ = [
    "GeodeticConstants",
    "MappingError",
    "ConfigurationError",
    "ProjectionError",
    "DomainError",
    "ConvergenceError",
    "Q_",
    "ureg",
    "angle_in_degrees",
    "length_in_meters",
    "BatchConfig",
    "DEFAULT_BATCH_CONFIG",
    "get_logger",
]
