"""
Geodetic Constants for Map Projections.

This module provides the defining parameters of the reference ellipsoids
used throughout the library, together with their provenance, and the
numerical constants that bound the iterative inverse projections.

All lengths are in meters; flattenings are dimensionless.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- GRS80 parameters: Moritz, H. (1980). Geodetic Reference System 1980.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of reference ellipsoid parameters.

    Each ellipsoid is defined by its semi-major axis and either its
    inverse flattening or its semi-minor axis, exactly as published by
    the defining authority. Derived quantities (eccentricity, radii of
    curvature) are computed by `geospatial.ellipsoids.Ellipsoid`.
    """

    # =========================================================================
    # WGS84
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening of WGS84 ellipsoid: 1/f = a / (a - b)"
    )

    # =========================================================================
    # GRS80
    # =========================================================================

    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,
        unit="m",
        source="Moritz (1980), Bulletin Geodesique 54",
        description="Semi-major axis of GRS80 ellipsoid"
    )

    GRS80_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257222101,
        uncertainty=0.0,
        unit="dimensionless",
        source="Moritz (1980), Bulletin Geodesique 54 (derived)",
        description="Inverse flattening of GRS80 ellipsoid"
    )

    # =========================================================================
    # WGS72
    # =========================================================================

    WGS72_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_135.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TR 8350.2 (1974)",
        description="Semi-major axis of WGS72 ellipsoid"
    )

    WGS72_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.26,
        uncertainty=0.0,
        unit="dimensionless",
        source="DMA TR 8350.2 (1974)",
        description="Inverse flattening of WGS72 ellipsoid"
    )

    # =========================================================================
    # Clarke 1866 (defined by its two axes)
    # =========================================================================

    CLARKE1866_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_206.4,
        uncertainty=0.0,
        unit="m",
        source="Snyder (1987), Table 1",
        description="Semi-major axis of Clarke 1866 ellipsoid"
    )

    CLARKE1866_SEMI_MINOR_AXIS: Final[Constant] = Constant(
        value=6_356_583.8,
        uncertainty=0.0,
        unit="m",
        source="Snyder (1987), Table 1",
        description="Semi-minor axis of Clarke 1866 ellipsoid"
    )

    # =========================================================================
    # Bessel 1841
    # =========================================================================

    BESSEL1841_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_377_397.155,
        uncertainty=0.0,
        unit="m",
        source="Snyder (1987), Table 1",
        description="Semi-major axis of Bessel 1841 ellipsoid"
    )

    BESSEL1841_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=299.1528128,
        uncertainty=0.0,
        unit="dimensionless",
        source="Snyder (1987), Table 1",
        description="Inverse flattening of Bessel 1841 ellipsoid"
    )

    # =========================================================================
    # International 1924 (Hayford)
    # =========================================================================

    INTERNATIONAL1924_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_388.0,
        uncertainty=0.0,
        unit="m",
        source="IUGG (1924)",
        description="Semi-major axis of International 1924 ellipsoid"
    )

    INTERNATIONAL1924_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=297.0,
        uncertainty=0.0,
        unit="dimensionless",
        source="IUGG (1924)",
        description="Inverse flattening of International 1924 ellipsoid"
    )

    # =========================================================================
    # Reference sphere
    # =========================================================================

    SPHERE_RADIUS: Final[Constant] = Constant(
        value=6_370_997.0,
        uncertainty=0.0,
        unit="m",
        source="Snyder (1987); PROJ 'sphere' ellipsoid",
        description="Radius of the sphere of equal area to the Clarke 1866 ellipsoid"
    )


# =============================================================================
# Iterative inverse latitude
# =============================================================================

# Successive latitude estimates closer than this (radians) are converged.
INVERSE_LATITUDE_TOLERANCE_RAD: Final[float] = 1e-10

# Hard cap on fixed-point iterations; every inverse call is bounded by it.
INVERSE_LATITUDE_MAX_ITERATIONS: Final[int] = 15

# Two standard parallels closer than this (degrees) are treated as one.
STANDARD_PARALLEL_EQUALITY_TOLERANCE_DEG: Final[float] = 1e-10

# Cone constants smaller than this in magnitude degenerate to a cylinder.
MIN_CONE_CONSTANT: Final[float] = 1e-10
