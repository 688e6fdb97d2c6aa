"""
Geospatial Module for the map projection library.

All Earth-surface geometry used by the projections originates from this
module. No projection implements ellipsoid geometry independently.

This module provides:
- Reference ellipsoid models and presets
- Geodesic (shortest path) calculations via pyproj
"""

from geospatial.ellipsoids import (
    Ellipsoid,
    WGS84,
    GRS80,
    WGS72,
    CLARKE1866,
    BESSEL1841,
    INTERNATIONAL1924,
    SPHERE,
    PRESETS,
    get_ellipsoid,
)

from geospatial.geodesics import (
    GeodesicResult,
    geodesic_inverse,
    geodesic_direct,
)

__all__ = [
    # Ellipsoids
    "Ellipsoid",
    "WGS84",
    "GRS80",
    "WGS72",
    "CLARKE1866",
    "BESSEL1841",
    "INTERNATIONAL1924",
    "SPHERE",
    "PRESETS",
    "get_ellipsoid",
    # Geodesics
    "GeodesicResult",
    "geodesic_inverse",
    "geodesic_direct",
]
