"""
Azimuthal Equidistant Projection (ellipsoidal).

All points on the map are at proportionally correct distances from the
center point, and at the correct azimuth (direction) from it. A useful
application is a polar projection which shows all meridians as straight
lines, with distances from the pole represented correctly.

Summary by Snyder (1987)
------------------------
- Azimuthal.
- Distances measured from the center are true.
- Distances not measured along radii from the center are not correct.
- The center of projection is the only point without distortion.
- Neither equal-area nor conformal.
- Used in the oblique aspect for atlas maps of continents and world maps
  for aviation and radio use.

Implementation
--------------
The ellipsoidal form is defined directly through geodesics: a point at
geodesic distance s and forward azimuth α from the center maps to
(s sin α, s cos α). Both directions therefore reduce to the inverse and
direct geodesic problems, solved by `geospatial.geodesics` (pyproj).
"""

from typing import Any, Dict, Tuple
import numpy as np

from common.errors import DomainError
from common.units import Scalar
from geospatial.ellipsoids import Ellipsoid, WGS84
from geospatial.geodesics import geodesic_direct, geodesic_inverse
from projections.base import (
    Projection,
    angle_parameter,
    ellipsoid_proj4,
    require_ellipsoid,
    wrap_longitude_deg,
)

_DISTANCE_TOLERANCE_M = 1e-3


class AzimuthalEquidistant(Projection):
    """Azimuthal Equidistant projection on an ellipsoid.

    Parameters
    ----------
    ref_lon, ref_lat : float or pint.Quantity
        Center of the projection in degrees. Point (0, 0) on the map is
        at these coordinates.
    ellipsoid : Ellipsoid
        Reference ellipsoid (default: WGS84).

    Notes
    -----
    Planar points further than π·a from the center, or further than the
    shortest geodesic to the point they would reach along their azimuth,
    do not correspond to any point on the ellipsoid and are rejected by
    `inverse_project`. Along a meridian the limit is the half-meridian
    length, about 20 003 931 m on WGS84.
    """

    def __init__(
        self,
        ref_lon: Scalar,
        ref_lat: Scalar,
        ellipsoid: Ellipsoid = WGS84
    ):
        self._ref_lon = angle_parameter(ref_lon, "ref_lon", -180.0, 180.0)
        self._ref_lat = angle_parameter(ref_lat, "ref_lat", -90.0, 90.0)
        self._ellps = require_ellipsoid(ellipsoid)
        self._max_distance = np.pi * self._ellps.a
        self._freeze()

    @property
    def name(self) -> str:
        return f"Azimuthal Equidistant (center={self._ref_lon}°, {self._ref_lat}°)"

    @property
    def proj4_string(self) -> str:
        return (
            f"+proj=aeqd +lon_0={self._ref_lon} +lat_0={self._ref_lat} "
            f"+x_0=0 +y_0=0 {ellipsoid_proj4(self._ellps)} +units=m +no_defs"
        )

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "ref_lon": self._ref_lon,
            "ref_lat": self._ref_lat,
            "ellipsoid": self._ellps,
        }

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellps

    def _check_planar_domain(self, x: float, y: float) -> None:
        distance = np.hypot(x, y)
        if distance > self._max_distance:
            raise DomainError(
                "(x, y)", (x, y),
                f"distance from center {distance:.3f} m exceeds {self._max_distance:.3f} m"
            )

    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        result = geodesic_inverse(
            self._ref_lon, self._ref_lat, lon, lat, ellipsoid=self._ellps
        )
        azimuth = np.radians(result.azimuth_forward_deg)

        x = result.distance_m * np.sin(azimuth)
        y = result.distance_m * np.cos(azimuth)

        return float(x), float(y)

    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        distance = np.hypot(x, y)
        azimuth_deg = np.degrees(np.arctan2(x, y))

        lon, lat, _ = geodesic_direct(
            self._ref_lon, self._ref_lat, azimuth_deg, distance, ellipsoid=self._ellps
        )

        return wrap_longitude_deg(lon), lat

    def _inverse_project_checked(self, x: float, y: float) -> Tuple[float, float]:
        lon, lat = self.inverse_project_unchecked(x, y)

        # past the cut locus the direct geodesic is no longer the shortest path
        distance = np.hypot(x, y)
        shortest = geodesic_inverse(
            self._ref_lon, self._ref_lat, lon, lat, ellipsoid=self._ellps
        ).distance_m
        if abs(shortest - distance) > _DISTANCE_TOLERANCE_M:
            raise DomainError(
                "(x, y)", (x, y),
                f"distance from center {distance:.3f} m lies beyond the antipodal "
                f"cut locus (shortest path {shortest:.3f} m)"
            )
        return lon, lat
