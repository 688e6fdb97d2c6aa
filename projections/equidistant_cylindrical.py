"""
Equidistant Cylindrical (Equirectangular) Projection.

Includes the special case of the Plate Carrée (standard parallel, reference
longitude and latitude all zero).

Summary by Snyder (1987)
------------------------
- Cylindrical.
- Neither equal-area nor conformal.
- Meridians and parallels are equidistant straight lines, intersecting
  at right angles.
- Poles shown as lines.
- Used only in spherical form.

Only the spherical equations are implemented. The radius is the
semi-major axis of the given ellipsoid, which defaults to `SPHERE`.
"""

from typing import Any, Dict, Tuple
import numpy as np

from common.errors import ConfigurationError, DomainError
from common.units import Scalar
from geospatial.ellipsoids import Ellipsoid, SPHERE
from projections.base import (
    Projection,
    angle_parameter,
    ellipsoid_proj4,
    require_ellipsoid,
    wrap_longitude_deg,
)


class EquidistantCylindrical(Projection):
    """Equidistant Cylindrical projection on a sphere of radius R = a.

    Parameters
    ----------
    ref_lon, ref_lat : float or pint.Quantity
        Reference longitude and latitude in degrees.
    std_par : float or pint.Quantity
        Standard parallel along which the scale is true, strictly between
        -90 and 90 degrees (default: 0, the equator).
    ellipsoid : Ellipsoid
        Source of the radius (default: SPHERE).
    """

    def __init__(
        self,
        ref_lon: Scalar,
        ref_lat: Scalar,
        std_par: Scalar = 0.0,
        ellipsoid: Ellipsoid = SPHERE
    ):
        self._ref_lon = angle_parameter(ref_lon, "ref_lon", -180.0, 180.0)
        self._ref_lat = angle_parameter(ref_lat, "ref_lat", -90.0, 90.0)
        self._std_par = angle_parameter(std_par, "std_par", -90.0, 90.0)
        self._ellps = require_ellipsoid(ellipsoid)

        if abs(self._std_par) == 90.0:
            raise ConfigurationError(
                "Standard parallel cannot coincide with a pole",
                parameter="std_par",
                value=self._std_par
            )

        self._radius = self._ellps.a
        self._x_scale = self._radius * np.cos(np.radians(self._std_par))
        self._lambda_0 = float(np.radians(self._ref_lon))
        self._phi_0 = float(np.radians(self._ref_lat))
        self._freeze()

    @property
    def name(self) -> str:
        return f"Equidistant Cylindrical (std_par={self._std_par}°)"

    @property
    def proj4_string(self) -> str:
        datum = "+ellps=sphere" if self._ellps == SPHERE else f"+R={self._radius!r}"
        return (
            f"+proj=eqc +lat_ts={self._std_par} +lat_0={self._ref_lat} "
            f"+lon_0={self._ref_lon} +x_0=0 +y_0=0 {datum} +units=m +no_defs"
        )

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "ref_lon": self._ref_lon,
            "ref_lat": self._ref_lat,
            "std_par": self._std_par,
            "ellipsoid": self._ellps,
        }

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellps

    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        x = self._x_scale * (np.radians(lon) - self._lambda_0)
        y = self._radius * (np.radians(lat) - self._phi_0)
        return float(x), float(y)

    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        lon = np.degrees(x / self._x_scale + self._lambda_0)
        lat = np.degrees(y / self._radius + self._phi_0)
        return float(lon), float(lat)

    def _inverse_project_checked(self, x: float, y: float) -> Tuple[float, float]:
        lon, lat = self.inverse_project_unchecked(x, y)
        if not -90.0 <= lat <= 90.0:
            raise DomainError("y", y, "maps to a latitude beyond the poles")
        return wrap_longitude_deg(lon), lat
