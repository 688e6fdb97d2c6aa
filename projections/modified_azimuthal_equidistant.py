"""
Modified Azimuthal Equidistant Projection.

A variant of the azimuthal equidistant projection defined by Snyder for
the islands of Micronesia. Instead of solving geodesics it evaluates a
truncated series in the distance from the center, so it is faster than
`AzimuthalEquidistant` but diverges from it noticeably beyond a few
hundred kilometers.

Summary by Snyder (1987)
------------------------
- Azimuthal.
- Distances measured from the center are (approximately) true.
- Neither equal-area nor conformal.
- Used for large-scale maps of small island groups.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395,
  pp. 199-200, eqs. 25-15 to 25-25.
"""

from typing import Any, Dict, Tuple
import numpy as np

from common.logging_config import get_logger
from common.units import Scalar
from geospatial.ellipsoids import Ellipsoid, WGS84
from projections.base import (
    Projection,
    angle_parameter,
    ellipsoid_proj4,
    require_ellipsoid,
    wrap_longitude_deg,
)

logger = get_logger(__name__)

# Below this |sin Az| the point is treated as lying on the central meridian
_MERIDIAN_TOLERANCE = 1e-12


class ModifiedAzimuthalEquidistant(Projection):
    """Snyder's modified (series) Azimuthal Equidistant projection.

    Parameters
    ----------
    ref_lon, ref_lat : float or pint.Quantity
        Center of the projection in degrees.
    ellipsoid : Ellipsoid
        Reference ellipsoid (default: WGS84).
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

        e2 = self._ellps.e2
        self._lambda_0 = float(np.radians(self._ref_lon))
        self._phi_0 = float(np.radians(self._ref_lat))
        self._sin_phi_0 = float(np.sin(self._phi_0))
        self._cos_phi_0 = float(np.cos(self._phi_0))

        # N1: prime vertical radius at the center; G: Snyder eq. 25-17
        self._n_1 = self._ellps.radius_of_curvature_prime_vertical(self._phi_0)
        self._g = self._ellps.e * self._sin_phi_0 / np.sqrt(1.0 - e2)

        logger.debug(
            f"Modified AEQD initialized: N1={self._n_1:.3f} m, G={self._g:.12f}"
        )
        self._freeze()

    @property
    def name(self) -> str:
        return f"Modified Azimuthal Equidistant (center={self._ref_lon}°, {self._ref_lat}°)"

    @property
    def proj4_string(self) -> str:
        # PROJ has no Micronesia form; the geodesic AEQD is the closest relative
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

    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        e = self._ellps.e
        e2 = self._ellps.e2
        phi = np.radians(lat)
        d_lambda = np.radians(lon) - self._lambda_0

        n = self._ellps.radius_of_curvature_prime_vertical(phi)

        # Eq. 25-16
        psi = np.arctan(
            (1.0 - e2) * np.tan(phi)
            + e2 * self._n_1 * self._sin_phi_0 / (n * np.cos(phi))
        )

        # Eq. 25-18
        az = np.arctan2(
            np.sin(d_lambda),
            self._cos_phi_0 * np.tan(psi) - self._sin_phi_0 * np.cos(d_lambda)
        )

        # Eqs. 25-19 and 25-20
        if abs(np.sin(az)) < _MERIDIAN_TOLERANCE:
            s = np.abs(np.arcsin(
                self._cos_phi_0 * np.sin(psi) - self._sin_phi_0 * np.cos(psi)
            )) * np.copysign(1.0, np.cos(az))
        else:
            s = np.arcsin(np.sin(d_lambda) * np.cos(psi) / np.sin(az))

        h = e * self._cos_phi_0 * np.cos(az) / np.sqrt(1.0 - e2)
        g = self._g
        h2 = h**2

        # Eq. 25-21
        c = self._n_1 * s * (
            1.0
            - s**2 * h2 * (1.0 - h2) / 6.0
            + (s**3 / 8.0) * g * h * (1.0 - 2.0 * h2)
            + (s**4 / 120.0) * (h2 * (4.0 - 7.0 * h2) - 3.0 * g**2 * (1.0 - 7.0 * h2))
            - (s**5 / 48.0) * g * h
        )

        x = c * np.sin(az)
        y = c * np.cos(az)

        return float(x), float(y)

    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        e2 = self._ellps.e2
        c = np.hypot(x, y)
        az = np.arctan2(x, y)
        cos_az = np.cos(az)

        # Eqs. 25-22 to 25-25
        big_a = -e2 * self._cos_phi_0**2 * cos_az**2 / (1.0 - e2)
        big_b = (
            3.0 * e2 * (1.0 - big_a) * self._sin_phi_0 * self._cos_phi_0 * cos_az
            / (1.0 - e2)
        )
        big_d = c / self._n_1
        big_e = (
            big_d
            - big_a * (1.0 + big_a) * big_d**3 / 6.0
            - big_b * (1.0 + 3.0 * big_a) * big_d**4 / 24.0
        )
        big_f = 1.0 - big_a * big_e**2 / 2.0 - big_b * big_e**3 / 6.0

        psi = np.arcsin(
            self._sin_phi_0 * np.cos(big_e)
            + self._cos_phi_0 * np.sin(big_e) * cos_az
        )

        lam = self._lambda_0 + np.arcsin(np.sin(az) * np.sin(big_e) / np.cos(psi))

        # sin φ0 / sin ψ vanishes on the equatorial aspect, including ψ = 0
        ratio = 0.0 if self._sin_phi_0 == 0.0 else self._sin_phi_0 / np.sin(psi)
        phi = np.arctan((1.0 - e2 * big_f * ratio) * np.tan(psi) / (1.0 - e2))

        return wrap_longitude_deg(float(np.degrees(lam))), float(np.degrees(phi))
