"""
Lambert Conformal Conic Projection.

A conformal (angle-preserving) conic projection suitable for mid-latitude
regions that extend primarily east-west. Common for weather maps and
aeronautical charts.

Summary by Snyder (1987)
------------------------
- Conic.
- Conformal.
- Parallels are unequally spaced arcs of concentric circles, more
  closely spaced near the center of the map.
- Meridians are equally spaced radii of the same circles, cutting
  parallels at right angles.
- Scale is true along two standard parallels, or along just one.
- The pole in the same hemisphere as the standard parallels is a point;
  the other pole is at infinity.

Implementation
--------------
Forward equations are closed-form (Snyder eqs. 15-1 to 15-10). The
inverse recovers the cone radius and angle in closed form, then inverts
the isometric-latitude relation by fixed-point iteration (Snyder eq. 7-9)
starting from the spherical estimate. The iteration is bounded by
`INVERSE_LATITUDE_MAX_ITERATIONS` and stops once successive estimates
differ by less than `INVERSE_LATITUDE_TOLERANCE_RAD`.

Degenerate Parameters
---------------------
- Equal standard parallels select the tangent (single standard parallel)
  form with cone constant n = sin φ1.
- A cone constant of (near) zero, e.g. φ1 = -φ2 or a tangent cone at the
  equator, is a cylinder, not a cone, and is rejected.
- A reference latitude at the pole opposite the cone apex lies at
  infinity and is rejected.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395, pp. 104-110.
"""

from typing import Any, Dict, Tuple
import numpy as np

from common.constants import (
    INVERSE_LATITUDE_MAX_ITERATIONS,
    INVERSE_LATITUDE_TOLERANCE_RAD,
    MIN_CONE_CONSTANT,
    STANDARD_PARALLEL_EQUALITY_TOLERANCE_DEG,
)
from common.errors import ConfigurationError, ConvergenceError, DomainError
from common.logging_config import get_logger
from common.units import Scalar
from geospatial.ellipsoids import Ellipsoid, WGS84
from projections.base import (
    Projection,
    angle_parameter,
    ellipsoid_proj4,
    require_ellipsoid,
    wrap_longitude_deg,
    wrap_longitude_rad,
)

logger = get_logger(__name__)

_SECTOR_TOLERANCE_RAD = 1e-10


class LambertConformalConic(Projection):
    """Lambert Conformal Conic projection.

    Parameters
    ----------
    ref_lon, ref_lat : float or pint.Quantity
        Reference longitude and latitude in degrees. Point (0, 0) on the
        map is at these coordinates.
    std_par_1, std_par_2 : float or pint.Quantity
        Standard parallels in degrees, strictly between -90 and 90.
        Equal values select the tangent cone.
    ellipsoid : Ellipsoid
        Reference ellipsoid (default: WGS84).

    Raises
    ------
    ConfigurationError
        If a parameter is out of range or the parameters describe a
        degenerate cone.

    Examples
    --------
    >>> lcc = LambertConformalConic(2.0, 0.0, 30.0, 60.0)
    >>> x, y = lcc.project(6.8651, 45.8326)  # Mont Blanc
    >>> print(f"{x:.2f} {y:.2f}")
    364836.44 5421073.73
    """

    def __init__(
        self,
        ref_lon: Scalar,
        ref_lat: Scalar,
        std_par_1: Scalar,
        std_par_2: Scalar,
        ellipsoid: Ellipsoid = WGS84
    ):
        self._ref_lon = angle_parameter(ref_lon, "ref_lon", -180.0, 180.0)
        self._ref_lat = angle_parameter(ref_lat, "ref_lat", -90.0, 90.0)
        self._std_par_1 = angle_parameter(std_par_1, "std_par_1", -90.0, 90.0)
        self._std_par_2 = angle_parameter(std_par_2, "std_par_2", -90.0, 90.0)
        self._ellps = require_ellipsoid(ellipsoid)

        for name, value in (("std_par_1", self._std_par_1), ("std_par_2", self._std_par_2)):
            if abs(value) == 90.0:
                raise ConfigurationError(
                    f"Standard parallel '{name}' cannot coincide with a pole",
                    parameter=name,
                    value=value
                )

        phi_0 = np.radians(self._ref_lat)
        phi_1 = np.radians(self._std_par_1)
        phi_2 = np.radians(self._std_par_2)

        m_1 = self._ellps.m(phi_1)
        t_1 = self._ellps.t(phi_1)

        self._tangent = (
            abs(self._std_par_1 - self._std_par_2) < STANDARD_PARALLEL_EQUALITY_TOLERANCE_DEG
        )
        if self._tangent:
            n = float(np.sin(phi_1))
        else:
            m_2 = self._ellps.m(phi_2)
            t_2 = self._ellps.t(phi_2)
            n = float((np.log(m_1) - np.log(m_2)) / (np.log(t_1) - np.log(t_2)))

        if not np.isfinite(n) or abs(n) < MIN_CONE_CONSTANT:
            raise ConfigurationError(
                f"Standard parallels {self._std_par_1} and {self._std_par_2} "
                f"give a degenerate cone constant n={n}",
                parameter="std_par_2",
                value=self._std_par_2
            )

        if self._ref_lat == -np.sign(n) * 90.0:
            raise ConfigurationError(
                "Reference latitude cannot be the pole opposite the cone apex",
                parameter="ref_lat",
                value=self._ref_lat
            )

        self._n = n
        self._big_f = m_1 / (n * t_1**n)
        self._a_f = self._ellps.a * self._big_f
        self._rho_0 = self._a_f * self._ellps.t(phi_0) ** n
        self._lambda_0 = float(np.radians(self._ref_lon))

        logger.debug(
            f"LCC initialized: n={self._n:.12f}, F={self._big_f:.12f}, "
            f"rho_0={self._rho_0:.3f} m, tangent={self._tangent}"
        )
        self._freeze()

    @property
    def name(self) -> str:
        return f"Lambert Conformal Conic ({self._std_par_1}°, {self._std_par_2}°)"

    @property
    def proj4_string(self) -> str:
        return (
            f"+proj=lcc +lat_1={self._std_par_1} +lat_2={self._std_par_2} "
            f"+lat_0={self._ref_lat} +lon_0={self._ref_lon} +x_0=0 +y_0=0 "
            f"{ellipsoid_proj4(self._ellps)} +units=m +no_defs"
        )

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "ref_lon": self._ref_lon,
            "ref_lat": self._ref_lat,
            "std_par_1": self._std_par_1,
            "std_par_2": self._std_par_2,
            "ellipsoid": self._ellps,
        }

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellps

    @property
    def preserves_angles(self) -> bool:
        return True

    @property
    def cone_constant(self) -> float:
        """The cone constant n."""
        return self._n

    @property
    def is_tangent(self) -> bool:
        """Whether the single standard parallel (tangent cone) form is used."""
        return self._tangent

    def _check_geographic_domain(self, lon: float, lat: float) -> None:
        if lat == -np.sign(self._n) * 90.0:
            raise DomainError(
                "lat", lat, "the pole opposite the cone apex lies at infinity"
            )

    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        phi = np.radians(lat)
        lam = np.radians(lon)

        theta = self._n * wrap_longitude_rad(lam - self._lambda_0)
        rho = self._a_f * np.power(self._ellps.t(phi), self._n)

        x = rho * np.sin(theta)
        y = self._rho_0 - rho * np.cos(theta)

        return float(x), float(y)

    def _polar(self, x: float, y: float) -> Tuple[float, float]:
        """Cone radius ρ and angle θ of a planar point (Snyder eqs. 14-10, 14-11)."""
        sign = np.sign(self._n)
        dy = self._rho_0 - y
        rho = sign * np.hypot(x, dy)
        theta = np.arctan2(sign * x, sign * dy)
        return rho, theta

    def _check_planar_domain(self, x: float, y: float) -> None:
        # the developed cone covers only |θ| <= |n|·π
        _, theta = self._polar(x, y)
        if abs(theta) > abs(self._n) * np.pi + _SECTOR_TOLERANCE_RAD:
            raise DomainError(
                "(x, y)", (x, y), f"outside the cone sector |θ| <= |n|·π (θ={theta:.6f})"
            )

    def _inverse(self, x: float, y: float) -> Tuple[float, float, bool, int]:
        """Shared inverse; returns (lon, lat, converged, iterations)."""
        rho, theta = self._polar(x, y)

        if rho == 0.0:
            return self._ref_lon, float(np.sign(self._n) * 90.0), True, 0

        t = (rho / self._a_f) ** (1.0 / self._n)

        lam = theta / self._n + self._lambda_0
        phi, converged, iterations = self._latitude_from_t(t)

        return wrap_longitude_deg(float(np.degrees(lam))), float(np.degrees(phi)), converged, iterations

    def _latitude_from_t(self, t: float) -> Tuple[float, bool, int]:
        """Invert the isometric-latitude term by fixed-point iteration.

        φ(k+1) = π/2 - 2 atan(t [(1 - e sin φk) / (1 + e sin φk)]^(e/2))
        """
        e = self._ellps.e
        phi = np.pi / 2 - 2.0 * np.arctan(t)

        for iteration in range(1, INVERSE_LATITUDE_MAX_ITERATIONS + 1):
            e_sin = e * np.sin(phi)
            phi_next = np.pi / 2 - 2.0 * np.arctan(
                t * ((1.0 - e_sin) / (1.0 + e_sin)) ** (e / 2)
            )
            if np.abs(phi_next - phi) < INVERSE_LATITUDE_TOLERANCE_RAD:
                return phi_next, True, iteration
            phi = phi_next

        return phi, False, INVERSE_LATITUDE_MAX_ITERATIONS

    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        lon, lat, _, _ = self._inverse(x, y)
        return lon, lat

    def _inverse_project_checked(self, x: float, y: float) -> Tuple[float, float]:
        lon, lat, converged, iterations = self._inverse(x, y)
        if not converged:
            logger.warning(
                f"Inverse latitude did not converge for x={x}, y={y} "
                f"after {iterations} iterations"
            )
            raise ConvergenceError(last_estimate=lat, iterations=iterations)
        return lon, lat
