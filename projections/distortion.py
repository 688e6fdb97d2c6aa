"""
Map Distortion Analysis.

Tissot's indicatrix quantifies the local distortion of a projection:
an infinitesimally small circle on the ellipsoid is mapped to an
ellipse whose axes are the principal scale factors at that point.

The indicatrix is computed numerically from the Jacobian of the forward
projection, so it works for every metric projection in this package
without variant-specific formulas.

Scientific Context
------------------
Let E and N be ground distances east and north on the ellipsoid:
dE = N(φ) cos φ dλ and dN = M(φ) dφ, with M and N the meridional and
prime-vertical radii of curvature. The Jacobian

    J = | ∂x/∂E  ∂x/∂N |
        | ∂y/∂E  ∂y/∂N |

maps ground displacements to map displacements. Its singular values are
the semi-axes of the indicatrix; |det J| is the areal scale.

References
----------
- Tissot, A. (1859). Mémoire sur la représentation des surfaces.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395, pp. 20-26.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from common.errors import ConfigurationError, DomainError
from projections.base import Projection


@dataclass(frozen=True)
class TissotIndicatrix:
    """Tissot's indicatrix describing local distortion at a point.

    Attributes
    ----------
    semi_major : float
        Maximum scale factor at the point.
    semi_minor : float
        Minimum scale factor at the point.
    orientation_rad : float
        Orientation of the major axis on the map in radians (from east,
        counter-clockwise), in (-π/2, π/2].
    area_scale : float
        Areal scale factor (semi_major * semi_minor).
    angular_distortion_rad : float
        Maximum angular distortion 2ω, where sin ω = (a - b) / (a + b).

    Notes
    -----
    - For a conformal projection: semi_major = semi_minor (circle, no angular distortion)
    - For an equal-area projection: area_scale = 1.0 (but shapes are distorted)
    """
    semi_major: float
    semi_minor: float
    orientation_rad: float
    area_scale: float
    angular_distortion_rad: float

    @property
    def is_conformal(self) -> bool:
        """Check if projection is locally conformal (circle, no angular distortion)."""
        return bool(np.abs(self.semi_major - self.semi_minor) < 1e-6)

    @property
    def is_equal_area(self) -> bool:
        """Check if projection is locally equal-area."""
        return bool(np.abs(self.area_scale - 1.0) < 1e-6)


def _partial(
    projection: Projection,
    lon: float,
    lat: float,
    axis: int,
    step_deg: float,
    low: float,
    high: float
) -> Tuple[np.ndarray, float]:
    """Finite difference of the forward projection along one coordinate.

    Uses a central difference unless the stencil would leave the
    coordinate's valid range, in which case a one-sided difference is used.

    Returns
    -------
    Tuple[np.ndarray, float]
        (Δx, Δy) and the angular step in radians it corresponds to.
    """
    value = (lon, lat)[axis]
    forward = value + step_deg <= high
    backward = value - step_deg >= low

    def shifted(offset: float) -> np.ndarray:
        point = [lon, lat]
        point[axis] += offset
        return np.array(projection.project(*point))

    if forward and backward:
        return shifted(step_deg) - shifted(-step_deg), np.radians(2 * step_deg)
    if forward:
        return shifted(step_deg) - shifted(0.0), np.radians(step_deg)
    return shifted(0.0) - shifted(-step_deg), np.radians(step_deg)


def compute_tissot_indicatrix(
    projection: Projection,
    lon: float,
    lat: float,
    delta: float = 1e-5
) -> TissotIndicatrix:
    """Compute Tissot's indicatrix numerically.

    Parameters
    ----------
    projection : Projection
        A metric projection (one with an ellipsoid).
    lon, lat : float
        Location in geodetic coordinates (degrees).
    delta : float
        Angular step for numerical differentiation, in radians.

    Returns
    -------
    TissotIndicatrix
        Local distortion characteristics.

    Raises
    ------
    ConfigurationError
        If the projection has no ellipsoid (its planar side is not metric)
        or `delta` is not positive.
    DomainError
        If the point, or its differentiation stencil, cannot be projected,
        or lies on a pole.
    """
    ellipsoid = projection.ellipsoid
    if ellipsoid is None:
        raise ConfigurationError(
            f"{projection.name} is not a metric projection; distortion is undefined",
            parameter="projection"
        )
    if not delta > 0.0:
        raise ConfigurationError(
            f"delta must be positive, got {delta}", parameter="delta", value=delta
        )
    if abs(lat) == 90.0:
        raise DomainError("lat", lat, "parallels degenerate to a point at the poles")

    step_deg = float(np.degrees(delta))
    phi = np.radians(lat)

    d_lon, h_lon = _partial(projection, lon, lat, 0, step_deg, -180.0, 180.0)
    d_lat, h_lat = _partial(projection, lon, lat, 1, step_deg, -90.0, 90.0)

    # Ground distance per radian of longitude and latitude
    east_per_rad = ellipsoid.radius_of_curvature_prime_vertical(phi) * np.cos(phi)
    north_per_rad = ellipsoid.radius_of_curvature_meridian(phi)

    jacobian = np.column_stack([
        d_lon / (h_lon * east_per_rad),
        d_lat / (h_lat * north_per_rad),
    ])

    u, singular_values, _ = np.linalg.svd(jacobian)
    a, b = float(singular_values[0]), float(singular_values[1])

    theta = float(np.arctan2(u[1, 0], u[0, 0]))
    if theta > np.pi / 2:
        theta -= np.pi
    elif theta <= -np.pi / 2:
        theta += np.pi

    return TissotIndicatrix(
        semi_major=a,
        semi_minor=b,
        orientation_rad=theta,
        area_scale=float(abs(np.linalg.det(jacobian))),
        angular_distortion_rad=float(2.0 * np.arcsin((a - b) / (a + b)))
    )
