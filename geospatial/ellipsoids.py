"""
Reference Ellipsoid Model.

This module implements the oblate ellipsoid that every projection is
parameterized by, together with the derived constants and auxiliary
latitude functions that projection formulas use repeatedly.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Oblate ellipsoid of revolution (the sphere is the case f = 0)

An ellipsoid is fully defined by two numbers: the semi-major axis `a`
and the flattening `f = (a - b) / a`. Every other quantity (semi-minor
axis, eccentricities, radii of curvature) follows from them.

Immutability
------------
`Ellipsoid` is a frozen dataclass. One instance may be shared by any
number of projections and threads; no projection ever modifies it.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- Torge, W. (2001). Geodesy (3rd ed.). de Gruyter.
"""

from dataclasses import dataclass
from typing import Dict
import numpy as np

from common.constants import GeodeticConstants
from common.errors import ConfigurationError
from common.units import Scalar, length_in_meters


@dataclass(frozen=True)
class Ellipsoid:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters. A `pint` length
        quantity is accepted and converted.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    e : float
        First eccentricity.
    ep2 : float
        Second eccentricity squared: e'² = (a² - b²) / b²

    Raises
    ------
    ConfigurationError
        If `a` is not a finite positive length or `e²` lies outside [0, 1).
    """
    a: float
    f: float
    name: str = "custom"

    def __post_init__(self):
        """Validate and normalize the defining parameters."""
        a = length_in_meters(self.a, "a")
        try:
            f = float(self.f)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Flattening must be a number, got {self.f!r}", parameter="f"
            ) from e

        if not np.isfinite(a) or a <= 0.0:
            raise ConfigurationError(
                f"Semi-major axis must be finite and positive, got {a}",
                parameter="a",
                value=a
            )
        if not np.isfinite(f) or not 0.0 <= f < 1.0:
            raise ConfigurationError(
                f"Flattening {f} gives eccentricity squared outside [0, 1)",
                parameter="f",
                value=f
            )

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "f", f)

    @classmethod
    def from_eccentricity_squared(
        cls,
        a: Scalar,
        e2: float,
        name: str = "custom"
    ) -> 'Ellipsoid':
        """Create an ellipsoid from its eccentricity squared.

        Parameters
        ----------
        a : float or pint.Quantity
            Semi-major axis in meters.
        e2 : float
            First eccentricity squared, 0 <= e² < 1.
        name : str
            Identifier for the ellipsoid.

        Returns
        -------
        Ellipsoid
            Validated ellipsoid.
        """
        try:
            e2 = float(e2)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Eccentricity squared must be a number, got {e2!r}", parameter="e2"
            ) from e

        if not np.isfinite(e2) or not 0.0 <= e2 < 1.0:
            raise ConfigurationError(
                f"Eccentricity squared must lie in [0, 1), got {e2}",
                parameter="e2",
                value=e2
            )
        return cls(a=a, f=1.0 - np.sqrt(1.0 - e2), name=name)

    @classmethod
    def from_axes(cls, a: Scalar, b: Scalar, name: str = "custom") -> 'Ellipsoid':
        """Create an ellipsoid from its semi-major and semi-minor axes.

        Parameters
        ----------
        a, b : float or pint.Quantity
            Semi-major and semi-minor axes in meters, 0 < b <= a.
        name : str
            Identifier for the ellipsoid.

        Returns
        -------
        Ellipsoid
            Validated ellipsoid.
        """
        a = length_in_meters(a, "a")
        b = length_in_meters(b, "b")
        if not np.isfinite(b) or b <= 0.0 or b > a:
            raise ConfigurationError(
                f"Semi-minor axis must satisfy 0 < b <= a, got a={a}, b={b}",
                parameter="b",
                value=b
            )
        return cls(a=a, f=(a - b) / a, name=name)

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def e(self) -> float:
        """First eccentricity."""
        return float(np.sqrt(self.e2))

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1 - self.e2)

    @property
    def third_flattening(self) -> float:
        """Third flattening: n = (a - b) / (a + b)."""
        return self.f / (2 - self.f)

    @property
    def is_sphere(self) -> bool:
        """Whether the ellipsoid degenerates to a sphere."""
        return self.f == 0.0

    # -------------------------------------------------------------------------
    # Auxiliary functions used by projection formulas (radians in, floats out)
    # -------------------------------------------------------------------------

    def m(self, phi: float) -> float:
        """Compute Snyder's `m` term.

        Parameters
        ----------
        phi : float
            Geodetic latitude in radians.

        Returns
        -------
        float
            m = cos φ / sqrt(1 - e² sin² φ)  (Snyder eq. 14-15)
        """
        sin_phi = np.sin(phi)
        return float(np.cos(phi) / np.sqrt(1.0 - self.e2 * sin_phi**2))

    def t(self, phi: float) -> float:
        """Compute Snyder's isometric-latitude term `t`.

        Parameters
        ----------
        phi : float
            Geodetic latitude in radians.

        Returns
        -------
        float
            t = tan(π/4 - φ/2) / [(1 - e sin φ) / (1 + e sin φ)]^(e/2)
            (Snyder eq. 15-9). Equals exp(-ψ) where ψ is the isometric
            latitude; zero at the north pole.

        Notes
        -----
        The poles are evaluated exactly: zero at the north pole rather
        than the ~6e-17 that floating-point π/4 - π/4 would give, and
        infinity at the south pole rather than tan(π/2) ~ 1.6e16.
        """
        if phi >= np.pi / 2:
            return 0.0
        if phi <= -np.pi / 2:
            return float("inf")
        e = self.e
        e_sin = e * np.sin(phi)
        return float(
            np.tan(np.pi / 4 - phi / 2)
            / ((1.0 - e_sin) / (1.0 + e_sin)) ** (e / 2)
        )

    def conformal_latitude(self, phi: float) -> float:
        """Compute the conformal latitude χ for a geodetic latitude.

        Parameters
        ----------
        phi : float
            Geodetic latitude in radians.

        Returns
        -------
        float
            χ = π/2 - 2 atan(t(φ)) in radians (Snyder eq. 3-1).
        """
        return float(np.pi / 2 - 2.0 * np.arctan(self.t(phi)))

    def radius_of_curvature_meridian(self, phi: float) -> float:
        """Compute the radius of curvature in the meridian plane.

        Parameters
        ----------
        phi : float
            Geodetic latitude in radians.

        Returns
        -------
        float
            M = a(1 - e²) / (1 - e² sin²φ)^(3/2) in meters.
        """
        sin_lat = np.sin(phi)
        denominator = (1 - self.e2 * sin_lat**2) ** 1.5
        return float(self.a * (1 - self.e2) / denominator)

    def radius_of_curvature_prime_vertical(self, phi: float) -> float:
        """Compute the radius of curvature in the prime vertical.

        Parameters
        ----------
        phi : float
            Geodetic latitude in radians.

        Returns
        -------
        float
            N = a / (1 - e² sin²φ)^(1/2) in meters.
        """
        sin_lat = np.sin(phi)
        return float(self.a / np.sqrt(1 - self.e2 * sin_lat**2))


# =============================================================================
# Presets
# =============================================================================

WGS84 = Ellipsoid(
    a=GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    f=1.0 / GeodeticConstants.WGS84_INVERSE_FLATTENING.value,
    name="WGS84"
)

GRS80 = Ellipsoid(
    a=GeodeticConstants.GRS80_SEMI_MAJOR_AXIS.value,
    f=1.0 / GeodeticConstants.GRS80_INVERSE_FLATTENING.value,
    name="GRS80"
)

WGS72 = Ellipsoid(
    a=GeodeticConstants.WGS72_SEMI_MAJOR_AXIS.value,
    f=1.0 / GeodeticConstants.WGS72_INVERSE_FLATTENING.value,
    name="WGS72"
)

CLARKE1866 = Ellipsoid.from_axes(
    a=GeodeticConstants.CLARKE1866_SEMI_MAJOR_AXIS.value,
    b=GeodeticConstants.CLARKE1866_SEMI_MINOR_AXIS.value,
    name="clrk66"
)

BESSEL1841 = Ellipsoid(
    a=GeodeticConstants.BESSEL1841_SEMI_MAJOR_AXIS.value,
    f=1.0 / GeodeticConstants.BESSEL1841_INVERSE_FLATTENING.value,
    name="bessel"
)

INTERNATIONAL1924 = Ellipsoid(
    a=GeodeticConstants.INTERNATIONAL1924_SEMI_MAJOR_AXIS.value,
    f=1.0 / GeodeticConstants.INTERNATIONAL1924_INVERSE_FLATTENING.value,
    name="intl"
)

SPHERE = Ellipsoid(
    a=GeodeticConstants.SPHERE_RADIUS.value,
    f=0.0,
    name="sphere"
)

# Keyed by the PROJ `+ellps=` name of each ellipsoid
PRESETS: Dict[str, Ellipsoid] = {
    ellps.name: ellps
    for ellps in (WGS84, GRS80, WGS72, CLARKE1866, BESSEL1841, INTERNATIONAL1924, SPHERE)
}


def get_ellipsoid(name: str) -> Ellipsoid:
    """Look up a preset ellipsoid by its PROJ name.

    Parameters
    ----------
    name : str
        One of the keys of `PRESETS` (case-insensitive), e.g. 'WGS84',
        'clrk66', 'sphere'.

    Returns
    -------
    Ellipsoid
        The preset.

    Raises
    ------
    ConfigurationError
        If no preset has that name.
    """
    for key, ellps in PRESETS.items():
        if key.lower() == name.lower():
            return ellps
    raise ConfigurationError(
        f"Unknown ellipsoid '{name}'. Available: {sorted(PRESETS)}",
        parameter="name"
    )
