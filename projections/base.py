"""
Projection Capability.

Every concrete projection implements the same two-operation contract:

- ``project(lon, lat) -> (x, y)``: geographic to planar.
- ``inverse_project(x, y) -> (lon, lat)``: planar to geographic.

Geographic coordinates are decimal degrees at this boundary; planar
coordinates are in the linear unit of the projection's ellipsoid (meters
for all presets). Internally every variant works in radians.

Checked and Unchecked Operations
--------------------------------
`project` / `inverse_project` validate their inputs, run the variant's
equations and refuse to return NaN or infinite values, raising
`DomainError` (or `ConvergenceError` for an iterative inverse) instead.
`project_unchecked` / `inverse_project_unchecked` run the bare equations
and return whatever they produce; they exist for callers that have
already validated their data and want to skip the checks.

Thread Safety
-------------
Projections are immutable: all parameters and derived constants are
computed once in ``__init__`` and attribute assignment is blocked
afterwards. No method keeps per-call state on the instance, so one
instance may be used from any number of threads without locking.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple
import numpy as np

from common.errors import ConfigurationError, DomainError
from common.units import Scalar, angle_in_degrees
from geospatial.ellipsoids import Ellipsoid, PRESETS


def angle_parameter(
    value: Scalar,
    name: str,
    low: float,
    high: float,
    include_high: bool = True
) -> float:
    """Convert and range-check an angular construction parameter.

    Parameters
    ----------
    value : float or pint.Quantity
        Angle in degrees, or an angular quantity.
    name : str
        Parameter name used in error messages.
    low, high : float
        Allowed range in degrees; `low` is always inclusive.
    include_high : bool
        Whether `high` itself is allowed.

    Returns
    -------
    float
        The angle in degrees.

    Raises
    ------
    ConfigurationError
        If the value is not finite or lies outside the range.
    """
    degrees = angle_in_degrees(value, name)
    if not np.isfinite(degrees):
        raise ConfigurationError(
            f"Parameter '{name}' must be finite, got {degrees}",
            parameter=name,
            value=degrees
        )
    above = degrees > high if include_high else degrees >= high
    if degrees < low or above:
        closing = "]" if include_high else ")"
        raise ConfigurationError(
            f"Parameter '{name}'={degrees} is out of range [{low}, {high}{closing}",
            parameter=name,
            value=degrees
        )
    return degrees


def require_ellipsoid(ellipsoid: Any) -> Ellipsoid:
    """Raise `ConfigurationError` unless `ellipsoid` is an `Ellipsoid`."""
    if not isinstance(ellipsoid, Ellipsoid):
        raise ConfigurationError(
            f"ellipsoid must be an Ellipsoid, got {type(ellipsoid).__name__}",
            parameter="ellipsoid"
        )
    return ellipsoid


def ellipsoid_proj4(ellipsoid: Ellipsoid) -> str:
    """PROJ.4 ellipsoid definition: a preset name or explicit axes."""
    if PRESETS.get(ellipsoid.name) == ellipsoid:
        return f"+ellps={ellipsoid.name}"
    return f"+a={ellipsoid.a!r} +b={ellipsoid.b!r}"


def wrap_longitude_rad(lam: float) -> float:
    """Wrap a longitude difference into (-π, π].

    Values already in range are returned untouched, so no rounding is
    introduced for the common case.
    """
    if -np.pi < lam <= np.pi:
        return lam
    return float(np.pi - np.mod(np.pi - lam, 2 * np.pi))


def wrap_longitude_deg(lon: float) -> float:
    """Wrap a longitude into (-180, 180] degrees."""
    if -180.0 < lon <= 180.0:
        return lon
    return float(180.0 - np.mod(180.0 - lon, 360.0))


def ensure_finite(name: str, value: float) -> None:
    """Raise `DomainError` if a coordinate is NaN or infinite."""
    if not np.isfinite(value):
        raise DomainError(name, value, "coordinate must be finite")


def validate_geographic(lon: float, lat: float) -> None:
    """Check that a (lon, lat) pair is a valid geographic position.

    Parameters
    ----------
    lon, lat : float
        Longitude and latitude in degrees.

    Raises
    ------
    DomainError
        If either value is not finite, latitude lies outside [-90, 90]
        or longitude lies outside [-180, 180].
    """
    ensure_finite("lon", lon)
    ensure_finite("lat", lat)
    if not -90.0 <= lat <= 90.0:
        raise DomainError("lat", lat, "latitude must lie within [-90, 90] degrees")
    if not -180.0 <= lon <= 180.0:
        raise DomainError("lon", lon, "longitude must lie within [-180, 180] degrees")


class Projection(ABC):
    """Abstract base class for map projections.

    All projections in this library implement this interface so that
    they can be used interchangeably, in particular as the source or
    target of a `ConversionPipe`.

    Subclasses compute everything they need in ``__init__`` and finish
    by calling ``self._freeze()``.
    """

    _frozen: bool = False

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise AttributeError(
                f"{type(self).__name__} is immutable; cannot set '{name}'"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")

    # -------------------------------------------------------------------------
    # Description
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string of the equivalent PROJ projection."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> Dict[str, Any]:
        """Construction parameters, as passed to ``__init__`` (degrees)."""
        pass

    @property
    def ellipsoid(self) -> Optional[Ellipsoid]:
        """Reference ellipsoid, or None for ellipsoid-independent variants."""
        return None

    @property
    def preserves_angles(self) -> bool:
        """Whether this is a conformal projection."""
        return False

    @property
    def preserves_area(self) -> bool:
        """Whether this is an equal-area projection."""
        return False

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
        return f"{type(self).__name__}({params})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.parameters == other.parameters

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self.parameters.items())))

    # -------------------------------------------------------------------------
    # Equations (implemented by each variant)
    # -------------------------------------------------------------------------

    @abstractmethod
    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        """Forward equations without any validation.

        Parameters
        ----------
        lon, lat : float
            Geographic coordinates in degrees.

        Returns
        -------
        Tuple[float, float]
            (x, y) planar coordinates; may be NaN or infinite.
        """
        pass

    @abstractmethod
    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        """Inverse equations without any validation.

        Parameters
        ----------
        x, y : float
            Planar coordinates.

        Returns
        -------
        Tuple[float, float]
            (lon, lat) in degrees; may be NaN, infinite or unconverged.
        """
        pass

    def _check_geographic_domain(self, lon: float, lat: float) -> None:
        """Variant-specific forward domain restrictions (default: none)."""

    def _check_planar_domain(self, x: float, y: float) -> None:
        """Variant-specific inverse domain restrictions (default: none)."""

    def _inverse_project_checked(self, x: float, y: float) -> Tuple[float, float]:
        """Inverse equations that may raise `ConvergenceError`."""
        return self.inverse_project_unchecked(x, y)

    # -------------------------------------------------------------------------
    # Public contract
    # -------------------------------------------------------------------------

    def project(self, lon: float, lat: float) -> Tuple[float, float]:
        """Transform geographic coordinates to planar coordinates.

        Parameters
        ----------
        lon, lat : float
            Longitude and latitude in decimal degrees.

        Returns
        -------
        Tuple[float, float]
            (x, y) planar coordinates.

        Raises
        ------
        DomainError
            If the input lies outside the projection's domain or the
            result would not be finite.
        """
        lon = float(lon)
        lat = float(lat)
        validate_geographic(lon, lat)
        self._check_geographic_domain(lon, lat)

        with np.errstate(all="ignore"):
            x, y = self.project_unchecked(lon, lat)

        if not (np.isfinite(x) and np.isfinite(y)):
            raise DomainError(
                "(lon, lat)", (lon, lat), f"{self.name} is undefined at this point"
            )
        return x, y

    def inverse_project(self, x: float, y: float) -> Tuple[float, float]:
        """Transform planar coordinates back to geographic coordinates.

        Parameters
        ----------
        x, y : float
            Planar coordinates.

        Returns
        -------
        Tuple[float, float]
            (lon, lat) in decimal degrees.

        Raises
        ------
        DomainError
            If the input lies outside the projection's planar domain or
            the result would not be finite.
        ConvergenceError
            If an iterative inverse did not converge.
        """
        x = float(x)
        y = float(y)
        ensure_finite("x", x)
        ensure_finite("y", y)
        self._check_planar_domain(x, y)

        with np.errstate(all="ignore"):
            lon, lat = self._inverse_project_checked(x, y)

        if not (np.isfinite(lon) and np.isfinite(lat)):
            raise DomainError(
                "(x, y)", (x, y), f"{self.name} inverse is undefined at this point"
            )
        return lon, lat

    def pipe_to(self, target: 'Projection') -> 'ConversionPipe':
        """Create a `ConversionPipe` from this projection to `target`.

        Parameters
        ----------
        target : Projection
            Projection whose planar system the pipe converts into.

        Returns
        -------
        ConversionPipe
            Pipe with this projection as source.
        """
        from projections.pipeline import ConversionPipe

        return ConversionPipe(self, target)
