"""
Oblique Longitude-Latitude (Rotated Pole) transformation.

Rotates the graticule so that the pole of the coordinate system sits at
an arbitrary point of the Earth. Regional weather models use this to
put their area of interest on the rotated equator, where meridians are
nearly parallel.

Unlike the other projections in this package, the planar side is not
metric: `project` returns rotated (longitude, latitude) in degrees and
`inverse_project` expects the same. The rotation is defined on the
sphere and does not depend on an ellipsoid.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395,
  pp. 29-32, eqs. 5-7 to 5-10b.
"""

from typing import Any, Dict, Tuple
import numpy as np

from common.units import Scalar
from projections.base import (
    Projection,
    angle_parameter,
    validate_geographic,
    wrap_longitude_deg,
)


class ObliqueLonLat(Projection):
    """Rotated-pole longitude/latitude.

    Parameters
    ----------
    pole_lon, pole_lat : float or pint.Quantity
        Position of the rotated pole in geographic degrees.
    central_lon : float or pint.Quantity
        Central meridian of the geographic system (default: 0).

    Examples
    --------
    With the pole left at the North Pole the rotation is the identity:

    >>> lon, lat = ObliqueLonLat(0.0, 90.0).project(25.0, 45.0)
    >>> print(f"{lon:.6f} {lat:.6f}")
    25.000000 45.000000
    """

    def __init__(
        self,
        pole_lon: Scalar,
        pole_lat: Scalar,
        central_lon: Scalar = 0.0
    ):
        self._pole_lon = angle_parameter(pole_lon, "pole_lon", -180.0, 180.0)
        self._pole_lat = angle_parameter(pole_lat, "pole_lat", -90.0, 90.0)
        self._central_lon = angle_parameter(central_lon, "central_lon", -180.0, 180.0)

        phi_p = np.radians(self._pole_lat)
        self._lambda_p = float(np.radians(self._pole_lon))
        self._sin_phi_p = float(np.sin(phi_p))
        self._cos_phi_p = float(np.cos(phi_p))
        self._freeze()

    @property
    def name(self) -> str:
        return f"Oblique Longitude/Latitude (pole={self._pole_lon}°, {self._pole_lat}°)"

    @property
    def proj4_string(self) -> str:
        return (
            f"+proj=ob_tran +o_proj=latlon +o_lat_p={self._pole_lat} "
            f"+o_lon_p={self._pole_lon} +lon_0={self._central_lon} +ellps=sphere +no_defs"
        )

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "pole_lon": self._pole_lon,
            "pole_lat": self._pole_lat,
            "central_lon": self._central_lon,
        }

    def _check_planar_domain(self, x: float, y: float) -> None:
        validate_geographic(x, y)

    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        lam = np.radians(lon - self._central_lon)
        phi = np.radians(lat)

        cos_lam = np.cos(lam)
        cos_phi = np.cos(phi)
        sin_phi = np.sin(phi)

        # Eq. 5-8b
        lam_rot = np.arctan2(
            cos_phi * np.sin(lam),
            self._sin_phi_p * cos_phi * cos_lam + self._cos_phi_p * sin_phi
        ) + self._lambda_p
        # Eq. 5-7
        phi_rot = np.arcsin(
            np.clip(self._sin_phi_p * sin_phi - self._cos_phi_p * cos_phi * cos_lam, -1.0, 1.0)
        )

        return wrap_longitude_deg(float(np.degrees(lam_rot))), float(np.degrees(phi_rot))

    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        lam_rot = np.radians(x) - self._lambda_p
        phi_rot = np.radians(y)

        cos_lam_rot = np.cos(lam_rot)
        cos_phi_rot = np.cos(phi_rot)
        sin_phi_rot = np.sin(phi_rot)

        # Eq. 5-10b
        lam = np.arctan2(
            cos_phi_rot * np.sin(lam_rot),
            self._sin_phi_p * cos_phi_rot * cos_lam_rot - self._cos_phi_p * sin_phi_rot
        )
        # Eq. 5-9
        phi = np.arcsin(
            np.clip(self._sin_phi_p * sin_phi_rot + self._cos_phi_p * cos_phi_rot * cos_lam_rot, -1.0, 1.0)
        )

        return wrap_longitude_deg(float(np.degrees(lam)) + self._central_lon), float(np.degrees(phi))
