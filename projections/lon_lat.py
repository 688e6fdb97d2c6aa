"""
Longitude-Latitude (identity) projection.

A trivial projection that does not project anything: the "planar"
system is the geographic system itself. It lets geographic coordinates
take part in a `ConversionPipe` like any other projection, e.g.
``LongitudeLatitude().pipe_to(lcc)`` is a forward LCC projection.
"""

from typing import Any, Dict, Tuple

from projections.base import Projection, validate_geographic


class LongitudeLatitude(Projection):
    """Identity projection on (longitude, latitude) in degrees.

    Both directions return the input pair unchanged, bit for bit. The only
    validation is that the pair is a valid geographic position.
    """

    def __init__(self):
        self._freeze()

    @property
    def name(self) -> str:
        return "Longitude/Latitude"

    @property
    def proj4_string(self) -> str:
        return "+proj=longlat +ellps=WGS84 +no_defs"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {}

    def project_unchecked(self, lon: float, lat: float) -> Tuple[float, float]:
        return lon, lat

    def inverse_project_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        return x, y

    def _check_planar_domain(self, x: float, y: float) -> None:
        validate_geographic(x, y)
