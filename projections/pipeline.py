"""
Conversion between two projections.

A `ConversionPipe` maps planar coordinates of a source projection to
planar coordinates of a target projection by going through geographic
coordinates: ``target.project(*source.inverse_project(x, y))``.
Using `LongitudeLatitude` on either side turns the pipe into a plain
forward or inverse projection.
"""

from dataclasses import dataclass
from typing import Tuple

from common.errors import ConfigurationError
from projections.base import Projection


@dataclass(frozen=True)
class ConversionPipe:
    """Pair of projections converting from `source` to `target`.

    Attributes
    ----------
    source : Projection
        Projection in whose planar system input points are given.
    target : Projection
        Projection in whose planar system output points are returned.

    Notes
    -----
    Both projections are immutable, so a pipe may be shared across
    threads. Errors raised by either stage propagate unchanged.
    """
    source: Projection
    target: Projection

    def __post_init__(self):
        for role in ("source", "target"):
            value = getattr(self, role)
            if not isinstance(value, Projection):
                raise ConfigurationError(
                    f"ConversionPipe {role} must be a Projection, got {type(value).__name__}",
                    parameter=role
                )

    def convert(self, x: float, y: float) -> Tuple[float, float]:
        """Convert a point from the source to the target planar system.

        Parameters
        ----------
        x, y : float
            Coordinates in the source projection.

        Returns
        -------
        Tuple[float, float]
            Coordinates in the target projection.
        """
        lon, lat = self.source.inverse_project(x, y)
        return self.target.project(lon, lat)

    def convert_unchecked(self, x: float, y: float) -> Tuple[float, float]:
        """`convert` using the unchecked stage of both projections."""
        lon, lat = self.source.inverse_project_unchecked(x, y)
        return self.target.project_unchecked(lon, lat)

    def invert(self) -> 'ConversionPipe':
        """Return the pipe converting in the opposite direction."""
        return ConversionPipe(source=self.target, target=self.source)
