"""
Map projections, conversion pipes and batch dispatch.

Every projection implements the `Projection` contract: ``project(lon, lat)``
and ``inverse_project(x, y)`` with geographic coordinates in degrees,
plus unchecked variants that skip validation.
"""

from projections.base import Projection
from projections.lon_lat import LongitudeLatitude
from projections.lambert_conformal_conic import LambertConformalConic
from projections.azimuthal_equidistant import AzimuthalEquidistant
from projections.modified_azimuthal_equidistant import ModifiedAzimuthalEquidistant
from projections.equidistant_cylindrical import EquidistantCylindrical
from projections.oblique_lon_lat import ObliqueLonLat
from projections.pipeline import ConversionPipe
from projections.batch import project_batch, inverse_project_batch, convert_batch
from projections.distortion import TissotIndicatrix, compute_tissot_indicatrix

__all__ = [
    'Projection',
    'LongitudeLatitude',
    'LambertConformalConic',
    'AzimuthalEquidistant',
    'ModifiedAzimuthalEquidistant',
    'EquidistantCylindrical',
    'ObliqueLonLat',
    'ConversionPipe',
    'project_batch',
    'inverse_project_batch',
    'convert_batch',
    'TissotIndicatrix',
    'compute_tissot_indicatrix',
]
