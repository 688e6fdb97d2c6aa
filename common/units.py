"""
Unit Handling for Projection Parameters.

Projection and ellipsoid constructors accept either bare numbers, which
are interpreted in the library's boundary units (decimal degrees for
angles, meters for lengths), or `pint` quantities carrying any compatible
unit. Quantities are converted once, at construction; the per-point
`project` / `inverse_project` calls work on plain floats only.

Example Usage
-------------
>>> from common.units import Q_, angle_in_degrees, length_in_meters
>>> angle_in_degrees(Q_(0.5, 'radian'), 'ref_lat')
28.64788975654116
>>> length_in_meters(Q_(6378.137, 'km'), 'a')
6378137.0
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.errors import ConfigurationError

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

# Boundary units of the library
ANGLE_UNIT = "degree"
LENGTH_UNIT = "meter"

Scalar = Union[float, int, pint.Quantity]


def _convert(value: Scalar, unit: str, name: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise ConfigurationError(
                f"Parameter '{name}' has incompatible units. "
                f"Expected {unit}, got {value.units}",
                parameter=name
            ) from e
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Parameter '{name}' must be a number or a quantity, got {value!r}",
            parameter=name
        ) from e


def angle_in_degrees(value: Scalar, name: str) -> float:
    """Convert an angle parameter to decimal degrees.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare number (already degrees) or an angular quantity.
    name : str
        Parameter name used in error messages.

    Returns
    -------
    float
        The angle in decimal degrees.

    Raises
    ------
    ConfigurationError
        If the quantity is not an angle or the value is not numeric.
    """
    return _convert(value, ANGLE_UNIT, name)


def length_in_meters(value: Scalar, name: str) -> float:
    """Convert a length parameter to meters.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare number (already meters) or a length quantity.
    name : str
        Parameter name used in error messages.

    Returns
    -------
    float
        The length in meters.

    Raises
    ------
    ConfigurationError
        If the quantity is not a length or the value is not numeric.
    """
    return _convert(value, LENGTH_UNIT, name)
