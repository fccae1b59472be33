"""
Unit Handling at the API Boundary.

The converters work on bare floats: radians for angles, meters for lengths.
Callers holding degrees (or feet, or arc-seconds) can hand a `pint` quantity
to the typed points instead; it is converted here once, at the boundary,
and never travels further into the numeric code.

Example Usage
-------------
>>> from coordinate_transformer.common.units import Q_, to_radians
>>> round(to_radians(Q_(180, 'degree')), 6)
3.141593
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

Number = Union[int, float]


def _magnitude_in(value: Union[Number, pint.Quantity], unit: str, what: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"{what} has incompatible units. "
                f"Expected {unit}, got {value.units}"
            ) from e
    return float(value)


def to_radians(value: Union[Number, pint.Quantity]) -> float:
    """Return an angle in radians.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare numbers are taken to be radians already.

    Returns
    -------
    float
        The angle in radians.

    Raises
    ------
    ValueError
        If a quantity is not an angle.
    """
    return _magnitude_in(value, "radian", "Angle")


def to_meters(value: Union[Number, pint.Quantity]) -> float:
    """Return a length in meters.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare numbers are taken to be meters already.

    Returns
    -------
    float
        The length in meters.

    Raises
    ------
    ValueError
        If a quantity is not a length.
    """
    return _magnitude_in(value, "meter", "Length")

