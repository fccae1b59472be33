"""
Reference Constants for Coordinate Transformation.

This module provides the fixed numeric parameters used by every converter,
each with its uncertainty and source. All constants are in SI units unless
the unit field says otherwise.

References
----------
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
  Journal of Geodesy, 74(1), 128-133.
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Japan Plane Rectangular CS: MLIT Notice No. 9 (2002)
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A reference constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class PhysicalConstants:
    """Registry of constants used throughout the library.

    Earth Geometry (GRS80 / WGS84)
    ------------------------------
    GRS80 is the ellipsoid of JGD2000/JGD2011 and is the default for
    every conversion. WGS84 differs from it only in the flattening (the
    semi-minor axes differ by about 0.1 mm) and is kept for callers that
    need it explicitly.

    Japan Plane Rectangular CS
    --------------------------
    Scale factor on the origin meridian of each zone.

    Web Map Tiles
    -------------
    Spherical Mercator parameters of the standard 256 px tile pyramid.
    """

    # =========================================================================
    # Ellipsoid Parameters
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="GRS80 / WGS84",
        description="Semi-major axis (equatorial radius), shared by GRS80 and WGS84"
    )

    GRS80_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257222101,
        uncertainty=0.0,  # Derived from defining constants, fixed by convention
        unit="dimensionless",
        source="GRS80, Moritz (2000)",
        description="Inverse flattening 1/f of the GRS80 ellipsoid"
    )

    WGS84_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening 1/f of the WGS84 ellipsoid"
    )

    # =========================================================================
    # Japan Plane Rectangular Coordinate System
    # =========================================================================

    JPR_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.9999,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="MLIT Notice No. 9 (2002)",
        description="Scale factor m0 on the origin meridian of every JPR zone"
    )

    # =========================================================================
    # Web Mercator Tiles
    # =========================================================================

    MERCATOR_MAX_LATITUDE: Final[Constant] = Constant(
        value=85.05112878,
        uncertainty=1e-8,
        unit="degree",
        source="atan(sinh(pi)), spherical Web Mercator",
        description="Latitude at which the square Mercator world ends"
    )

    TILE_SIZE: Final[Constant] = Constant(
        value=256,
        uncertainty=0.0,
        unit="pixel",
        source="OGC WMTS / slippy map convention",
        description="Edge length of one map tile in pixels"
    )

    PIXEL_RESOLUTION_AT_ZOOM0: Final[Constant] = Constant(
        value=156543.04,
        uncertainty=0.01,
        unit="m/pixel",
        source="2 * pi * 6378137 / 256",
        description="Ground size of one pixel on the equator at zoom level 0"
    )
