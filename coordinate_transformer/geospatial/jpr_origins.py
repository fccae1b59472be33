"""
Origins of the Japan Plane Rectangular Coordinate System.

The 19 zones (I to XIX) are fixed by MLIT Notice No. 9 (2002). Each zone is
a Gauss-Krüger projection whose origin is given below; x grows to the north
and y to the east of that origin.
"""

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np
from pyproj import CRS

# (longitude, latitude) of each origin in degrees and arc-minutes
_ORIGINS_DEG_MIN: Dict[int, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    1: ((129, 30), (33, 0)),
    2: ((131, 0), (33, 0)),
    3: ((132, 10), (36, 0)),
    4: ((133, 30), (33, 0)),
    5: ((134, 20), (36, 0)),
    6: ((136, 0), (36, 0)),
    7: ((137, 10), (36, 0)),
    8: ((138, 30), (36, 0)),
    9: ((139, 50), (36, 0)),
    10: ((140, 50), (40, 0)),
    11: ((140, 15), (44, 0)),
    12: ((142, 15), (44, 0)),
    13: ((144, 15), (44, 0)),
    14: ((142, 0), (26, 0)),
    15: ((127, 30), (26, 0)),
    16: ((124, 0), (26, 0)),
    17: ((131, 0), (26, 0)),
    18: ((136, 0), (20, 0)),
    19: ((154, 0), (26, 0)),
}

# EPSG code of "JGD2011 / Japan Plane Rectangular CS I" is 6669, XIX is 6687
_JGD2011_EPSG_BASE = 6668


def _to_radians(deg_min: Tuple[int, int]) -> float:
    degrees, minutes = deg_min
    return float(np.radians(degrees + minutes / 60.0))


class JprOrigin(IntEnum):
    """Zone of the Japan Plane Rectangular Coordinate System.

    Examples
    --------
    >>> lon0, lat0 = JprOrigin.IX.origin
    >>> round(float(np.degrees(lon0)), 4), round(float(np.degrees(lat0)), 4)
    (139.8333, 36.0)
    """
    I = 1
    II = 2
    III = 3
    IV = 4
    V = 5
    VI = 6
    VII = 7
    VIII = 8
    IX = 9
    X = 10
    XI = 11
    XII = 12
    XIII = 13
    XIV = 14
    XV = 15
    XVI = 16
    XVII = 17
    XVIII = 18
    XIX = 19

    @property
    def origin_longitude(self) -> float:
        """Longitude of the zone origin in radians."""
        return _ORIGIN_LONGITUDES[self]

    @property
    def origin_latitude(self) -> float:
        """Latitude of the zone origin in radians."""
        return _ORIGIN_LATITUDES[self]

    @property
    def origin(self) -> Tuple[float, float]:
        """(longitude, latitude) of the zone origin in radians."""
        return self.origin_longitude, self.origin_latitude

    @property
    def epsg_code(self) -> int:
        """EPSG code of the JGD2011 plane rectangular CRS of this zone."""
        return _JGD2011_EPSG_BASE + self.value

    @property
    def crs(self) -> CRS:
        """The equivalent pyproj CRS (JGD2011, GRS80)."""
        return CRS.from_epsg(self.epsg_code)


_ORIGIN_LONGITUDES: Dict[JprOrigin, float] = {
    JprOrigin(zone): _to_radians(lon) for zone, (lon, _) in _ORIGINS_DEG_MIN.items()
}
_ORIGIN_LATITUDES: Dict[JprOrigin, float] = {
    JprOrigin(zone): _to_radians(lat) for zone, (_, lat) in _ORIGINS_DEG_MIN.items()
}
