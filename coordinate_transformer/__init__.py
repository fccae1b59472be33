"""
Coordinate transformer for Japanese geodesy and web maps.

Converts between ECEF, geodetic longitude/latitude, the Japan Plane
Rectangular Coordinate System and web map pixel coordinates. Angles are
radians, lengths meters, pixels integers.
"""

from coordinate_transformer.geospatial import (
    GRS80Ellipsoid,
    WGS84Ellipsoid,
    JprOrigin,
    ZoomLevel,
    llz2xyz,
    xyz2llz,
    ll2jpr,
    jpr2ll,
    ll2pixel,
    pixel2ll,
    pixel2tile,
    pixel_resolution,
    GeodeticPoint,
    GeocentricPoint,
    JprPoint,
    PixelPoint,
    Voxel,
)

__version__ = "0.1.0"

__all__ = [
    "GRS80Ellipsoid",
    "WGS84Ellipsoid",
    "JprOrigin",
    "ZoomLevel",
    "llz2xyz",
    "xyz2llz",
    "ll2jpr",
    "jpr2ll",
    "ll2pixel",
    "pixel2ll",
    "pixel2tile",
    "pixel_resolution",
    "GeodeticPoint",
    "GeocentricPoint",
    "JprPoint",
    "PixelPoint",
    "Voxel",
]
