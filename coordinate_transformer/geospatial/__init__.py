"""
Geospatial core of the coordinate transformer.

All conversions between coordinate frames originate from this package.

This package provides:
- GRS80/WGS84 ellipsoid models and ECEF conversion
- The 19 origins of the Japan Plane Rectangular Coordinate System
- Gauss-Krüger projection onto those zones
- Web Mercator pixel coordinates of the tile pyramid
- Typed points that carry their reference frame
"""

from coordinate_transformer.geospatial.coordinate_models import (
    EllipsoidParameters,
    EcefSolverConfig,
    GRS80Ellipsoid,
    WGS84Ellipsoid,
    llz2xyz,
    xyz2llz,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

from coordinate_transformer.geospatial.jpr_origins import JprOrigin

from coordinate_transformer.geospatial.projections import (
    GaussKruger,
    ll2jpr,
    jpr2ll,
)

from coordinate_transformer.geospatial.pixel import (
    TileConfig,
    ZoomLevel,
    ll2pixel,
    pixel2ll,
    pixel2tile,
    pixel_resolution,
)

from coordinate_transformer.geospatial.points import (
    GeodeticPoint,
    GeocentricPoint,
    JprPoint,
    PixelPoint,
    Voxel,
)

__all__ = [
    # Ellipsoid and ECEF
    "EllipsoidParameters",
    "EcefSolverConfig",
    "GRS80Ellipsoid",
    "WGS84Ellipsoid",
    "llz2xyz",
    "xyz2llz",
    "radius_of_curvature_meridian",
    "radius_of_curvature_prime_vertical",
    # Plane rectangular
    "JprOrigin",
    "GaussKruger",
    "ll2jpr",
    "jpr2ll",
    # Pixels
    "TileConfig",
    "ZoomLevel",
    "ll2pixel",
    "pixel2ll",
    "pixel2tile",
    "pixel_resolution",
    # Typed points
    "GeodeticPoint",
    "GeocentricPoint",
    "JprPoint",
    "PixelPoint",
    "Voxel",
]
