"""
Typed Coordinates.

Value types that carry their reference frame (zone or zoom level) together
with their numbers and convert themselves by delegating to the free
functions of this package. They hold no state beyond their fields and add
no behaviour of their own.

Angles are radians and lengths meters. Constructors also accept `pint`
quantities, e.g. ``GeodeticPoint(Q_(139.77, "degree"), Q_(35.68, "degree"))``.

Examples
--------
>>> from coordinate_transformer.geospatial.jpr_origins import JprOrigin
>>> tokyo = GeodeticPoint.from_degrees(139.7649308, 35.6812405)
>>> tokyo.to_pixel(ZoomLevel.LV21).to_tuple()
(476868027, 211407949)
>>> jpr = tokyo.to_jpr(JprOrigin.IX)
>>> jpr.origin.name
'IX'
"""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
import pint

from coordinate_transformer.common.units import to_meters, to_radians
from coordinate_transformer.geospatial.coordinate_models import llz2xyz, xyz2llz
from coordinate_transformer.geospatial.jpr_origins import JprOrigin
from coordinate_transformer.geospatial.pixel import (
    ZoomLevel,
    ll2pixel,
    pixel2ll,
    pixel2tile,
    pixel_resolution,
)
from coordinate_transformer.geospatial.projections import jpr2ll, ll2jpr

Angle = Union[float, pint.Quantity]
Length = Union[float, pint.Quantity]


def _check_pixel_range(x: int, y: int, zoom: ZoomLevel) -> None:
    for name, value in (("x", x), ("y", y)):
        if not 0 <= value < zoom.world_size:
            raise ValueError(
                f"Pixel {name}={value} outside [0, {zoom.world_size}) "
                f"at zoom {int(zoom)}"
            )


@dataclass(frozen=True)
class GeodeticPoint:
    """A point given by longitude, latitude and ellipsoidal height.

    Attributes
    ----------
    longitude : float
        Longitude in RADIANS. Range: [-π, π].
    latitude : float
        Latitude in RADIANS. Range: [-π/2, π/2].
    height : float
        Height above the ellipsoid in METERS.

    Notes
    -----
    Out-of-range angles raise ValueError; they are never wrapped. -π is
    accepted as the antimeridian so that pixel column 0 round-trips.
    """
    longitude: Angle
    latitude: Angle
    height: Length = 0.0

    def __post_init__(self):
        longitude = to_radians(self.longitude)
        latitude = to_radians(self.latitude)

        if not -np.pi / 2 <= latitude <= np.pi / 2:
            raise ValueError(
                f"Latitude {latitude} rad out of range [-π/2, π/2]. "
                f"Did you pass degrees instead of radians?"
            )
        if not -np.pi <= longitude <= np.pi:
            raise ValueError(
                f"Longitude {longitude} rad out of range [-π, π]. "
                f"Did you pass degrees instead of radians?"
            )

        object.__setattr__(self, "longitude", longitude)
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "height", to_meters(self.height))

    @classmethod
    def from_degrees(cls, lon_deg: float, lat_deg: float, height: float = 0.0) -> 'GeodeticPoint':
        """Create a point from degrees (convenience constructor)."""
        return cls(float(np.radians(lon_deg)), float(np.radians(lat_deg)), height)

    def to_degrees(self) -> Tuple[float, float]:
        """(longitude, latitude) in degrees, for display."""
        return float(np.degrees(self.longitude)), float(np.degrees(self.latitude))

    def to_tuple(self) -> Tuple[float, float]:
        """(longitude, latitude) in radians."""
        return self.longitude, self.latitude

    def to_jpr(self, origin: JprOrigin) -> 'JprPoint':
        y, x = ll2jpr(self.to_tuple(), origin)
        return JprPoint(x=x, y=y, origin=origin)

    def to_pixel(self, zoom: ZoomLevel) -> 'PixelPoint':
        x, y = ll2pixel(self.to_tuple(), zoom)
        return PixelPoint(x=x, y=y, zoom=zoom)

    def to_geocentric(self) -> 'GeocentricPoint':
        x, y, z = llz2xyz(self.to_tuple(), self.height)
        return GeocentricPoint(x=x, y=y, z=z)


@dataclass(frozen=True)
class GeocentricPoint:
    """A point in Earth-Centered Earth-Fixed coordinates (meters)."""
    x: Length
    y: Length
    z: Length

    def __post_init__(self):
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, to_meters(getattr(self, name)))

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_geodetic(self) -> GeodeticPoint:
        """Geodetic point, height included."""
        (lon, lat), height = xyz2llz(self.to_tuple())
        return GeodeticPoint(lon, lat, height)

    def to_jpr(self, origin: JprOrigin) -> 'JprPoint':
        """Plane coordinates of the point; the height is dropped."""
        return self.to_geodetic().to_jpr(origin)

    def to_pixel(self, zoom: ZoomLevel) -> 'PixelPoint':
        """Pixel containing the point; the height is dropped."""
        return self.to_geodetic().to_pixel(zoom)


@dataclass(frozen=True)
class JprPoint:
    """A point in the Japan Plane Rectangular Coordinate System.

    Attributes
    ----------
    x : float
        Northing from the zone origin in METERS.
    y : float
        Easting from the zone origin in METERS.
    origin : JprOrigin
        Zone the coordinates belong to.
    """
    x: Length
    y: Length
    origin: JprOrigin

    def __post_init__(self):
        object.__setattr__(self, "x", to_meters(self.x))
        object.__setattr__(self, "y", to_meters(self.y))
        object.__setattr__(self, "origin", JprOrigin(self.origin))

    def to_tuple(self) -> Tuple[float, float]:
        """(y, x), the argument order of `jpr2ll`."""
        return self.y, self.x

    def to_geodetic(self) -> GeodeticPoint:
        lon, lat = jpr2ll(self.to_tuple(), self.origin)
        return GeodeticPoint(lon, lat)

    def to_pixel(self, zoom: ZoomLevel) -> 'PixelPoint':
        return self.to_geodetic().to_pixel(zoom)

    def to_geocentric(self, height: Length = 0.0) -> GeocentricPoint:
        lon, lat = jpr2ll(self.to_tuple(), self.origin)
        return GeodeticPoint(lon, lat, height).to_geocentric()


@dataclass(frozen=True)
class PixelPoint:
    """A pixel of the web map pixel grid.

    Attributes
    ----------
    x : int
        Column, counted eastwards from the antimeridian.
    y : int
        Row, counted southwards from the northern Mercator limit.
    zoom : ZoomLevel
        Zoom level the pixel belongs to.
    """
    x: int
    y: int
    zoom: ZoomLevel

    def __post_init__(self):
        zoom = ZoomLevel(self.zoom)
        object.__setattr__(self, "zoom", zoom)
        _check_pixel_range(self.x, self.y, zoom)

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def to_geodetic(self) -> GeodeticPoint:
        """North-west corner of the pixel."""
        lon, lat = pixel2ll(self.to_tuple(), self.zoom)
        return GeodeticPoint(lon, lat)

    def to_jpr(self, origin: JprOrigin) -> JprPoint:
        return self.to_geodetic().to_jpr(origin)

    def to_geocentric(self, height: Length = 0.0) -> GeocentricPoint:
        lon, lat = pixel2ll(self.to_tuple(), self.zoom)
        return GeodeticPoint(lon, lat, height).to_geocentric()

    def to_tile(self) -> Tuple[int, int]:
        """(tile_x, tile_y) of the tile containing this pixel."""
        return pixel2tile(self.to_tuple())

    @property
    def resolution(self) -> float:
        """Meters per pixel at this pixel's latitude."""
        _, lat = pixel2ll(self.to_tuple(), self.zoom)
        return pixel_resolution(lat, self.zoom)


@dataclass(frozen=True)
class Voxel:
    """A pixel extended with a vertical index.

    The height of the voxel is ``z * resolution`` meters; choosing
    `resolution` equal to the pixel resolution gives cube-shaped voxels.

    Attributes
    ----------
    x, y : int
        Pixel column and row.
    z : int
        Vertical index.
    resolution : float
        Vertical size of one step in METERS.
    zoom : ZoomLevel
        Zoom level of the pixel grid.
    """
    x: int
    y: int
    z: int
    resolution: float
    zoom: ZoomLevel

    def __post_init__(self):
        zoom = ZoomLevel(self.zoom)
        object.__setattr__(self, "zoom", zoom)
        _check_pixel_range(self.x, self.y, zoom)

    def to_tuple(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.z

    @property
    def altitude(self) -> float:
        """Height of the voxel in meters."""
        return self.z * self.resolution

    def to_pixel(self) -> PixelPoint:
        return PixelPoint(x=self.x, y=self.y, zoom=self.zoom)

    def to_geodetic(self) -> GeodeticPoint:
        """North-west corner of the voxel's pixel, at the voxel's altitude."""
        lon, lat = pixel2ll((self.x, self.y), self.zoom)
        return GeodeticPoint(lon, lat, self.altitude)

    def to_jpr(self, origin: JprOrigin) -> Tuple[JprPoint, float]:
        """Plane coordinates and altitude in meters."""
        return self.to_geodetic().to_jpr(origin), self.altitude

    def to_geocentric(self) -> GeocentricPoint:
        return self.to_geodetic().to_geocentric()
