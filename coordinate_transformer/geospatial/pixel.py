"""
Web Map Pixel Coordinates.

Spherical (Web) Mercator projection discretised into the pixel grid of the
standard tile pyramid: at zoom level z the world is a square of
256 * 2**z pixels, x growing to the east from the antimeridian and y growing
to the south from the northern limit of the projection.

Clamping
--------
The square world ends at latitude ±85.05112878°. `ll2pixel` clamps latitude
into that band before projecting and clamps the resulting pixel into
[0, world_size - 1], so every input in the geodetic domain maps to a valid
pixel. Longitude π lands in the last column, latitude +85.05112878° in row
0 and -85.05112878° in the last row. Clamping is logged at DEBUG level.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np

from coordinate_transformer.common.constants import PhysicalConstants
from coordinate_transformer.common.logging_config import get_logger

logger = get_logger(__name__)


class ZoomLevel(IntEnum):
    """Zoom level of the tile pyramid.

    The maximum is 24, beyond which pixel indices no longer fit in 32 bits
    (see https://github.com/mapbox/geojson-vt/issues/87).
    """
    LV0 = 0
    LV1 = 1
    LV2 = 2
    LV3 = 3
    LV4 = 4
    LV5 = 5
    LV6 = 6
    LV7 = 7
    LV8 = 8
    LV9 = 9
    LV10 = 10
    LV11 = 11
    LV12 = 12
    LV13 = 13
    LV14 = 14
    LV15 = 15
    LV16 = 16
    LV17 = 17
    LV18 = 18
    LV19 = 19
    LV20 = 20
    LV21 = 21
    LV22 = 22
    LV23 = 23
    LV24 = 24

    @property
    def world_size(self) -> int:
        """Width (and height) of the world in pixels at this zoom."""
        return int(PhysicalConstants.TILE_SIZE.value) * 2 ** self.value


@dataclass(frozen=True)
class TileConfig:
    """Configuration of the pixel grid.

    Attributes
    ----------
    tile_size : int
        Edge length of one tile in pixels.
    max_latitude_deg : float
        Northern (and, negated, southern) limit of the Mercator world.
    """
    tile_size: int = int(PhysicalConstants.TILE_SIZE.value)
    max_latitude_deg: float = PhysicalConstants.MERCATOR_MAX_LATITUDE.value

    def world_size(self, zoom: ZoomLevel) -> int:
        return self.tile_size * 2 ** int(zoom)


def _clamp_pixel(value: float, world_size: int) -> int:
    return int(min(max(np.floor(value), 0), world_size - 1))


def ll2pixel(
    ll: Tuple[float, float],
    zoom: ZoomLevel,
    config: TileConfig = TileConfig()
) -> Tuple[int, int]:
    """Convert geodetic coordinates to pixel coordinates.

    Parameters
    ----------
    ll : Tuple[float, float]
        (longitude, latitude) in radians.
    zoom : ZoomLevel
        Zoom level of the pixel grid.
    config : TileConfig
        Tile size and Mercator latitude limit.

    Returns
    -------
    Tuple[int, int]
        (x, y) of the pixel containing the point.

    Examples
    --------
    >>> ll2pixel((np.radians(139.7649308), np.radians(35.6812405)), ZoomLevel.LV21)
    (476868027, 211407949)
    """
    lon, lat = ll

    world_size = config.world_size(zoom)
    half_world = world_size / 2
    lat_limit = np.radians(config.max_latitude_deg)

    clamped_lat = float(np.clip(lat, -lat_limit, lat_limit))
    if clamped_lat != lat:
        logger.debug(
            f"Latitude {lat:.10f} rad clamped to {clamped_lat:.10f} rad "
            f"for Mercator projection at zoom {int(zoom)}"
        )

    x = half_world * (lon / np.pi + 1)
    y = (half_world / np.pi) * (
        np.arctanh(np.sin(lat_limit)) - np.arctanh(np.sin(clamped_lat))
    )

    pixel = (_clamp_pixel(x, world_size), _clamp_pixel(y, world_size))
    if pixel != (np.floor(x), np.floor(y)):
        logger.debug(f"Pixel ({x:.3f}, {y:.3f}) clamped to {pixel} at zoom {int(zoom)}")

    return pixel


def pixel2ll(
    pixel: Tuple[int, int],
    zoom: ZoomLevel,
    config: TileConfig = TileConfig()
) -> Tuple[float, float]:
    """Convert pixel coordinates to geodetic coordinates.

    Parameters
    ----------
    pixel : Tuple[int, int]
        (x, y) pixel coordinates.
    zoom : ZoomLevel
        Zoom level of the pixel grid.
    config : TileConfig
        Tile size and Mercator latitude limit.

    Returns
    -------
    Tuple[float, float]
        (longitude, latitude) in radians of the pixel's north-west corner.
    """
    x, y = pixel

    half_world = config.world_size(zoom) / 2
    lat_limit = np.radians(config.max_latitude_deg)

    lon = np.pi * (x / half_world - 1)
    lat = np.arcsin(np.tanh(-np.pi * y / half_world + np.arctanh(np.sin(lat_limit))))

    return float(lon), float(lat)


def pixel_resolution(lat: float, zoom: ZoomLevel) -> float:
    """Ground length of one pixel.

    Parameters
    ----------
    lat : float
        Latitude in radians.
    zoom : ZoomLevel
        Zoom level of the pixel grid.

    Returns
    -------
    float
        Meters per pixel; tends to 0 towards the poles.
    """
    return float(
        PhysicalConstants.PIXEL_RESOLUTION_AT_ZOOM0.value * np.cos(lat) / 2 ** int(zoom)
    )


def pixel2tile(
    pixel: Tuple[int, int],
    config: TileConfig = TileConfig()
) -> Tuple[int, int]:
    """Tile containing a pixel.

    Parameters
    ----------
    pixel : Tuple[int, int]
        (x, y) pixel coordinates.
    config : TileConfig
        Tile size.

    Returns
    -------
    Tuple[int, int]
        (tile_x, tile_y) at the same zoom level as the pixel.
    """
    x, y = pixel
    return x // config.tile_size, y // config.tile_size
