"""
Unit tests for web map pixel coordinates.
"""

import logging

import numpy as np
import pytest

from coordinate_transformer.geospatial.pixel import (
    TileConfig,
    ZoomLevel,
    ll2pixel,
    pixel2ll,
    pixel2tile,
    pixel_resolution,
)

TOKYO_STATION = (np.radians(139.7649308), np.radians(35.6812405))
TOKYO_STATION_PIXEL_Z21 = (476868027, 211407949)

MAX_LAT = np.radians(85.05112878)


def test_zoom_levels():
    assert len(ZoomLevel) == 25
    assert ZoomLevel.LV0.world_size == 256
    assert ZoomLevel.LV21.world_size == 256 * 2**21
    assert ZoomLevel.LV24.world_size == 2**32


def test_ll2pixel_known_point():
    assert ll2pixel(TOKYO_STATION, ZoomLevel.LV21) == TOKYO_STATION_PIXEL_Z21


def test_pixel2ll_known_point():
    lon, lat = pixel2ll(TOKYO_STATION_PIXEL_Z21, ZoomLevel.LV21)

    assert lon == pytest.approx(TOKYO_STATION[0], abs=1e-7)
    assert lat == pytest.approx(TOKYO_STATION[1], abs=1e-7)


@pytest.mark.parametrize("zoom", [ZoomLevel.LV0, ZoomLevel.LV5, ZoomLevel.LV12,
                                  ZoomLevel.LV21, ZoomLevel.LV24])
@pytest.mark.parametrize("lon_deg, lat_deg", [
    (139.7649308, 35.6812405),
    (-73.9857, 40.7484),
    (0.0, 0.0),
    (151.2153, -33.8568),
    (-179.9, 84.9),
    (179.9, -84.9),
])
def test_pixel_roundtrip_within_one_pixel(zoom, lon_deg, lat_deg):
    lon0, lat0 = np.radians(lon_deg), np.radians(lat_deg)
    pixel_angle = 2 * np.pi / zoom.world_size

    lon, lat = pixel2ll(ll2pixel((lon0, lat0), zoom), zoom)

    # The north-west corner of the containing pixel is returned
    assert 0.0 <= lon0 - lon + 1e-12 <= pixel_angle + 2e-12
    assert 0.0 <= lat - lat0 + 1e-12 <= pixel_angle + 2e-12


@pytest.mark.parametrize("zoom", [ZoomLevel.LV0, ZoomLevel.LV10, ZoomLevel.LV21])
def test_latitude_is_clamped_to_mercator_range(zoom):
    last = zoom.world_size - 1

    assert ll2pixel((0.0, MAX_LAT), zoom) == (zoom.world_size // 2, 0)
    assert ll2pixel((0.0, np.radians(89.0)), zoom) == (zoom.world_size // 2, 0)
    assert ll2pixel((0.0, np.pi / 2), zoom) == (zoom.world_size // 2, 0)
    assert ll2pixel((0.0, -np.radians(89.0)), zoom)[1] == last
    assert ll2pixel((0.0, -np.pi / 2), zoom)[1] == last


def test_antimeridian_maps_into_the_grid():
    zoom = ZoomLevel.LV3

    assert ll2pixel((-np.pi, 0.0), zoom)[0] == 0
    assert ll2pixel((np.pi, 0.0), zoom)[0] == zoom.world_size - 1


def test_clamping_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="coordinate_transformer"):
        ll2pixel((0.0, np.radians(89.0)), ZoomLevel.LV4)

    assert "clamped" in caplog.text


def test_custom_tile_config():
    config = TileConfig(tile_size=512)

    x, y = ll2pixel((0.0, 0.0), ZoomLevel.LV1, config)

    assert (x, y) == (512, 512)
    assert pixel2tile((x, y), config) == (1, 1)


def test_pixel2tile():
    assert pixel2tile(TOKYO_STATION_PIXEL_Z21) == (1862765, 825812)
    assert pixel2tile((255, 256)) == (0, 1)


def test_pixel_resolution_at_equator():
    equator_length_m = 40075.0 * 1000.0
    zoom = ZoomLevel.LV17

    resolution = pixel_resolution(0.0, zoom)

    assert resolution == pytest.approx(equator_length_m / (2**17 * 256), rel=1e-5)


def test_pixel_resolution_decreases_with_zoom():
    lat = np.radians(35.0)
    resolutions = [pixel_resolution(lat, zoom) for zoom in ZoomLevel]

    assert all(a > b for a, b in zip(resolutions, resolutions[1:]))


def test_pixel_resolution_decreases_with_latitude():
    resolutions = [
        pixel_resolution(np.radians(lat_deg), ZoomLevel.LV10)
        for lat_deg in range(0, 90)
    ]

    assert all(a > b for a, b in zip(resolutions, resolutions[1:]))
    assert pixel_resolution(np.radians(-30.0), ZoomLevel.LV10) == pytest.approx(
        pixel_resolution(np.radians(30.0), ZoomLevel.LV10)
    )
    assert pixel_resolution(np.pi / 2, ZoomLevel.LV10) == pytest.approx(0.0, abs=1e-9)
