"""
Unit tests for the typed coordinates.
"""

import dataclasses

import numpy as np
import pytest

from coordinate_transformer.common.units import Q_
from coordinate_transformer.geospatial.coordinate_models import llz2xyz
from coordinate_transformer.geospatial.jpr_origins import JprOrigin
from coordinate_transformer.geospatial.pixel import ZoomLevel, pixel_resolution
from coordinate_transformer.geospatial.points import (
    GeocentricPoint,
    GeodeticPoint,
    JprPoint,
    PixelPoint,
    Voxel,
)
from coordinate_transformer.geospatial.projections import ll2jpr


@pytest.fixture
def tokyo_station():
    return GeodeticPoint.from_degrees(139.7649308, 35.6812405, 40.0)


def test_geodetic_point_from_degrees(tokyo_station):
    lon_deg, lat_deg = tokyo_station.to_degrees()

    assert lon_deg == pytest.approx(139.7649308)
    assert lat_deg == pytest.approx(35.6812405)
    assert tokyo_station.height == 40.0


def test_geodetic_point_accepts_quantities():
    point = GeodeticPoint(Q_(139.5, "degree"), Q_(35.0, "degree"), Q_(1.2, "kilometer"))

    assert point.longitude == pytest.approx(np.radians(139.5))
    assert point.latitude == pytest.approx(np.radians(35.0))
    assert point.height == pytest.approx(1200.0)


@pytest.mark.parametrize("lon, lat", [(139.7, 35.6), (0.0, 1.6), (0.0, -1.6), (3.2, 0.0)])
def test_geodetic_point_rejects_out_of_range(lon, lat):
    with pytest.raises(ValueError):
        GeodeticPoint(lon, lat)


def test_geodetic_point_rejects_wrong_units():
    with pytest.raises(ValueError, match="incompatible units"):
        GeodeticPoint(Q_(1.0, "meter"), 0.0)


def test_points_are_immutable_values(tokyo_station):
    with pytest.raises(dataclasses.FrozenInstanceError):
        tokyo_station.latitude = 0.0

    assert tokyo_station == GeodeticPoint.from_degrees(139.7649308, 35.6812405, 40.0)
    assert len({tokyo_station, GeodeticPoint.from_degrees(139.7649308, 35.6812405, 40.0)}) == 1


def test_geodetic_to_pixel(tokyo_station):
    pixel = tokyo_station.to_pixel(ZoomLevel.LV21)

    assert pixel.to_tuple() == (476868027, 211407949)
    assert pixel.zoom is ZoomLevel.LV21


def test_geodetic_to_jpr_and_back(tokyo_station):
    jpr = tokyo_station.to_jpr(JprOrigin.IX)

    y, x = ll2jpr(tokyo_station.to_tuple(), JprOrigin.IX)
    assert jpr.to_tuple() == (y, x)
    assert jpr.origin is JprOrigin.IX

    back = jpr.to_geodetic()
    assert back.longitude == pytest.approx(tokyo_station.longitude, abs=1e-9)
    assert back.latitude == pytest.approx(tokyo_station.latitude, abs=1e-9)
    assert back.height == 0.0


def test_geodetic_to_geocentric_and_back(tokyo_station):
    ecef = tokyo_station.to_geocentric()

    assert ecef.to_tuple() == llz2xyz(tokyo_station.to_tuple(), 40.0)

    back = ecef.to_geodetic()
    assert back.longitude == pytest.approx(tokyo_station.longitude, abs=1e-9)
    assert back.latitude == pytest.approx(tokyo_station.latitude, abs=1e-9)
    assert back.height == pytest.approx(40.0, abs=1e-6)


def test_geocentric_point_shortcuts(tokyo_station):
    ecef = tokyo_station.to_geocentric()

    assert ecef.to_pixel(ZoomLevel.LV21).to_tuple() == (476868027, 211407949)
    jpr = ecef.to_jpr(JprOrigin.IX)
    expected = tokyo_station.to_jpr(JprOrigin.IX)
    assert jpr.x == pytest.approx(expected.x, abs=1e-6)
    assert jpr.y == pytest.approx(expected.y, abs=1e-6)


def test_jpr_point_tuple_order():
    jpr = JprPoint(x=11573.375, y=22694.980, origin=JprOrigin.IX)

    assert jpr.to_tuple() == (22694.980, 11573.375)


def test_jpr_point_conversions():
    jpr = JprPoint(x=11573.375, y=22694.980, origin=9)

    assert jpr.origin is JprOrigin.IX

    geodetic = jpr.to_geodetic()
    assert jpr.to_pixel(ZoomLevel.LV18) == geodetic.to_pixel(ZoomLevel.LV18)

    ecef = jpr.to_geocentric(Q_(25.0, "meter"))
    assert ecef.to_geodetic().height == pytest.approx(25.0, abs=1e-6)


def test_pixel_point_validates_range():
    with pytest.raises(ValueError):
        PixelPoint(256, 0, ZoomLevel.LV0)
    with pytest.raises(ValueError):
        PixelPoint(0, -1, ZoomLevel.LV0)
    with pytest.raises(ValueError):
        PixelPoint(0, 0, 25)


def test_jpr_point_far_outside_its_zone_still_converts():
    jpr = JprPoint(x=0.0, y=3_000_000.0, origin=JprOrigin.XIX)

    geodetic = jpr.to_geodetic()

    assert np.isfinite(geodetic.longitude) and np.isfinite(geodetic.latitude)
    assert -np.pi < geodetic.longitude <= np.pi
    assert jpr.to_pixel(ZoomLevel.LV10) == geodetic.to_pixel(ZoomLevel.LV10)


def test_pixel_point_conversions():
    pixel = PixelPoint(476868027, 211407949, ZoomLevel.LV21)

    geodetic = pixel.to_geodetic()
    assert np.degrees(geodetic.longitude) == pytest.approx(139.7649308, abs=1e-5)
    assert np.degrees(geodetic.latitude) == pytest.approx(35.6812405, abs=1e-5)

    assert pixel.to_tile() == (1862765, 825812)
    assert pixel.resolution == pytest.approx(pixel_resolution(geodetic.latitude, ZoomLevel.LV21))
    assert pixel.to_jpr(JprOrigin.IX).origin is JprOrigin.IX
    assert pixel.to_geocentric(10.0).to_geodetic().height == pytest.approx(10.0, abs=1e-6)


def test_pixel_corner_of_the_world():
    geodetic = PixelPoint(0, 0, ZoomLevel.LV0).to_geodetic()

    assert geodetic.longitude == pytest.approx(-np.pi)
    assert np.degrees(geodetic.latitude) == pytest.approx(85.05112878, abs=1e-8)


def test_voxel():
    voxel = Voxel(x=476868027, y=211407949, z=10, resolution=2.5, zoom=ZoomLevel.LV21)

    assert voxel.to_tuple() == (476868027, 211407949, 10)
    assert voxel.altitude == 25.0
    assert voxel.to_pixel() == PixelPoint(476868027, 211407949, ZoomLevel.LV21)

    geodetic = voxel.to_geodetic()
    assert geodetic.height == 25.0

    jpr, altitude = voxel.to_jpr(JprOrigin.IX)
    assert altitude == 25.0
    assert jpr == geodetic.to_jpr(JprOrigin.IX)

    assert voxel.to_geocentric().to_geodetic().height == pytest.approx(25.0, abs=1e-6)


def test_voxel_validates_pixel_range():
    with pytest.raises(ValueError, match="outside"):
        Voxel(x=256, y=0, z=0, resolution=1.0, zoom=ZoomLevel.LV0)
    with pytest.raises(ValueError, match="outside"):
        Voxel(x=0, y=-1, z=0, resolution=1.0, zoom=ZoomLevel.LV0)
