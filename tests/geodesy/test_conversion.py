"""Tests for geographic <-> Cartesian conversion and surface distances."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from domain.geodesy.services import (
    EARTH_RADIUS_KM,
    cartesian_to_lat_lon,
    geo_to_point,
    lat_lon_to_cartesian,
    point_set_from_geo,
    point_to_geo,
    surface_distance_km,
)
from domain.geodesy.value_objects import GeoPoint


# ===========================================================================
# Geographic -> Cartesian
# ===========================================================================
def test_origin_meridian_on_equator():
    assert lat_lon_to_cartesian(0.0, 0.0) == (EARTH_RADIUS_KM, 0.0, 0.0)


def test_poles():
    north = lat_lon_to_cartesian(90.0, 0.0)
    south = lat_lon_to_cartesian(-90.0, 0.0)

    assert north == pytest.approx((0.0, 0.0, EARTH_RADIUS_KM), abs=1e-9)
    assert south == pytest.approx((0.0, 0.0, -EARTH_RADIUS_KM), abs=1e-9)


def test_converted_points_lie_on_sphere():
    for lat, lon in [(12.5, -60.0), (-45.0, 170.0), (89.9, 1.0)]:
        x, y, z = lat_lon_to_cartesian(lat, lon)
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(EARTH_RADIUS_KM)


@pytest.mark.parametrize(("lat", "lon"), [(90.5, 0.0), (-91.0, 0.0), (0.0, 181.0), (math.nan, 0.0)])
def test_invalid_coordinates_rejected(lat, lon):
    with pytest.raises(ValidationError):
        lat_lon_to_cartesian(lat, lon)


def test_point_set_from_geo_assigns_sequential_ids():
    geo = [GeoPoint(latitude=1.0, longitude=2.0), GeoPoint(latitude=-3.0, longitude=4.0)]

    points = point_set_from_geo(geo, start_id=5)

    assert points.ids() == (5, 6)
    assert points.points[1] == geo_to_point(6, geo[1])


def test_point_set_from_geo_empty():
    assert point_set_from_geo([]).is_empty()


# ===========================================================================
# Cartesian -> Geographic
# ===========================================================================
@pytest.mark.parametrize(
    ("lat", "lon"),
    [(0.0, 0.0), (45.0, 45.0), (-33.9, 151.2), (10.0, -170.0), (-89.0, 0.0), (60.0, -0.5)],
)
def test_round_trip(lat, lon):
    geo = cartesian_to_lat_lon(*lat_lon_to_cartesian(lat, lon))

    assert geo.latitude == pytest.approx(lat, abs=1e-9)
    assert geo.longitude == pytest.approx(lon, abs=1e-9)


def test_interior_point_projects_radially():
    """Grid candidates can lie inside the sphere; direction is what counts."""
    x, y, z = lat_lon_to_cartesian(30.0, 60.0)

    geo = cartesian_to_lat_lon(x / 2, y / 2, z / 2)

    assert geo.latitude == pytest.approx(30.0, abs=1e-9)
    assert geo.longitude == pytest.approx(60.0, abs=1e-9)


def test_origin_maps_to_zero():
    assert cartesian_to_lat_lon(0.0, 0.0, 0.0) == GeoPoint(latitude=0.0, longitude=0.0)


def test_point_to_geo():
    point = geo_to_point(1, GeoPoint(latitude=-20.0, longitude=-45.0))

    geo = point_to_geo(point)

    assert geo.latitude == pytest.approx(-20.0, abs=1e-9)
    assert geo.longitude == pytest.approx(-45.0, abs=1e-9)


# ===========================================================================
# Surface distance
# ===========================================================================
def test_quarter_circumference():
    distance = surface_distance_km(
        GeoPoint(latitude=0.0, longitude=0.0), GeoPoint(latitude=0.0, longitude=90.0)
    )

    assert distance == pytest.approx(math.pi / 2 * EARTH_RADIUS_KM, rel=1e-6)


def test_same_point_distance_is_zero():
    point = GeoPoint(latitude=12.0, longitude=34.0)

    assert surface_distance_km(point, point) == pytest.approx(0.0, abs=1e-9)


def test_surface_distance_exceeds_chord():
    a = GeoPoint(latitude=0.0, longitude=0.0)
    b = GeoPoint(latitude=40.0, longitude=30.0)
    pa = geo_to_point(1, a)
    pb = geo_to_point(2, b)
    chord = math.dist(pa.as_tuple(), pb.as_tuple())

    assert surface_distance_km(a, b) > chord
    # Arc length from the chord on the same sphere
    arc = 2 * EARTH_RADIUS_KM * math.asin(chord / (2 * EARTH_RADIUS_KM))
    assert surface_distance_km(a, b) == pytest.approx(arc, rel=1e-6)
