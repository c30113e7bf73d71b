"""Geodesy Bounded Context - Domain Services.

Conversions between geographic coordinates and Earth-centred Cartesian
coordinates on a sphere of radius EARTH_RADIUS_KM. Cartesian values are in
kilometres, so view radii handed to the spatial context are kilometres too.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from pyproj import Geod

from domain.geodesy.value_objects import GeoPoint
from domain.spatial.value_objects import Point, PointSet

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EARTH_RADIUS_KM = 6371.0  # mean Earth radius, sphere model

# Geodesics on the same sphere (pyproj expects metres)
_geod = Geod(a=EARTH_RADIUS_KM * 1000.0, f=0.0)


# ---------------------------------------------------------------------------
# Geographic -> Cartesian
# ---------------------------------------------------------------------------
def lat_lon_to_cartesian(latitude: float, longitude: float) -> tuple[float, float, float]:
    """Return (x, y, z) in km for a latitude/longitude in degrees.

    Raises:
        ValueError: If latitude/longitude are outside their valid ranges
    """
    geo = GeoPoint(latitude=latitude, longitude=longitude)
    lat = math.radians(geo.latitude)
    lon = math.radians(geo.longitude)
    return (
        EARTH_RADIUS_KM * math.cos(lat) * math.cos(lon),
        EARTH_RADIUS_KM * math.cos(lat) * math.sin(lon),
        EARTH_RADIUS_KM * math.sin(lat),
    )


def geo_to_point(point_id: int, geo: GeoPoint) -> Point:
    """Convert a GeoPoint into an identified Cartesian Point."""
    x, y, z = lat_lon_to_cartesian(geo.latitude, geo.longitude)
    return Point(id=point_id, x=x, y=y, z=z)


def point_set_from_geo(geo_points: Iterable[GeoPoint], start_id: int = 1) -> PointSet:
    """Build a PointSet from geographic points, numbering ids from start_id."""
    return PointSet(
        points=tuple(
            geo_to_point(start_id + i, geo) for i, geo in enumerate(geo_points)
        )
    )


# ---------------------------------------------------------------------------
# Cartesian -> Geographic
# ---------------------------------------------------------------------------
def cartesian_to_lat_lon(x: float, y: float, z: float) -> GeoPoint:
    """Project a Cartesian position radially onto the sphere.

    Uses atan2(z, hypot(x, y)) for latitude: identical to asin(z / R) for
    points on the sphere, and still well defined for positions inside it
    (grid search candidates). The origin maps to (0, 0).
    """
    latitude = math.degrees(math.atan2(z, math.hypot(x, y)))
    longitude = math.degrees(math.atan2(y, x))
    return GeoPoint(latitude=latitude, longitude=longitude)


def point_to_geo(point: Point) -> GeoPoint:
    return cartesian_to_lat_lon(point.x, point.y, point.z)


# ---------------------------------------------------------------------------
# Surface Distance
# ---------------------------------------------------------------------------
def surface_distance_km(start: GeoPoint, end: GeoPoint) -> float:
    """Great-circle distance in km on the EARTH_RADIUS_KM sphere.

    Cartesian view radii are chord lengths; this is the matching distance
    along the surface, for reporting.
    """
    _, _, distance_m = _geod.inv(
        start.longitude, start.latitude, end.longitude, end.latitude
    )
    return float(abs(distance_m)) / 1000.0
