"""Geodesy Bounded Context.

Responsible for moving between the Earth's surface and Cartesian space:
- Value Objects: GeoPoint
- Services: lat_lon_to_cartesian, cartesian_to_lat_lon, point_set_from_geo,
  surface_distance_km
"""
