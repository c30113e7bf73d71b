"""Spatial Bounded Context.

Responsible for points in 3-D Cartesian space and queries over them:
- Value Objects: Point, PointSet, BoundingBox3D, ProximityGraph
- Indexes: KdTree (pruned), LinearScanIndex (oracle)
- Services: euclidean_distance, brute_force_range_query, build_proximity_graph
"""
