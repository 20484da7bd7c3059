"""
Analytic geometry built on the Vector API.

Points are Vectors (2D or 3D); Line and Plane are frozen records of a
point plus a direction or normal.

Example:
    >>> from pylinear.vector import Vector
    >>> from pylinear.geometry import Plane, distance_point_to_plane
    >>> plane = Plane(point=Vector([0, 0, 0]), normal=Vector([0, 0, 2]))
    >>> distance_point_to_plane(Vector([1, 1, 5]), plane)
    5.0
"""

from pylinear.geometry.geometry import (
    Line,
    Plane,
    angle_between_vectors,
    are_collinear,
    centroid,
    circumcenter,
    distance_point_to_line,
    distance_point_to_plane,
    distance_points,
    intersect_line_plane,
    intersect_lines_2d,
    is_point_in_triangle_2d,
    reflect_point_across_line_2d,
    rotate_point_2d,
    tetrahedron_volume,
    triangle_area,
)

__all__ = [
    "Line",
    "Plane",
    "angle_between_vectors",
    "are_collinear",
    "centroid",
    "circumcenter",
    "distance_point_to_line",
    "distance_point_to_plane",
    "distance_points",
    "intersect_line_plane",
    "intersect_lines_2d",
    "is_point_in_triangle_2d",
    "reflect_point_across_line_2d",
    "rotate_point_2d",
    "tetrahedron_volume",
    "triangle_area",
]
