"""
Analytic geometry over the Vector API.

Points are Vectors of dimension 2 or 3. Where an operation accepts both,
2D points are lifted to 3D with z = 0 when needed. Every computation goes
through the public Vector operations (subtract, dot, cross, magnitude,
normalize, project_onto).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.core.exceptions import DegenerateInputError, UnsupportedOperationError
from pylinear.vector import Vector


@dataclass(frozen=True)
class Line:
    """Line through `point` along `direction` (2D or 3D)."""
    point: Vector
    direction: Vector


@dataclass(frozen=True)
class Plane:
    """Plane through `point` with normal vector `normal`."""
    point: Vector
    normal: Vector


def _lift(p: Vector) -> Vector:
    """2D -> 3D with z = 0; 3D unchanged."""
    if p.dimension == 3:
        return p
    if p.dimension == 2:
        return Vector([p[0], p[1], 0.0])
    raise UnsupportedOperationError(
        f"Geometry supports 2D and 3D points, got dimension {p.dimension}",
        operation='geometry',
        shape=(p.dimension,),
    )


def _all_2d(*vectors: Vector) -> bool:
    return all(v.dimension == 2 for v in vectors)


def _require_2d(operation: str, *vectors: Vector) -> None:
    if not _all_2d(*vectors):
        raise UnsupportedOperationError(
            f"{operation} is only defined for 2D points, "
            f"got dimensions {[v.dimension for v in vectors]}",
            operation=operation,
            shape=tuple(v.dimension for v in vectors),
        )


def _cross_2d(u1: float, u2: float, v1: float, v2: float) -> float:
    """z component of (u1, u2, 0) x (v1, v2, 0)."""
    return u1 * v2 - u2 * v1


# === Distances ===

def distance_points(p1: Vector, p2: Vector) -> float:
    """Euclidean distance; mixed 2D/3D points are compared in 3D."""
    if p1.dimension != p2.dimension:
        p1, p2 = _lift(p1), _lift(p2)
    return p1.distance_to(p2)


def distance_point_to_line(point: Vector, line: Line) -> float:
    """
    Shortest distance from a point to an infinite line.

    2D: magnitude of the component of (point - line.point) perpendicular
    to the direction. 3D: |w x d| / |d|.

    Raises:
        DegenerateInputError: If the direction is the zero vector
    """
    if _all_2d(point, line.point, line.direction):
        w = point.subtract(line.point)
        return w.subtract(w.project_onto(line.direction)).magnitude()

    direction = _lift(line.direction)
    length = direction.magnitude()
    if length == 0:
        raise DegenerateInputError(
            "Line direction is the zero vector",
            operation='distance_point_to_line',
            value=length,
        )
    w = _lift(point).subtract(_lift(line.point))
    return w.cross(direction).magnitude() / length


def distance_point_to_plane(point: Vector, plane: Plane) -> float:
    """|(point - plane.point) . unit(normal)|."""
    w = _lift(point).subtract(_lift(plane.point))
    return abs(w.dot(_lift(plane.normal).normalize()))


def angle_between_vectors(v1: Vector, v2: Vector) -> float:
    """Angle in degrees."""
    return math.degrees(v1.angle_to(v2))


# === Areas and volumes ===

def triangle_area(p1: Vector, p2: Vector, p3: Vector) -> float:
    """Area of the triangle p1 p2 p3 (shoelace in 2D, |u x v| / 2 in 3D)."""
    if _all_2d(p1, p2, p3):
        u = p2.subtract(p1)
        v = p3.subtract(p1)
        return 0.5 * abs(_cross_2d(u[0], u[1], v[0], v[1]))

    u = _lift(p2).subtract(_lift(p1))
    v = _lift(p3).subtract(_lift(p1))
    return 0.5 * u.cross(v).magnitude()


def tetrahedron_volume(p1: Vector, p2: Vector, p3: Vector, p4: Vector) -> float:
    """|v1 . (v2 x v3)| / 6 with edges from p1."""
    origin = _lift(p1)
    v1 = _lift(p2).subtract(origin)
    v2 = _lift(p3).subtract(origin)
    v3 = _lift(p4).subtract(origin)
    return abs(v1.dot(v2.cross(v3))) / 6


def are_collinear(p1: Vector, p2: Vector, p3: Vector, tolerance: float = ZERO_TOLERANCE) -> bool:
    """True if the three points lie on one line."""
    if _all_2d(p1, p2, p3):
        u = p2.subtract(p1)
        v = p3.subtract(p1)
        return abs(_cross_2d(u[0], u[1], v[0], v[1])) < tolerance

    u = _lift(p2).subtract(_lift(p1))
    v = _lift(p3).subtract(_lift(p1))
    return u.cross(v).magnitude() < tolerance


# === Intersections ===

def intersect_lines_2d(line1: Line, line2: Line) -> Vector | None:
    """
    Intersection point of two 2D lines, or None when they are parallel.

    Solves p1 + t d1 = p2 + s d2 for t by Cramer's rule.
    """
    _require_2d('intersect_lines_2d', line1.point, line1.direction, line2.point, line2.direction)

    d1, d2 = line1.direction, line2.direction
    det = _cross_2d(d1[0], d1[1], d2[0], d2[1])
    if abs(det) < ZERO_TOLERANCE:
        return None

    delta = line2.point.subtract(line1.point)
    t = _cross_2d(delta[0], delta[1], d2[0], d2[1]) / det
    return line1.point.add(d1.multiply_scalar(t))


def intersect_line_plane(line: Line, plane: Plane) -> Vector | None:
    """
    Intersection point of a line and a plane, or None when the line is
    parallel to the plane.

    t = ((plane.point - line.point) . n) / (d . n)
    """
    direction = _lift(line.direction)
    normal = _lift(plane.normal)
    origin = _lift(line.point)

    denominator = direction.dot(normal)
    if abs(denominator) < ZERO_TOLERANCE:
        return None

    t = _lift(plane.point).subtract(origin).dot(normal) / denominator
    return origin.add(direction.multiply_scalar(t))


# === Triangles ===

def is_point_in_triangle_2d(point: Vector, p1: Vector, p2: Vector, p3: Vector) -> bool:
    """
    Barycentric containment test, boundary included.

    Degenerate (collinear) triangles contain no points.
    """
    _require_2d('is_point_in_triangle_2d', point, p1, p2, p3)

    denom = (p2[1] - p3[1]) * (p1[0] - p3[0]) + (p3[0] - p2[0]) * (p1[1] - p3[1])
    if abs(denom) < ZERO_TOLERANCE:
        return False

    a = ((p2[1] - p3[1]) * (point[0] - p3[0]) + (p3[0] - p2[0]) * (point[1] - p3[1])) / denom
    b = ((p3[1] - p1[1]) * (point[0] - p3[0]) + (p1[0] - p3[0]) * (point[1] - p3[1])) / denom
    c = 1 - a - b
    return a >= 0 and b >= 0 and c >= 0


def circumcenter(p1: Vector, p2: Vector, p3: Vector) -> Vector:
    """
    Center of the circle through three 2D points.

    Raises:
        DegenerateInputError: If the points are collinear
    """
    _require_2d('circumcenter', p1, p2, p3)

    ax, ay = p1[0], p1[1]
    bx, by = p2[0], p2[1]
    cx, cy = p3[0], p3[1]

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if abs(d) < ZERO_TOLERANCE:
        raise DegenerateInputError(
            "Points are collinear - no circumcenter exists",
            operation='circumcenter',
            value=d,
        )

    a2 = p1.dot(p1)
    b2 = p2.dot(p2)
    c2 = p3.dot(p3)
    ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    return Vector([ux, uy])


def centroid(p1: Vector, p2: Vector, p3: Vector) -> Vector:
    """Mean of the three vertices."""
    if not (p1.dimension == p2.dimension == p3.dimension):
        p1, p2, p3 = _lift(p1), _lift(p2), _lift(p3)
    return p1.add(p2).add(p3).multiply_scalar(1 / 3)


# === Transformations ===

def reflect_point_across_line_2d(point: Vector, line: Line) -> Vector:
    """Mirror image of a 2D point across a 2D line."""
    _require_2d('reflect_point_across_line_2d', point, line.point, line.direction)

    normal = Vector([-line.direction[1], line.direction[0]]).normalize()
    signed_distance = point.subtract(line.point).dot(normal)
    return point.add(normal.multiply_scalar(-2 * signed_distance))


def rotate_point_2d(point: Vector, angle: float) -> Vector:
    """Counter-clockwise rotation about the origin by `angle` radians."""
    _require_2d('rotate_point_2d', point)

    cos = math.cos(angle)
    sin = math.sin(angle)
    x, y = point[0], point[1]
    return Vector([x * cos - y * sin, x * sin + y * cos])
