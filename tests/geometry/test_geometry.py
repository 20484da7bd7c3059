"""
Tests for analytic geometry over Vector.
"""

import math

import numpy as np
import pytest

from pylinear.core.exceptions import DegenerateInputError, UnsupportedOperationError
from pylinear.geometry import (
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
from pylinear.vector import Vector


def V(*values):
    return Vector(list(values))


# ═══════════════════════════════════════════════════════════════════════
# Distances and angles
# ═══════════════════════════════════════════════════════════════════════


class TestDistances:

    def test_points_2d(self):
        assert distance_points(V(0, 0), V(3, 4)) == 5.0

    def test_points_mixed_dimensions(self):
        assert distance_points(V(0, 0), V(0, 0, 12)) == 12.0

    def test_points_unsupported_dimension(self):
        with pytest.raises(UnsupportedOperationError):
            distance_points(V(1, 2, 3, 4), V(1, 2))

    def test_point_to_line_2d(self):
        line = Line(point=V(0, 0), direction=V(1, 0))
        assert distance_point_to_line(V(5, -2), line) == pytest.approx(2.0)

    def test_point_to_line_3d(self):
        line = Line(point=V(0, 0, 0), direction=V(1, 0, 0))
        assert distance_point_to_line(V(7, 3, 4), line) == pytest.approx(5.0)

    def test_point_on_line(self):
        line = Line(point=V(1, 1, 1), direction=V(1, 2, 3))
        assert distance_point_to_line(V(2, 3, 4), line) == pytest.approx(0.0, abs=1e-12)

    def test_point_to_line_zero_direction(self):
        with pytest.raises(DegenerateInputError):
            distance_point_to_line(V(1, 1, 1), Line(point=V(0, 0, 0), direction=V(0, 0, 0)))

    def test_point_to_plane(self):
        plane = Plane(point=V(0, 0, 0), normal=V(0, 0, 2))
        assert distance_point_to_plane(V(1, 2, -3), plane) == pytest.approx(3.0)

    def test_point_to_plane_offset(self):
        plane = Plane(point=V(0, 0, 1), normal=V(1, 1, 1))
        expected = abs(1 + 1 + 1 - 1) / math.sqrt(3)
        assert distance_point_to_plane(V(1, 1, 1), plane) == pytest.approx(expected)

    def test_angle_degrees(self):
        assert angle_between_vectors(V(1, 0), V(0, 1)) == pytest.approx(90.0)
        assert angle_between_vectors(V(1, 0), V(1, 1)) == pytest.approx(45.0)


# ═══════════════════════════════════════════════════════════════════════
# Areas, volumes and collinearity
# ═══════════════════════════════════════════════════════════════════════


class TestAreasVolumes:

    def test_triangle_area_2d(self):
        assert triangle_area(V(0, 0), V(4, 0), V(0, 3)) == 6.0

    def test_triangle_area_3d(self):
        assert triangle_area(V(0, 0, 0), V(1, 0, 0), V(0, 1, 0)) == 0.5

    def test_triangle_area_orientation_independent(self):
        assert triangle_area(V(0, 0), V(0, 3), V(4, 0)) == 6.0

    def test_tetrahedron_volume(self):
        volume = tetrahedron_volume(V(0, 0, 0), V(1, 0, 0), V(0, 1, 0), V(0, 0, 1))
        assert volume == pytest.approx(1 / 6)

    def test_flat_tetrahedron(self):
        volume = tetrahedron_volume(V(0, 0, 0), V(1, 0, 0), V(0, 1, 0), V(1, 1, 0))
        assert volume == 0.0

    def test_collinear_2d(self):
        assert are_collinear(V(0, 0), V(1, 1), V(2, 2))
        assert not are_collinear(V(0, 0), V(1, 0), V(0, 1))

    def test_collinear_3d(self):
        assert are_collinear(V(0, 0, 0), V(1, 2, 3), V(2, 4, 6))
        assert not are_collinear(V(0, 0, 0), V(1, 0, 0), V(0, 0, 1))


# ═══════════════════════════════════════════════════════════════════════
# Intersections and triangles
# ═══════════════════════════════════════════════════════════════════════


class TestIntersections:

    def test_lines_2d(self):
        line1 = Line(point=V(0, 0), direction=V(1, 1))
        line2 = Line(point=V(0, 2), direction=V(1, -1))
        assert intersect_lines_2d(line1, line2) == V(1, 1)

    def test_parallel_lines(self):
        line1 = Line(point=V(0, 0), direction=V(1, 2))
        line2 = Line(point=V(1, 0), direction=V(-2, -4))
        assert intersect_lines_2d(line1, line2) is None

    def test_lines_2d_rejects_3d(self):
        line = Line(point=V(0, 0, 0), direction=V(1, 0, 0))
        with pytest.raises(UnsupportedOperationError, match="only defined for 2D"):
            intersect_lines_2d(line, line)

    def test_line_plane(self):
        line = Line(point=V(1, 1, 0), direction=V(0, 0, 1))
        plane = Plane(point=V(0, 0, 5), normal=V(0, 0, 1))
        assert intersect_line_plane(line, plane) == V(1, 1, 5)

    def test_line_parallel_to_plane(self):
        line = Line(point=V(0, 0, 1), direction=V(1, 0, 0))
        plane = Plane(point=V(0, 0, 0), normal=V(0, 0, 1))
        assert intersect_line_plane(line, plane) is None


class TestTriangles:

    @pytest.mark.parametrize("point, inside", [
        ((1, 1), True),
        ((0, 0), True),
        ((2, 0), True),
        ((3, 3), False),
        ((-1, 1), False),
    ])
    def test_point_in_triangle(self, point, inside):
        assert is_point_in_triangle_2d(V(*point), V(0, 0), V(4, 0), V(0, 4)) is inside

    def test_degenerate_triangle_contains_nothing(self):
        assert not is_point_in_triangle_2d(V(1, 1), V(0, 0), V(1, 1), V(2, 2))

    def test_circumcenter(self):
        center = circumcenter(V(0, 0), V(2, 0), V(0, 2))
        assert center == V(1, 1)

    def test_circumcenter_equidistant(self, rng):
        p1, p2, p3 = (Vector(rng.standard_normal(2)) for _ in range(3))
        center = circumcenter(p1, p2, p3)
        r = center.distance_to(p1)
        assert center.distance_to(p2) == pytest.approx(r)
        assert center.distance_to(p3) == pytest.approx(r)

    def test_circumcenter_collinear(self):
        with pytest.raises(DegenerateInputError, match="collinear"):
            circumcenter(V(0, 0), V(1, 1), V(2, 2))

    def test_centroid(self):
        np.testing.assert_allclose(
            centroid(V(0, 0), V(3, 0), V(0, 3)).to_numpy(), [1.0, 1.0]
        )

    def test_centroid_mixed_dimensions(self):
        np.testing.assert_allclose(
            centroid(V(0, 0), V(3, 0, 0), V(0, 0, 3)).to_numpy(), [1.0, 0.0, 1.0]
        )


# ═══════════════════════════════════════════════════════════════════════
# Transformations
# ═══════════════════════════════════════════════════════════════════════


class TestTransformations:

    def test_reflect_across_x_axis(self):
        line = Line(point=V(0, 0), direction=V(1, 0))
        np.testing.assert_allclose(
            reflect_point_across_line_2d(V(1, 1), line).to_numpy(), [1.0, -1.0]
        )

    def test_reflect_across_diagonal(self):
        line = Line(point=V(0, 0), direction=V(1, 1))
        np.testing.assert_allclose(
            reflect_point_across_line_2d(V(2, 0), line).to_numpy(), [0.0, 2.0], atol=1e-12
        )

    def test_reflection_is_involution(self, rng):
        line = Line(point=Vector(rng.standard_normal(2)), direction=Vector(rng.standard_normal(2)))
        p = Vector(rng.standard_normal(2))
        twice = reflect_point_across_line_2d(reflect_point_across_line_2d(p, line), line)
        np.testing.assert_allclose(twice.to_numpy(), p.to_numpy(), atol=1e-12)

    def test_rotate_quarter_turn(self):
        np.testing.assert_allclose(
            rotate_point_2d(V(1, 0), math.pi / 2).to_numpy(), [0.0, 1.0], atol=1e-15
        )

    def test_rotation_preserves_norm(self, rng):
        p = Vector(rng.standard_normal(2))
        assert rotate_point_2d(p, 1.234).magnitude() == pytest.approx(p.magnitude())

    def test_rotate_rejects_3d(self):
        with pytest.raises(UnsupportedOperationError):
            rotate_point_2d(V(1, 0, 0), 1.0)
