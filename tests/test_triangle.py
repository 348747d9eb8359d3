from fractions import Fraction

import pytest

from exactgeom import distance, intersection, intersects
from exactgeom.coplanar import CoplanarTriangles
from exactgeom.errors import DegenerateGeometryError
from exactgeom.line import Line
from exactgeom.plane import Plane
from exactgeom.point import Point
from exactgeom.precision import RoundingMode
from exactgeom.ray import Ray
from exactgeom.segment import LineSegment
from exactgeom.triangle import Triangle
from exactgeom.vector import Vector

OOM = -3
RM = RoundingMode.HALF_EVEN

F = Fraction


def pt(x, y, z):
    return Point.of(x, y, z)


def tri(a, b, c):
    return Triangle(pt(*a), pt(*b), pt(*c))


T = tri((0, 0, 0), (2, 0, 0), (0, 2, 0))


class TestTriangle:
    """construction, measures and the median centroid"""

    def test_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            tri((0, 0, 0), (1, 1, 0), (3, 3, 0))

    def test_centroid(self):
        assert T.centroid() == pt(F(2, 3), F(2, 3), 0)
        odd = tri((1, 2, 3), (-4, 0, 7), (5, 5, -1))
        assert odd.centroid() == pt(F(2, 3), F(7, 3), 3)

    def test_edges_and_midpoints(self):
        assert T.pq.equals(LineSegment(pt(0, 0, 0), pt(2, 0, 0)), OOM, RM)
        assert T.qr.equals(LineSegment(pt(2, 0, 0), pt(0, 2, 0)), OOM, RM)
        assert T.rp.equals(LineSegment(pt(0, 2, 0), pt(0, 0, 0)), OOM, RM)
        assert T.mpq == pt(1, 0, 0)
        assert T.mqr == pt(1, 1, 0)
        assert T.mrp == pt(0, 1, 0)

    def test_measures(self):
        assert T.area(OOM, RM) == 2
        assert T.area(OOM, RM) >= 0
        assert T.perimeter(OOM, RM) == F(6828, 1000)
        assert tri((0, 0, 0), (1, 0, 0), (0, 1, 1)).area(OOM, RM) == F(707, 1000)
        assert tri((0, 0, 0), (3, 0, 0), (0, 4, 0)).perimeter(OOM, RM) == 12

    def test_equals(self):
        assert T.equals(tri((0, 2, 0), (0, 0, 0), (2, 0, 0)), OOM, RM)
        assert not T.equals(tri((0, 2, 0), (0, 0, 0), (3, 0, 0)), OOM, RM)
        assert not T.equals(T.plane, OOM, RM)

    def test_transforms(self):
        moved = T.translate(Vector(1, 1, 1))
        assert moved.centroid() == pt(F(5, 3), F(5, 3), 1)
        assert moved.rels == T.rels
        assert T.scale(3).area(OOM, RM) == 18
        assert T.envelope().xmax == 2


class TestTrianglePoints:

    @pytest.mark.parametrize("p,expected", [
        (pt(F(1, 2), F(1, 2), 0), True),
        (pt(1, 0, 0), True),
        (pt(1, 1, 0), True),
        (pt(0, 2, 0), True),
        (pt(2, 2, 0), False),
        (pt(-1, 1, 0), False),
        (pt(F(1, 2), F(1, 2), 1), False),
        (pt(F(1, 2), F(1, 2), F(1, 10**5)), True),
        (pt(F(-1, 10**5), 1, 0), True),
    ])
    def test_contains(self, p, expected):
        assert intersects(T, p, OOM, RM) == expected
        assert intersects(p, T, OOM, RM) == expected

    def test_containment_closure(self):
        p = T.pq.point_at(F(1, 3))
        assert intersects(T.pq, p, OOM, RM)
        assert intersects(T, p, OOM, RM)

    def test_distance(self):
        assert distance(T, pt(F(1, 2), F(1, 2), 3), OOM, RM) == 3
        assert distance(T, pt(-3, -4, 0), OOM, RM) == 5
        assert distance(T, pt(1, -3, 4), OOM, RM) == 5
        assert distance(T, pt(F(1, 2), F(1, 2), 0), OOM, RM) == 0


class TestTriangleLines:

    def test_line_through(self):
        l = Line(pt(F(1, 2), F(1, 2), -1), pt(F(1, 2), F(1, 2), 1))
        assert intersection(T, l, OOM, RM) == pt(F(1, 2), F(1, 2), 0)
        assert intersection(l, T, OOM, RM) == pt(F(1, 2), F(1, 2), 0)

    def test_line_missing(self):
        l = Line(pt(3, 3, -1), pt(3, 3, 1))
        assert intersection(T, l, OOM, RM) is None
        assert T.distance_squared(l, OOM, RM) == 8

    def test_coplanar_line(self):
        l = Line(pt(-1, 1, 0), pt(3, 1, 0))
        x = intersection(T, l, OOM, RM)
        assert isinstance(x, LineSegment)
        assert x.equals_ignore_direction(LineSegment(pt(0, 1, 0), pt(1, 1, 0)), OOM, RM)

    def test_coplanar_line_along_an_edge(self):
        l = Line(pt(-1, 0, 0), pt(5, 0, 0))
        x = intersection(l, T, OOM, RM)
        assert x.equals_ignore_direction(T.pq, OOM, RM)

    def test_coplanar_line_touching_a_vertex(self):
        l = Line(pt(-1, 1, 0), pt(1, -1, 0))
        assert intersection(T, l, OOM, RM) == pt(0, 0, 0)

    def test_coplanar_segment_inside(self):
        s = LineSegment(pt(F(1, 4), F(1, 4), 0), pt(F(1, 2), F(1, 2), 0))
        x = intersection(T, s, OOM, RM)
        assert x.equals_ignore_direction(s, OOM, RM)

    def test_coplanar_ray_from_inside(self):
        r = Ray(pt(F(1, 2), F(1, 2), 0), pt(1, 1, 0))
        x = intersection(r, T, OOM, RM)
        assert x.equals_ignore_direction(LineSegment(pt(F(1, 2), F(1, 2), 0), pt(1, 1, 0)), OOM, RM)

    def test_ray_and_segment_through(self):
        up = Ray(pt(F(1, 2), F(1, 2), -1), pt(F(1, 2), F(1, 2), 0))
        assert intersection(T, up, OOM, RM) == pt(F(1, 2), F(1, 2), 0)
        down = Ray(pt(F(1, 2), F(1, 2), -1), pt(F(1, 2), F(1, 2), -2))
        assert intersection(T, down, OOM, RM) is None
        assert distance(T, down, OOM, RM) == 1
        short = LineSegment(pt(F(1, 2), F(1, 2), 2), pt(F(1, 2), F(1, 2), 1))
        assert intersection(short, T, OOM, RM) is None
        assert distance(short, T, OOM, RM) == 1


class TestTrianglePlanes:

    def test_cut(self):
        x1 = Plane(pt(1, 0, 0), pt(1, 1, 0), pt(1, 0, 1))
        x = intersection(T, x1, OOM, RM)
        assert x.equals_ignore_direction(LineSegment(pt(1, 0, 0), pt(1, 1, 0)), OOM, RM)
        assert intersection(x1, T, OOM, RM).equals_ignore_direction(x, OOM, RM)

    def test_cut_through_a_vertex(self):
        pl = Plane(pt(0, 0, 0), pt(1, -1, 0), pt(0, 0, 1))
        assert intersection(T, pl, OOM, RM) == pt(0, 0, 0)

    def test_in_plane_and_parallel(self):
        z0 = Plane(pt(5, 5, 0), pt(6, 5, 0), pt(5, 6, 0))
        assert intersection(T, z0, OOM, RM) is T
        z5 = Plane.from_normal(pt(0, 0, 5), Vector.K)
        assert intersection(z5, T, OOM, RM) is None
        assert distance(T, z5, OOM, RM) == 5

    def test_missing(self):
        x5 = Plane(pt(5, 0, 0), pt(5, 1, 0), pt(5, 0, 1))
        assert intersection(T, x5, OOM, RM) is None
        assert distance(T, x5, OOM, RM) == 3


class TestTriangleTriangle:

    def test_crossing(self):
        u = tri((1, -1, -1), (1, -1, 1), (1, 3, 0))
        x = intersection(T, u, OOM, RM)
        assert isinstance(x, LineSegment)
        assert x.equals_ignore_direction(LineSegment(pt(1, 0, 0), pt(1, 1, 0)), OOM, RM)
        assert intersection(u, T, OOM, RM).equals_ignore_direction(x, OOM, RM)

    def test_coplanar_overlap(self):
        v = tri((1, 0, 0), (3, 0, 0), (1, 2, 0))
        x = intersection(T, v, OOM, RM)
        assert isinstance(x, Triangle)
        assert x.equals(tri((1, 0, 0), (2, 0, 0), (1, 1, 0)), OOM, RM)
        assert intersection(v, T, OOM, RM).equals(x, OOM, RM)

    def test_coplanar_hexagon(self):
        c = T.centroid().vector
        w = Triangle(*[Point.at(c * 2 - p.vector) for p in T.points()])
        x = intersection(T, w, OOM, RM)
        assert isinstance(x, CoplanarTriangles)
        assert len(x.points()) == 6
        assert x.area(OOM, RM) == F(4, 3)
        assert intersects(x, pt(F(2, 3), F(2, 3), 0), OOM, RM)
        assert not intersects(x, pt(F(1, 10), F(1, 10), 0), OOM, RM)

    def test_coplanar_shared_edge(self):
        v = tri((2, 0, 0), (0, 2, 0), (2, 2, 0))
        x = intersection(T, v, OOM, RM)
        assert x.equals_ignore_direction(T.qr, OOM, RM)

    def test_coplanar_contained(self):
        small = tri((F(1, 4), F(1, 4), 0), (1, F(1, 4), 0), (F(1, 4), 1, 0))
        assert intersection(T, small, OOM, RM).equals(small, OOM, RM)
        assert intersection(small, T, OOM, RM).equals(small, OOM, RM)

    def test_apart(self):
        up = T.translate(Vector(0, 0, 3))
        assert intersection(T, up, OOM, RM) is None
        assert distance(T, up, OOM, RM) == 3
        far = T.translate(Vector(10, 0, 0))
        assert not intersects(far, T, OOM, RM)
        assert distance(T, far, OOM, RM) == 8
