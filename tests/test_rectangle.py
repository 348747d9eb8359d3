from fractions import Fraction

import pytest

from exactgeom import distance, intersection, intersects
from exactgeom.coplanar import CoplanarTriangles
from exactgeom.errors import DegenerateGeometryError
from exactgeom.line import Line
from exactgeom.plane import Plane
from exactgeom.point import Point
from exactgeom.precision import RoundingMode, pi
from exactgeom.ray import Ray
from exactgeom.rectangle import Rectangle, is_rectangle
from exactgeom.segment import LineSegment
from exactgeom.tetrahedron import Tetrahedron
from exactgeom.triangle import Triangle
from exactgeom.vector import Vector

OOM = -3
RM = RoundingMode.HALF_EVEN

F = Fraction


def pt(x, y, z):
    return Point.of(x, y, z)


## 3 wide, 2 high, in z = 0
R = Rectangle(pt(0, 0, 0), pt(0, 2, 0), pt(3, 2, 0), pt(3, 0, 0))


class TestRectangle:
    """construction, halves and measures"""

    @pytest.mark.parametrize("corners", [
        [(0, 0, 0), (1, 2, 0), (4, 2, 0), (3, 0, 0)],
        [(0, 0, 0), (0, 2, 0), (3, 2, 0), (4, 0, 0)],
        [(0, 0, 0), (0, 1, 0), (0, 2, 0), (0, 1, 0)],
        [(0, 0, 0), (0, 0, 0), (3, 0, 0), (3, 0, 0)],
    ])
    def test_not_a_rectangle(self, corners):
        with pytest.raises(DegenerateGeometryError):
            Rectangle(*[pt(*c) for c in corners])

    def test_is_rectangle(self):
        assert is_rectangle(R.p, R.q, R.r, R.s, OOM, RM)
        assert is_rectangle(pt(0, 0, 0), pt(0, 2, 0), pt(3, 2, 0),
                            pt(3 + F(1, 10**6), 0, 0), OOM, RM)
        assert not is_rectangle(pt(0, 0, 0), pt(1, 2, 0), pt(4, 2, 0), pt(3, 0, 0), OOM, RM)
        assert not is_rectangle(pt(0, 0, 0), pt(0, 0, 0), pt(3, 0, 0), pt(3, 0, 0), OOM, RM)

    def test_halves(self):
        assert R.pqr.equals(Triangle(pt(0, 0, 0), pt(0, 2, 0), pt(3, 2, 0)), OOM, RM)
        assert R.rsp.equals(Triangle(pt(3, 2, 0), pt(3, 0, 0), pt(0, 0, 0)), OOM, RM)
        assert R.triangles == (R.pqr, R.rsp)
        assert len(R.edges) == 4

    def test_measures(self):
        assert R.area(OOM, RM) == 6
        assert R.perimeter(OOM, RM) == 10
        diamond = Rectangle(pt(0, 0, 0), pt(1, 1, 0), pt(2, 0, 0), pt(1, -1, 0))
        assert diamond.area(OOM, RM) == 2
        assert diamond.perimeter(OOM, RM) == F(5657, 1000)

    def test_equals(self):
        assert R.equals(Rectangle(R.q, R.r, R.s, R.p), OOM, RM)
        assert not R.equals(R.translate(Vector(0, 0, 1)), OOM, RM)
        assert not R.equals(R.pqr, OOM, RM)

    def test_transforms(self):
        moved = R.translate(Vector(1, 2, 3))
        assert isinstance(moved, Rectangle)
        assert moved.area(OOM, RM) == 6
        assert R.scale(2).area(OOM, RM) == 24
        assert R.scale(Vector(1, 2, 1)).area(OOM, RM) == 12
        turned = R.rotate(Vector.K, pi(-20, RM) / 2, OOM, RM)
        assert isinstance(turned, Rectangle)
        assert turned.equals(Rectangle(pt(0, 0, 0), pt(-2, 0, 0), pt(-2, 3, 0), pt(0, 3, 0)),
                             OOM, RM)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            R.s = pt(1, 1, 1)


class TestRectanglePoints:

    @pytest.mark.parametrize("p,expected", [
        (pt(1, 1, 0), True),
        (pt(3, 2, 0), True),
        (pt(3, 1, 0), True),
        (pt(F(3, 2), 1, 0), True),
        (pt(F(5, 2), F(1, 2), 0), True),
        (pt(4, 1, 0), False),
        (pt(1, 1, 1), False),
        (pt(1, 1, F(1, 10**5)), True),
    ])
    def test_contains(self, p, expected):
        assert intersects(R, p, OOM, RM) == expected
        assert (intersection(p, R, OOM, RM) is not None) == expected

    def test_distance(self):
        assert distance(R, pt(1, 1, 4), OOM, RM) == 4
        assert distance(pt(5, 2, 0), R, OOM, RM) == 2
        assert distance(R, pt(6, 6, 0), OOM, RM) == 5
        assert distance(R, pt(1, 1, 0), OOM, RM) == 0


class TestRectangleLines:

    def test_line_through(self):
        l = Line(pt(1, 1, -1), pt(1, 1, 1))
        assert intersection(R, l, OOM, RM) == pt(1, 1, 0)

    def test_line_in_plane(self):
        l = Line(pt(-1, 1, 0), pt(5, 1, 0))
        x = intersection(l, R, OOM, RM)
        assert isinstance(x, LineSegment)
        assert x.equals_ignore_direction(LineSegment(pt(0, 1, 0), pt(3, 1, 0)), OOM, RM)

    def test_segment(self):
        s = LineSegment(pt(2, 1, 0), pt(5, 1, 0))
        x = intersection(R, s, OOM, RM)
        assert x.equals_ignore_direction(LineSegment(pt(2, 1, 0), pt(3, 1, 0)), OOM, RM)
        assert intersection(R, LineSegment(pt(1, 1, 2), pt(2, 1, 2)), OOM, RM) is None

    def test_ray(self):
        assert intersection(R, Ray(pt(1, 1, 5), pt(1, 1, 4)), OOM, RM) == pt(1, 1, 0)
        away = Ray(pt(1, 1, 5), pt(1, 1, 6))
        assert intersection(away, R, OOM, RM) is None
        assert distance(R, away, OOM, RM) == 5

    def test_line_distance(self):
        l = Line(pt(5, 0, 1), pt(5, 1, 1))
        assert not intersects(R, l, OOM, RM)
        assert distance(R, l, OOM, RM) == F(2236, 1000)


class TestRectanglePlanesAndTriangles:

    def test_plane_cut(self):
        pl = Plane.from_normal(pt(1, 0, 0), Vector.I)
        x = intersection(R, pl, OOM, RM)
        assert x.equals_ignore_direction(LineSegment(pt(1, 0, 0), pt(1, 2, 0)), OOM, RM)

    def test_plane_containing(self):
        pl = Plane.from_normal(pt(7, 7, 0), Vector.K)
        x = intersection(pl, R, OOM, RM)
        assert isinstance(x, CoplanarTriangles)
        assert len(x.points()) == 4
        assert x.area(OOM, RM) == 6

    def test_plane_apart(self):
        pl = Plane.from_normal(pt(0, 0, 3), Vector.K)
        assert intersection(R, pl, OOM, RM) is None
        assert distance(R, pl, OOM, RM) == 3

    def test_coplanar_triangle(self):
        t = Triangle(pt(1, 1, 0), pt(5, 1, 0), pt(1, 5, 0))
        x = intersection(t, R, OOM, RM)
        assert isinstance(x, CoplanarTriangles)
        assert x.area(OOM, RM) == 2
        corners = set((p.x, p.y) for p in x.points())
        assert corners == {(1, 1), (3, 1), (3, 2), (1, 2)}

    def test_crossing_triangle(self):
        t = Triangle(pt(1, 1, -1), pt(1, 1, 1), pt(1, 5, 0))
        x = intersection(R, t, OOM, RM)
        assert x.equals_ignore_direction(LineSegment(pt(1, 1, 0), pt(1, 2, 0)), OOM, RM)

    def test_triangle_apart(self):
        t = Triangle(pt(0, 0, 2), pt(1, 0, 2), pt(0, 1, 2))
        assert intersection(R, t, OOM, RM) is None
        assert distance(t, R, OOM, RM) == 2

    def test_tetrahedron_on_top(self):
        unit = Tetrahedron(pt(0, 0, 0), pt(1, 0, 0), pt(0, 1, 0), pt(0, 0, 1))
        x = intersection(unit, R, OOM, RM)
        assert isinstance(x, Triangle)
        assert x.equals(unit.pqr, OOM, RM)
