from fractions import Fraction

import pytest

from exactgeom.envelope import Envelope
from exactgeom.errors import GeometryError
from exactgeom.line import Line
from exactgeom.point import Point
from exactgeom.precision import RoundingMode
from exactgeom.ray import Ray
from exactgeom.segment import LineSegment
from exactgeom.vector import Vector

OOM = -3
RM = RoundingMode.HALF_EVEN


class TestEnvelope:
    """bounding boxes as intersection pre-filters"""

    def box(self):
        return Envelope.of(Point.of(0, 0, 0), Point.of(1, 2, 3))

    def test_of(self):
        e = self.box()
        assert e == Envelope(0, 1, 0, 2, 0, 3)
        s = LineSegment(Point.of(-1, 0, 0), Point.of(0, 5, 0))
        assert Envelope.of(e, s) == Envelope(-1, 1, 0, 5, 0, 3)
        assert e.union(Envelope(2, 3, 2, 3, 2, 3)) == Envelope(0, 3, 0, 3, 0, 3)

    def test_bad(self):
        with pytest.raises(GeometryError):
            Envelope(1, 0, 0, 0, 0, 0)
        with pytest.raises(GeometryError):
            Envelope.of()
        with pytest.raises(GeometryError):
            Envelope.of(42)

    def test_points(self):
        e = self.box()
        assert e.is_intersected_by(Point.of(1, 1, 1), OOM)
        assert e.is_intersected_by(Point.of(1, 2, 3), OOM)
        assert e.is_intersected_by(Point.of(Fraction(10001, 10000), 0, 0), OOM)
        assert not e.is_intersected_by(Point.of(Fraction(11, 10), 0, 0), OOM)

    def test_envelopes(self):
        e = self.box()
        assert e.is_intersected_by(Envelope(1, 2, 2, 3, 3, 4), OOM)
        assert not e.is_intersected_by(Envelope(2, 3, 0, 1, 0, 1), OOM)
        assert e.get_intersection(Envelope(Fraction(1, 2), 2, 1, 3, -1, 1)) == \
            Envelope(Fraction(1, 2), 1, 1, 2, 0, 1)
        assert e.get_intersection(Envelope(2, 3, 0, 1, 0, 1)) is None
        assert Envelope(0, 1, 0, 1, 0, 1).is_contained_by(e)
        assert not e.is_contained_by(Envelope(0, 1, 0, 1, 0, 1))

    def test_lines(self):
        e = self.box()
        o = Point.of(-1, -1, -1)
        assert e.is_intersected_by_line(Line(o, Point.of(0, 0, 0)), OOM)
        assert e.is_intersected_by_line(Ray(o, Point.of(0, 0, 0)), OOM)
        assert not e.is_intersected_by_line(Ray(o, Point.of(-2, -2, -2)), OOM)
        assert not e.is_intersected_by_line(
            LineSegment(o, Point.of(Fraction(-1, 2), Fraction(-1, 2), Fraction(-1, 2))), OOM)
        assert not e.is_intersected_by_line(
            Line(Point.of(5, 0, 0), Point.of(5, 1, 0)), OOM)

    def test_corners_and_translate(self):
        e = self.box()
        assert len(e.corners()) == 8
        assert Point.of(1, 2, 3) in e.corners()
        assert e.translate(Vector(1, 1, 1)) == Envelope(1, 2, 1, 3, 1, 4)

    def test_distance(self):
        e = self.box()
        assert e.distance(Point.of(1, 1, 1), OOM, RM) == 0
        assert e.distance(Point.of(4, 6, 3), OOM, RM) == 5
        assert e.distance_squared(Point.of(-1, -1, -1)) == 3
