## points for exactgeom
## Copyright (c) 2020 Richard DeVaul
## Copyright (c) 2026 exactgeom contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""points as an offset plus a relative vector

A ``Point`` is the pair ``(offset, rel)`` and its absolute position is
``offset + rel``.  The offset is a rigid translation shared by every
vertex of a shape; ``rel`` is the shape-local position.  Translating a
point replaces only the offset, and rotating or scaling a point acts on
``rel`` about the offset, so a composite shape is moved by handing the
same new offset to all of its vertices.

Points are immutable.  ``translate``, ``rotate`` and ``scale`` return
new points.
"""

from dataclasses import dataclass

from exactgeom.precision import RationalSqrt
from exactgeom.vector import Vector


@dataclass(frozen=True, eq=False)
class Point:
    """Immutable point at ``offset + rel``."""

    offset: Vector
    rel: Vector

    @classmethod
    def of(cls, x, y, z):
        """ make a point with a zero offset from three coordinates"""
        return cls(Vector.ZERO, Vector(x, y, z))

    @classmethod
    def at(cls, v, offset=Vector.ZERO):
        """ the point at absolute position ``v``, expressed against ``offset``"""
        return cls(offset, v - offset)

    ## equality compares absolute positions exactly
    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.vector == other.vector

    def __hash__(self):
        return hash(self.vector)

    @property
    def vector(self):
        """ the absolute position as a vector from the origin"""
        return self.offset + self.rel

    @property
    def x(self):
        return self.offset.dx + self.rel.dx

    @property
    def y(self):
        return self.offset.dy + self.rel.dy

    @property
    def z(self):
        return self.offset.dz + self.rel.dz

    def vector_to(self, pt):
        """ the vector from this point to ``pt``"""
        return pt.vector - self.vector

    def equals(self, pt, oom, rm):
        """ are the coordinates equal once rounded at ``oom``?"""
        if pt is None:
            return False
        return self.vector.rounded(oom, rm) == pt.vector.rounded(oom, rm)

    def is_origin(self, oom, rm):
        return self.vector.rounded(oom, rm).is_zero()

    def location(self, oom, rm):
        """Return 0 if the point is the origin at ``oom``, otherwise the
        direction code (1 to 8) of its octant."""
        v = self.vector.rounded(oom, rm)
        if v.is_zero():
            return 0
        return v.direction()

    def distance_squared(self, pt):
        """ exact squared distance to ``pt``"""
        return self.vector_to(pt).magnitude_squared()

    def distance(self, pt, oom, rm):
        """ distance to ``pt``, exact if rational, otherwise rounded at ``oom``"""
        return RationalSqrt(self.distance_squared(pt)).sqrt(oom, rm)

    def is_between(self, a, b, oom, rm):
        """Does this point lie in the slab between the planes through
        ``a`` and ``b`` that are perpendicular to ``b - a``?  Points within
        ``oom`` of either bounding plane count as between."""
        if self.equals(a, oom, rm) or self.equals(b, oom, rm):
            return True
        ab = a.vector_to(b)
        if ab.is_zero():
            return False
        ab2 = ab.magnitude_squared()
        s = a.vector_to(self).dot(ab)
        if s < 0 and not RationalSqrt(s * s / ab2).is_zero(oom, rm):
            return False
        s = b.vector_to(self).dot(ab)
        if s > 0 and not RationalSqrt(s * s / ab2).is_zero(oom, rm):
            return False
        return True

    ## transforms
    ## ----------

    def translate(self, v):
        """ a new point moved by ``v``; only the offset changes"""
        return Point(self.offset + v, self.rel)

    def with_offset(self, offset):
        """ the same absolute position expressed against ``offset``"""
        return Point(offset, self.vector - offset)

    def rotate(self, axis, theta, oom, rm):
        """ rotate ``rel`` by ``theta`` radians about ``axis``; the offset is kept"""
        return Point(self.offset, self.rel.rotate(axis, theta, oom, rm))

    def scale(self, factor):
        """Scale ``rel`` about the offset by a number, or per axis by the
        components of a ``Vector``."""
        from exactgeom.xform import Scale  # xform builds on Vector

        return Point(self.offset, Scale(factor).mul(self.rel))

    def points(self):
        return (self,)

    def envelope(self):
        from exactgeom.envelope import Envelope  # envelope builds on Point

        return Envelope.of(self)


Point.ORIGIN = Point(Vector.ZERO, Vector.ZERO)


def unique_points(points, oom, rm):
    """Return ``points`` with duplicates (equal at ``oom``) removed,
    keeping the first of each group in input order."""
    r = []
    for p in points:
        if not any(p.equals(q, oom, rm) for q in r):
            r.append(p)
    return r


def are_collinear(oom, rm, *points):
    """Do all ``points`` lie on one line, to within ``oom``?

    Two or fewer distinct points are always collinear.  The distance of
    every point from the line through the first two distinct points is
    tested against zero.
    """
    pts = unique_points(points, oom, rm)
    if len(pts) < 3:
        return True
    p = pts[0]
    v = p.vector_to(pts[1])
    v2 = v.magnitude_squared()
    for pt in pts[2:]:
        c2 = v.cross(p.vector_to(pt)).magnitude_squared()
        if not RationalSqrt(c2 / v2).is_zero(oom, rm):
            return False
    return True
