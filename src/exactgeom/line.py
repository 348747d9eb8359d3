## infinite lines and the parameter-domain machinery shared with rays and segments
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

"""infinite lines, and the machinery shared with rays and segments

A ``Line`` is given by two distinct points ``p`` and ``q``; every point
on it is ``p + t*v`` for ``v = q - p``.  Rays and line segments are the
same object restricted to a parameter ``domain``: ``(None, None)`` for
a line, ``(0, None)`` for a ray and ``(0, 1)`` for a segment, where
``None`` is unbounded.  All the intersection and distance code below is
written once against the domain, so any pair of line-like shapes runs
through the same exact closest-approach computation.
"""

import logging
from functools import cached_property

from exactgeom.errors import DegenerateGeometryError
from exactgeom.geometry import Geometry
from exactgeom.point import Point
from exactgeom.precision import RationalSqrt

log = logging.getLogger(__name__)


class Line(Geometry):
    """Infinite line through two distinct points."""

    rank = 1
    domain = (None, None)

    def __init__(self, p, q):
        if p == q:
            log.debug('rejected %s through coincident points %r', type(self).__name__, p)
            raise DegenerateGeometryError(
                'bad {}: coincident points {}'.format(type(self).__name__, p))
        offset = p.offset
        super().__init__(offset, (p.rel, q.vector - offset))

    @classmethod
    def from_vector(cls, p, v):
        """ the line through ``p`` in direction ``v``"""
        if v.is_zero():
            raise DegenerateGeometryError('bad {}: zero direction vector'.format(cls.__name__))
        return cls(p, p.translate(v))

    @property
    def p(self):
        return self.defining_points[0]

    @property
    def q(self):
        return self.defining_points[1]

    @cached_property
    def v(self):
        """ the direction vector ``q - p``"""
        return self.rels[1] - self.rels[0]

    ## parameters
    ## ----------

    def point_at(self, t):
        """ the point ``p + t*v``"""
        return Point(self.offset, self.rels[0] + self.v * t)

    def parameter_of(self, pt):
        """ exact parameter of the projection of ``pt`` onto the line"""
        return self.p.vector_to(pt).dot(self.v) / self.v.magnitude_squared()

    def point_of_projected_intersection(self, pt):
        """ exact foot of the perpendicular from ``pt`` to the infinite line"""
        return self.point_at(self.parameter_of(pt))

    def _clamp(self, t):
        lo, hi = self.domain
        if lo is not None and t < lo:
            return lo
        if hi is not None and t > hi:
            return hi
        return t

    def _is_negligible(self, dt, oom, rm):
        """is a step of ``dt`` in the parameter shorter than ``oom``?"""
        return RationalSqrt(dt * dt * self.v.magnitude_squared()).is_zero(oom, rm)

    def _in_domain(self, t, oom, rm):
        lo, hi = self.domain
        if lo is not None and t < lo and not self._is_negligible(lo - t, oom, rm):
            return False
        if hi is not None and t > hi and not self._is_negligible(t - hi, oom, rm):
            return False
        return True

    def _bounds(self):
        """ the finite end points of the domain"""
        return [self.point_at(t) for t in self.domain if t is not None]

    ## predicates
    ## ----------

    def _is_on_line(self, pt, oom, rm):
        c2 = self.v.cross(self.p.vector_to(pt)).magnitude_squared()
        return RationalSqrt(c2 / self.v.magnitude_squared()).is_zero(oom, rm)

    def _intersects_point(self, pt, oom, rm):
        return self._is_on_line(pt, oom, rm) and \
            self._in_domain(self.parameter_of(pt), oom, rm)

    def is_parallel(self, l, oom, rm):
        """ are the directions scalar multiples at ``oom``?"""
        return self.v.is_scalar_multiple(l.v, oom, rm)

    def is_collinear(self, l, oom, rm):
        """ do both lines lie on the same infinite line at ``oom``?"""
        return self.is_parallel(l, oom, rm) and self._is_on_line(l.p, oom, rm) \
            and self._is_on_line(l.q, oom, rm)

    def equals(self, l, oom, rm):
        """ is ``l`` the same kind of line covering the same points?"""
        return l.domain == self.domain and self.is_collinear(l, oom, rm)

    ## intersection
    ## ------------

    def _intersection(self, other, oom, rm):
        if isinstance(other, Point):
            return other if self._intersects_point(other, oom, rm) else None
        if isinstance(other, Line):
            return self._linear_intersection(other, oom, rm)
        raise self._unsupported(other, 'intersection')

    def _closest_parameters(self, l):
        """Return the exact parameters ``(t, s)`` of the closest points of
        the two infinite lines, which must not be exactly parallel."""
        u = self.v
        v = l.v
        w = l.p.vector_to(self.p)
        a = u.dot(u)
        b = u.dot(v)
        c = v.dot(v)
        d = u.dot(w)
        e = v.dot(w)
        den = a * c - b * b
        return (b * e - c * d) / den, (a * e - b * d) / den

    def _linear_intersection(self, l, oom, rm):
        if self.is_parallel(l, oom, rm):
            if not self._is_on_line(l.p, oom, rm):
                return None
            return self._overlap(l, oom, rm)
        t, s = self._closest_parameters(l)
        a = self.point_at(t)
        if not RationalSqrt(a.distance_squared(l.point_at(s))).is_zero(oom, rm):
            return None
        if self._in_domain(t, oom, rm) and l._in_domain(s, oom, rm):
            return a
        return None

    def _overlap(self, l, oom, rm):
        """Intersect the domains of two collinear line-like shapes, working
        in the parameter of this one."""
        a0 = self.parameter_of(l.p)
        b0 = l.v.dot(self.v) / self.v.magnitude_squared()
        ends = [None if t is None else a0 + b0 * t for t in l.domain]
        if b0 < 0:
            ends.reverse()
        full = tuple(ends)
        lo, hi = full
        slo, shi = self.domain
        if lo is None or (slo is not None and slo > lo):
            lo = slo
        if hi is None or (shi is not None and shi < hi):
            hi = shi
        if lo is not None and hi is not None:
            if hi < lo:
                if not self._is_negligible(lo - hi, oom, rm):
                    return None
                return self.point_at(lo)
            if self._is_negligible(hi - lo, oom, rm):
                return self.point_at(lo)
        if (lo, hi) == self.domain:
            return self
        if (lo, hi) == full:
            return l

        from exactgeom.ray import Ray  # the subclasses build on Line
        from exactgeom.segment import LineSegment

        if lo is None:
            return Ray(self.point_at(hi), self.point_at(hi - 1))
        if hi is None:
            return Ray(self.point_at(lo), self.point_at(lo + 1))
        return LineSegment(self.point_at(lo), self.point_at(hi))

    def get_line_of_intersection(self, l, oom, rm):
        """Return the shortest segment joining the infinite lines through
        this line and ``l``, from this line to ``l``.  Return ``None``
        if the lines are parallel or meet."""
        if self.is_parallel(l, oom, rm):
            return None
        t, s = self._closest_parameters(l)
        a = self.point_at(t)
        b = l.point_at(s)
        if RationalSqrt(a.distance_squared(b)).is_zero(oom, rm):
            return None

        from exactgeom.segment import LineSegment  # segment builds on Line

        return LineSegment(a, b)

    ## distance
    ## --------

    def _distance_squared_to_point(self, pt):
        return self.point_at(self._clamp(self.parameter_of(pt))).distance_squared(pt)

    def _distance_squared(self, other, oom, rm):
        if isinstance(other, Point):
            return self._distance_squared_to_point(other)
        if isinstance(other, Line):
            return self._linear_distance_squared(other)
        raise self._unsupported(other, 'distance')

    def _linear_distance_squared(self, l):
        """Exact squared distance between two line-like shapes, clamping
        the closest approach to both parameter domains."""
        if not self.v.cross(l.v).is_zero():
            t, s = self._closest_parameters(l)
            if t == self._clamp(t) and s == l._clamp(s):
                return self.point_at(t).distance_squared(l.point_at(s))
        ## the minimum lies on a finite end of one of the domains, or the
        ## lines are parallel and any point of one will do
        ds = [l._distance_squared_to_point(pt) for pt in self._bounds()]
        ds += [self._distance_squared_to_point(pt) for pt in l._bounds()]
        if not ds:
            ds.append(self._distance_squared_to_point(l.p))
        return min(ds)
