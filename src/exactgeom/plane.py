## planes
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

"""infinite planes through three non-collinear points

The normal ``N = (q - p) x (r - p)`` and the equation coefficients are
exact.  With the plane written as ``N . x = h``, the line where two
planes meet is found in closed form: for ``u = N1 x N2`` it has
direction ``u`` and passes through

    x0 = (h1 (N2 x u) + h2 (u x N1)) / |u|^2

so no rounding happens there at all.  The only step that depends on the
precision order is deciding whether the two planes are parallel.
"""

import logging
from functools import cached_property

from exactgeom.errors import DegenerateGeometryError
from exactgeom.geometry import Geometry
from exactgeom.line import Line
from exactgeom.point import Point, are_collinear, unique_points
from exactgeom.precision import RationalSqrt
from exactgeom.vector import Vector

log = logging.getLogger(__name__)


class Plane(Geometry):
    """Plane through ``p``, ``q`` and ``r``."""

    rank = 4

    def __init__(self, p, q, r):
        offset = p.offset
        rels = (p.rel, q.vector - offset, r.vector - offset)
        if (rels[1] - rels[0]).cross(rels[2] - rels[0]).is_zero():
            log.debug('rejected %s through collinear points %r %r %r',
                      type(self).__name__, p, q, r)
            raise DegenerateGeometryError(
                'bad {}: collinear points {} {} {}'.format(type(self).__name__, p, q, r))
        super().__init__(offset, rels)

    @classmethod
    def from_normal(cls, p, n):
        """ the plane through ``p`` with normal ``n``"""
        if n.is_zero():
            raise DegenerateGeometryError('bad {}: zero normal'.format(cls.__name__))
        ## cross with the axis least aligned with n to get an in-plane vector
        a = [abs(n.dx), abs(n.dy), abs(n.dz)]
        e = (Vector.I, Vector.J, Vector.K)[a.index(min(a))]
        u = n.cross(e)
        w = n.cross(u)
        return cls(p, p.translate(u), p.translate(w))

    @property
    def p(self):
        return self.defining_points[0]

    @property
    def q(self):
        return self.defining_points[1]

    @property
    def r(self):
        return self.defining_points[2]

    @cached_property
    def normal(self):
        """ the exact normal ``(q - p) x (r - p)``"""
        return (self.rels[1] - self.rels[0]).cross(self.rels[2] - self.rels[0])

    @cached_property
    def _h(self):
        return self.normal.dot(self.p.vector)

    def unit_normal(self, oom, rm):
        return self.normal.unit_vector(oom, rm)

    def equation_coefficients(self):
        """ exact ``(a, b, c, d)`` with ``ax + by + cz + d = 0`` on the plane"""
        n = self.normal
        return (n.dx, n.dy, n.dz, -self._h)

    ## points and the plane
    ## --------------------

    def _signed(self, pt):
        """ ``N . pt - h``, proportional to the signed distance"""
        return self.normal.dot(pt.vector) - self._h

    def _distance_squared_to_point(self, pt):
        s = self._signed(pt)
        return s * s / self.normal.magnitude_squared()

    def side_of_plane(self, pt, oom, rm):
        """Return 0 if ``pt`` is on the plane at ``oom``, otherwise +1 on
        the side the normal points to and -1 on the other."""
        s = self._signed(pt)
        if s == 0 or RationalSqrt(self._distance_squared_to_point(pt)).is_zero(oom, rm):
            return 0
        return 1 if s > 0 else -1

    def is_on_same_side(self, a, b, oom, rm):
        """ are ``a`` and ``b`` on the same side?  A point on the plane counts as either"""
        return self.side_of_plane(a, oom, rm) * self.side_of_plane(b, oom, rm) >= 0

    def is_on_plane(self, x, oom, rm):
        """ does the point, line, segment or other shape ``x`` lie in the plane?"""
        pts = (x,) if isinstance(x, Point) else x.defining_points
        return all(self.side_of_plane(pt, oom, rm) == 0 for pt in pts)

    def point_of_projected_intersection(self, pt):
        """ exact orthogonal projection of ``pt`` onto the plane"""
        n = self.normal
        return Point.at(pt.vector - n * (self._signed(pt) / n.magnitude_squared()),
                        self.offset)

    ## planes and lines
    ## ----------------

    def is_parallel(self, x, oom, rm):
        """ is the plane or line ``x`` parallel to this plane at ``oom``?"""
        if isinstance(x, Line):
            return self.normal.is_orthogonal(x.v, oom, rm)
        return self.normal.is_scalar_multiple(x.normal, oom, rm)

    def is_coincident(self, pl, oom, rm):
        return self.is_parallel(pl, oom, rm) and self.side_of_plane(pl.p, oom, rm) == 0

    def equals(self, pl, oom, rm):
        return self.is_coincident(pl, oom, rm)

    ## intersection
    ## ------------

    def _intersection(self, other, oom, rm):
        if isinstance(other, Point):
            return other if self.side_of_plane(other, oom, rm) == 0 else None
        if isinstance(other, Line):
            return self._line_intersection(other, oom, rm)
        if isinstance(other, Plane):
            return self._plane_intersection(other, oom, rm)
        raise self._unsupported(other, 'intersection')

    def _line_intersection(self, l, oom, rm):
        """Return ``None``, the point where ``l`` crosses the plane, or
        ``l`` itself if it lies in the plane."""
        if self.is_parallel(l, oom, rm):
            return l if self.side_of_plane(l.p, oom, rm) == 0 else None
        t = -self._signed(l.p) / self.normal.dot(l.v)
        if l._in_domain(t, oom, rm):
            return l.point_at(t)
        return None

    def _plane_intersection(self, pl, oom, rm):
        if self.is_parallel(pl, oom, rm):
            return self if self.side_of_plane(pl.p, oom, rm) == 0 else None
        n1 = self.normal
        n2 = pl.normal
        u = n1.cross(n2)
        x0 = (n2.cross(u) * self._h + u.cross(n1) * pl._h).divide(u.magnitude_squared())
        return Line(Point.at(x0, self.offset), Point.at(x0 + u, self.offset))

    ## distance
    ## --------

    def _distance_squared(self, other, oom, rm):
        if isinstance(other, Point):
            return self._distance_squared_to_point(other)
        if isinstance(other, Line):
            return min(self._distance_squared_to_point(pt)
                       for pt in other._bounds() or [other.p])
        if isinstance(other, Plane):
            return self._distance_squared_to_point(other.p)
        raise self._unsupported(other, 'distance')


def are_coplanar(oom, rm, *points):
    """Do all ``points`` lie in one plane, to within ``oom``?  Collinear
    sets, and sets of three or fewer points, always do."""
    pts = unique_points(points, oom, rm)
    if len(pts) < 4 or are_collinear(oom, rm, *pts):
        return True
    a, b = pts[0], pts[1]
    for c in pts[2:]:
        if not are_collinear(oom, rm, a, b, c):
            pl = Plane(a, b, c)
            return all(pl.side_of_plane(pt, oom, rm) == 0 for pt in pts)
    return True
