## triangles
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

"""triangles, the bounded part of a plane inside three edges

The vertices ``p``, ``q`` and ``r`` run counter-clockwise seen from the
side the normal ``N = (q - p) x (r - p)`` points to, so a point ``x`` of
the plane is inside when ``N . (e.v x (x - e.p))`` is non-negative for
every edge ``e``.

Intersections with lines and planes go through the supporting plane
first and are then clipped by the edges.  Two coplanar triangles are
intersected by clipping one against the half-planes of the other's
edges; the result may be a point, a segment, a triangle or a convex
polygon of up to six vertices.
"""

import logging
from functools import cached_property

from exactgeom.errors import InconsistentGeometryError
from exactgeom.geometry import FiniteGeometry
from exactgeom.line import Line
from exactgeom.plane import Plane
from exactgeom.point import Point
from exactgeom.precision import RationalSqrt, sum_sqrt
from exactgeom.segment import LineSegment

log = logging.getLogger(__name__)


class Triangle(Plane, FiniteGeometry):
    """Triangle with vertices ``p``, ``q`` and ``r``."""

    rank = 5

    @cached_property
    def plane(self):
        """ the supporting plane"""
        return Plane(*self.defining_points)

    ## edges and derived points
    ## ------------------------

    @cached_property
    def pq(self):
        return LineSegment(self.p, self.q)

    @cached_property
    def qr(self):
        return LineSegment(self.q, self.r)

    @cached_property
    def rp(self):
        return LineSegment(self.r, self.p)

    @property
    def edges(self):
        return (self.pq, self.qr, self.rp)

    @cached_property
    def mpq(self):
        return self.pq.midpoint()

    @cached_property
    def mqr(self):
        return self.qr.midpoint()

    @cached_property
    def mrp(self):
        return self.rp.midpoint()

    @cached_property
    def _centroid(self):
        medians = (LineSegment(self.p, self.mqr),
                   LineSegment(self.q, self.mrp),
                   LineSegment(self.r, self.mpq))
        found = []
        for a, b in ((0, 1), (1, 2), (2, 0)):
            ma = medians[a]
            mb = medians[b]
            t, s = ma._closest_parameters(mb)
            c = ma.point_at(t)
            if c != mb.point_at(s):
                log.error('medians %d and %d of %r do not meet', a, b, self)
                raise InconsistentGeometryError(
                    'medians {} and {} of {} do not meet'.format(a, b, self))
            found.append(c)
        if not found[0] == found[1] == found[2]:
            log.error('median intersections of %r disagree: %r', self, found)
            raise InconsistentGeometryError(
                'median intersections of {} disagree: {}'.format(self, found))
        return found[0]

    def centroid(self):
        """Return the exact centroid, found three times as the meeting
        point of each pair of medians."""
        return self._centroid

    ## measures
    ## --------

    def area(self, oom, rm):
        """ ``|(q - p) x (r - p)| / 2``, exact if rational, otherwise rounded"""
        return RationalSqrt(self.normal.magnitude_squared() / 4).sqrt(oom, rm)

    def perimeter(self, oom, rm):
        return sum_sqrt([e.length_squared() for e in self.edges], oom, rm)

    def equals(self, t, oom, rm):
        """ same three vertices at ``oom``, in any order"""
        if not isinstance(t, Triangle):
            return False
        a = self.points()
        b = t.points()
        return all(any(x.equals(y, oom, rm) for y in b) for x in a) and \
            all(any(y.equals(x, oom, rm) for x in a) for y in b)

    ## containment
    ## -----------

    def _edge_signs(self, x):
        n = self.normal
        return [n.dot(e.v.cross(e.p.vector_to(x))) for e in self.edges]

    def _contains_point(self, pt, oom, rm):
        if self.side_of_plane(pt, oom, rm) != 0:
            return False
        if not self.envelope().is_intersected_by(pt, oom):
            return False
        if any(e._intersects_point(pt, oom, rm) for e in self.edges):
            return True
        s = self._edge_signs(self.point_of_projected_intersection(pt))
        return all(c >= 0 for c in s) or all(c <= 0 for c in s)

    ## intersection
    ## ------------

    def _intersection(self, other, oom, rm):
        if isinstance(other, Point):
            return other if self._contains_point(other, oom, rm) else None
        if isinstance(other, Line):
            return self._clip_line(other, oom, rm)
        if isinstance(other, Triangle):
            return self._triangle_intersection(other, oom, rm)
        if isinstance(other, Plane):
            return self._cut_by_plane(other, oom, rm)
        raise self._unsupported(other, 'intersection')

    def _clip_line(self, l, oom, rm):
        from exactgeom.combine import geometry_from_points  # combine builds triangles

        if not self.envelope().is_intersected_by_line(l, oom):
            return None
        x = self.plane._line_intersection(l, oom, rm)
        if x is None:
            return None
        if isinstance(x, Point):
            return x if self._contains_point(x, oom, rm) else None
        ## l lies in the plane
        pts = []
        for e in self.edges:
            y = e.get_intersection(l, oom, rm)
            if y is not None:
                pts.extend(y.points())
        pts.extend(pt for pt in l._bounds() if self._contains_point(pt, oom, rm))
        return geometry_from_points(pts, oom, rm)

    def _cut_by_plane(self, pl, oom, rm):
        from exactgeom.combine import geometry_from_points  # combine builds triangles

        if self.plane.is_coincident(pl, oom, rm):
            return self
        if self.plane.is_parallel(pl, oom, rm):
            return None
        pts = []
        for e in self.edges:
            y = pl._line_intersection(e, oom, rm)
            if y is not None:
                pts.extend(y.points())
        return geometry_from_points(pts, oom, rm)

    def _triangle_intersection(self, t, oom, rm):
        if not self.envelope().is_intersected_by(t.envelope(), oom):
            return None
        if self.plane.is_coincident(t.plane, oom, rm):
            return self._clip_coplanar(t, oom, rm)
        x = self._cut_by_plane(t.plane, oom, rm)
        if x is None:
            return None
        return t._intersection(x, oom, rm)

    def _clip_coplanar(self, t, oom, rm):
        """Clip this triangle by the edge half-planes of the coplanar
        triangle ``t`` (Sutherland-Hodgman)."""
        from exactgeom.combine import geometry_from_points  # combine builds triangles

        poly = list(self.points())
        n = t.normal
        for e in t.edges:
            if not poly:
                break
            sides = [n.dot(e.v.cross(e.p.vector_to(x))) for x in poly]
            out = []
            for i, cur in enumerate(poly):
                prev = poly[i - 1]
                sc = sides[i]
                sp = sides[i - 1]
                if sc >= 0:
                    if sp < 0:
                        out.append(_crossing(prev, cur, sp, sc))
                    out.append(cur)
                elif sp > 0:
                    out.append(_crossing(prev, cur, sp, sc))
            poly = out
        return geometry_from_points(poly, oom, rm)

    ## distance
    ## --------

    def _distance_squared(self, other, oom, rm):
        if isinstance(other, Point):
            x = self.point_of_projected_intersection(other)
            if self._contains_point(x, oom, rm):
                return self._distance_squared_to_point(other)
            return min(e._distance_squared_to_point(other) for e in self.edges)
        if isinstance(other, Line):
            ds = [e._linear_distance_squared(other) for e in self.edges]
            ds += [self._distance_squared(pt, oom, rm) for pt in other._bounds()]
            return min(ds)
        if isinstance(other, Triangle):
            ds = [other._distance_squared(e, oom, rm) for e in self.edges]
            ds += [self._distance_squared(e, oom, rm) for e in other.edges]
            return min(ds)
        if isinstance(other, Plane):
            return min(other._distance_squared_to_point(pt) for pt in self.points())
        raise self._unsupported(other, 'distance')


def _crossing(a, b, sa, sb):
    """ the point between ``a`` and ``b`` where the side value goes from ``sa`` to ``sb`` through zero"""
    return Point.at(a.vector + a.vector_to(b) * (sa / (sa - sb)), a.offset)
