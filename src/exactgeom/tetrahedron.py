## tetrahedra
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

"""tetrahedra, the solid bounded by four triangular faces

The faces are ``pqr``, ``psq``, ``qsr`` and ``spr``.  A point is inside
when, for every face, it is on the face's plane or on the same side of
it as the opposite vertex.  Intersections are built from the face
intersections plus the parts of the other shape that are inside, and
merged into a single convex result.
"""

import logging
from fractions import Fraction
from functools import cached_property

from exactgeom.combine import geometry_from_points, merge
from exactgeom.coplanar import CoplanarTriangles
from exactgeom.errors import DegenerateGeometryError
from exactgeom.geometry import FiniteGeometry
from exactgeom.line import Line
from exactgeom.plane import Plane, are_coplanar
from exactgeom.point import Point, unique_points
from exactgeom.precision import sum_sqrt
from exactgeom.triangle import Triangle

log = logging.getLogger(__name__)


def _triple(rels):
    p, q, r, s = rels
    return (q - p).dot((r - p).cross(s - p))


class Tetrahedron(FiniteGeometry):
    """Tetrahedron with vertices ``p``, ``q``, ``r`` and ``s``."""

    rank = 7

    def __init__(self, p, q, r, s):
        offset = p.offset
        rels = (p.rel, q.vector - offset, r.vector - offset, s.vector - offset)
        if _triple(rels) == 0:
            log.debug('rejected %s through coplanar points %r %r %r %r',
                      type(self).__name__, p, q, r, s)
            raise DegenerateGeometryError(
                'bad {}: coplanar points {} {} {} {}'.format(type(self).__name__, p, q, r, s))
        super().__init__(offset, rels)

    @property
    def p(self):
        return self.defining_points[0]

    @property
    def q(self):
        return self.defining_points[1]

    @property
    def r(self):
        return self.defining_points[2]

    @property
    def s(self):
        return self.defining_points[3]

    ## faces
    ## -----

    @cached_property
    def pqr(self):
        return Triangle(self.p, self.q, self.r)

    @cached_property
    def psq(self):
        return Triangle(self.p, self.s, self.q)

    @cached_property
    def qsr(self):
        return Triangle(self.q, self.s, self.r)

    @cached_property
    def spr(self):
        return Triangle(self.s, self.p, self.r)

    @property
    def faces(self):
        return (self.pqr, self.psq, self.qsr, self.spr)

    @cached_property
    def _opposites(self):
        return ((self.pqr, self.s), (self.psq, self.r),
                (self.qsr, self.p), (self.spr, self.q))

    ## measures
    ## --------

    def volume(self):
        """ exact volume, a sixth of the absolute scalar triple product"""
        return abs(_triple(self.rels)) / 6

    def centroid(self):
        """ exact mean of the four vertices"""
        p, q, r, s = self.rels
        return Point(self.offset, (p + q + r + s) * Fraction(1, 4))

    def area(self, oom, rm):
        """ summed area of the faces"""
        return sum_sqrt([f.normal.magnitude_squared() / 4 for f in self.faces], oom, rm)

    def equals(self, t, oom, rm):
        """ same four vertices at ``oom``, in any order"""
        if not isinstance(t, Tetrahedron):
            return False
        a = self.points()
        b = t.points()
        return all(any(x.equals(y, oom, rm) for y in b) for x in a) and \
            all(any(y.equals(x, oom, rm) for x in a) for y in b)

    ## containment
    ## -----------

    def _contains_point(self, pt, oom, rm):
        if not self.envelope().is_intersected_by(pt, oom):
            return False
        return all(f.is_on_same_side(pt, v, oom, rm) for f, v in self._opposites)

    ## intersection
    ## ------------

    def _intersection(self, other, oom, rm):
        if isinstance(other, Point):
            return other if self._contains_point(other, oom, rm) else None
        if isinstance(other, Tetrahedron):
            return self._tetrahedron_intersection(other, oom, rm)
        if isinstance(other, Line):
            if not self.envelope().is_intersected_by_line(other, oom):
                return None
            inside = [pt for pt in other._bounds() if self._contains_point(pt, oom, rm)]
        elif isinstance(other, (Triangle, CoplanarTriangles)):
            if not self.envelope().is_intersected_by(other.envelope(), oom):
                return None
            inside = [pt for pt in other.points() if self._contains_point(pt, oom, rm)]
        elif isinstance(other, Plane):
            inside = []
        else:
            raise self._unsupported(other, 'intersection')
        return merge([f.get_intersection(other, oom, rm) for f in self.faces] + inside,
                     oom, rm)

    def _tetrahedron_intersection(self, t, oom, rm):
        """Return the common part of two tetrahedra when it is a point,
        segment, polygon or tetrahedron.  An overlap with more than four
        vertices is a general polyhedron and raises ``TypeError``."""
        if not self._is_intersected_by(t, oom, rm):
            return None
        if all(self._contains_point(pt, oom, rm) for pt in t.points()):
            return t
        if all(t._contains_point(pt, oom, rm) for pt in self.points()):
            return self
        pts = []
        for f in self.faces:
            for g in t.faces:
                x = f.get_intersection(g, oom, rm)
                if x is not None:
                    pts.extend(x.points())
        pts.extend(pt for pt in t.points() if self._contains_point(pt, oom, rm))
        pts.extend(pt for pt in self.points() if t._contains_point(pt, oom, rm))
        pts = unique_points(pts, oom, rm)
        if len(pts) > 4 and not are_coplanar(oom, rm, *pts):
            log.debug('overlap of %r and %r has %d vertices', self, t, len(pts))
            raise self._unsupported(t, 'intersection')
        return geometry_from_points(pts, oom, rm)

    def _is_intersected_by(self, other, oom, rm):
        if isinstance(other, Tetrahedron):
            if not self.envelope().is_intersected_by(other.envelope(), oom):
                return False
            if any(self._contains_point(pt, oom, rm) for pt in other.points()) or \
               any(other._contains_point(pt, oom, rm) for pt in self.points()):
                return True
            return any(f.is_intersected_by(g, oom, rm)
                       for f in self.faces for g in other.faces)
        return self._intersection(other, oom, rm) is not None

    ## distance
    ## --------

    def _distance_squared(self, other, oom, rm):
        if isinstance(other, Tetrahedron):
            return min(f.distance_squared(g, oom, rm)
                       for f in self.faces for g in other.faces)
        return min(f.distance_squared(other, oom, rm) for f in self.faces)
