## rectangles
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

"""rectangles, held as the two triangles either side of the diagonal pr

The corners ``p``, ``q``, ``r`` and ``s`` run around the boundary, so
``pq`` and ``rs`` are opposite sides, as are ``qr`` and ``sp``.  Every
intersection and distance is the merge of those over the halves ``pqr``
and ``rsp``.
"""

import logging
from functools import cached_property

from exactgeom.coplanar import CoplanarTriangles
from exactgeom.errors import DegenerateGeometryError
from exactgeom.precision import RationalSqrt, sum_sqrt
from exactgeom.segment import LineSegment
from exactgeom.triangle import Triangle

log = logging.getLogger(__name__)


class Rectangle(CoplanarTriangles):
    """Rectangle with corners ``p``, ``q``, ``r`` and ``s`` in boundary
    order.

    Construction is exact: ``pq`` must be at right angles to ``qr`` and
    ``s`` must be ``p + (r - q)``.  A rotated rectangle has its corners
    rounded, so ``rotate`` skips the check.
    """

    def __init__(self, p, q, r, s, *, check=True):
        if check:
            pq = p.vector_to(q)
            qr = q.vector_to(r)
            if pq.cross(qr).is_zero() or pq.dot(qr) != 0 or \
               p.vector + qr != s.vector:
                log.debug('rejected %s on %r %r %r %r', type(self).__name__, p, q, r, s)
                raise DegenerateGeometryError(
                    'bad {}: {} {} {} {} is not a rectangle'.format(
                        type(self).__name__, p, q, r, s))
        super().__init__(p, q, r, s)

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

    @cached_property
    def pqr(self):
        return Triangle(self.p, self.q, self.r)

    @cached_property
    def rsp(self):
        return Triangle(self.r, self.s, self.p)

    @cached_property
    def triangles(self):
        return (self.pqr, self.rsp)

    @property
    def edges(self):
        return (LineSegment(self.p, self.q), LineSegment(self.q, self.r),
                LineSegment(self.r, self.s), LineSegment(self.s, self.p))

    def rotate(self, axis, theta, oom, rm):
        """ a copy rotated about the offset, with its corners rounded at ``oom``"""
        return Rectangle(*[pt.rotate(axis, theta, oom, rm) for pt in self.defining_points],
                         check=False)

    ## measures
    ## --------

    def area(self, oom, rm):
        """ ``|pq| |qr|``, exact if rational, otherwise rounded"""
        pq, qr, _, _ = self.edges
        return RationalSqrt(pq.length_squared() * qr.length_squared()).sqrt(oom, rm)

    def perimeter(self, oom, rm):
        return sum_sqrt([e.length_squared() for e in self.edges], oom, rm)

    def equals(self, x, oom, rm):
        """ same four corners at ``oom``, in any order"""
        if not isinstance(x, Rectangle):
            return False
        a = self.points()
        b = x.points()
        return all(any(u.equals(v, oom, rm) for v in b) for u in a) and \
            all(any(v.equals(u, oom, rm) for u in a) for v in b)


def is_rectangle(p, q, r, s, oom, rm):
    """Do ``p``, ``q``, ``r`` and ``s`` in boundary order make a
    rectangle at ``oom``?  Opposite sides must be parallel and adjacent
    sides at right angles."""
    pq = p.vector_to(q)
    qr = q.vector_to(r)
    rs = r.vector_to(s)
    sp = s.vector_to(p)
    if any(v.is_zero() for v in (pq, qr, rs, sp)):
        return False
    return pq.is_scalar_multiple(rs, oom, rm) and \
        qr.is_scalar_multiple(sp, oom, rm) and pq.is_orthogonal(qr, oom, rm)
