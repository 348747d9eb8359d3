## merging partial intersection results into one geometry
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

"""merging of partial intersection results

Triangles and tetrahedra intersect a shape piece by piece, one edge or
face at a time.  The pieces are convex and so is their union, so the
answer is determined by the points the pieces contribute: the convex
hull of those points, reduced to the simplest shape that holds it.
"""

import logging

from exactgeom.errors import GeometryError
from exactgeom.point import are_collinear, unique_points

log = logging.getLogger(__name__)


def merge(results, oom, rm):
    """ the geometry spanned by the points of all non-``None`` ``results``"""
    pts = []
    for x in results:
        if x is not None:
            pts.extend(x.points())
    return geometry_from_points(pts, oom, rm)


def geometry_from_points(points, oom, rm):
    """Return the simplest geometry spanning ``points``: ``None``, a
    ``Point``, a ``LineSegment`` between the extreme points of a
    collinear set, a ``Triangle`` or ``CoplanarTriangles`` over the
    convex hull of a coplanar set, or a ``Tetrahedron`` on four points
    in general position.  Points equal at ``oom`` are merged first."""
    from exactgeom.coplanar import CoplanarTriangles  # the shapes import this module
    from exactgeom.plane import Plane
    from exactgeom.segment import LineSegment
    from exactgeom.tetrahedron import Tetrahedron
    from exactgeom.triangle import Triangle

    pts = unique_points(points, oom, rm)
    if len(pts) < len(points):
        log.debug('merged %d points into %d', len(points), len(pts))
    if not pts:
        return None
    if len(pts) == 1:
        return pts[0]
    if are_collinear(oom, rm, *pts):
        a = pts[0]
        v = a.vector_to(pts[1])
        lo = min(pts, key=lambda pt: a.vector_to(pt).dot(v))
        hi = max(pts, key=lambda pt: a.vector_to(pt).dot(v))
        return LineSegment(lo, hi)

    a, b = pts[0], pts[1]
    c = next(pt for pt in pts[2:] if not are_collinear(oom, rm, a, b, pt))
    pl = Plane(a, b, c)
    off = [pt for pt in pts if pl.side_of_plane(pt, oom, rm) != 0]
    if off:
        if len(pts) == 4:
            return Tetrahedron(*pts)
        raise GeometryError('bad non-coplanar set of {} points'.format(len(pts)))

    hull = _convex_hull(pts, pl.normal)
    if len(hull) == 2:
        return LineSegment(*hull)
    if len(hull) == 3:
        return Triangle(*hull)
    return CoplanarTriangles(*hull)


def _convex_hull(points, normal):
    """Monotone chain hull of coplanar ``points``, worked in the axis
    plane that ``normal`` is most nearly perpendicular to.  Collinear
    boundary points are dropped."""
    a = [abs(normal.dx), abs(normal.dy), abs(normal.dz)]
    k = a.index(max(a))

    def key(pt):
        c = (pt.x, pt.y, pt.z)
        return tuple(c[i] for i in range(3) if i != k)

    def turn(o, a, b):
        o, a, b = key(o), key(a), key(b)
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

    pts = sorted(points, key=key)
    lower = []
    for pt in pts:
        while len(lower) >= 2 and turn(lower[-2], lower[-1], pt) <= 0:
            lower.pop()
        lower.append(pt)
    upper = []
    for pt in reversed(pts):
        while len(upper) >= 2 and turn(upper[-2], upper[-1], pt) <= 0:
            upper.pop()
        upper.append(pt)
    return lower[:-1] + upper[:-1]

