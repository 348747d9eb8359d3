## convex coplanar polygons held as a fan of triangles
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

"""convex coplanar polygons held as a fan of triangles

A plane or triangle can cut a tetrahedron in a quadrilateral, and two
coplanar triangles can overlap in up to a hexagon.  Such results are
``CoplanarTriangles``: the polygon's vertices in boundary order, and the
fan of triangles from the first vertex that covers it.
"""

import logging
from functools import cached_property

from exactgeom.errors import DegenerateGeometryError
from exactgeom.geometry import FiniteGeometry
from exactgeom.point import Point
from exactgeom.precision import sum_sqrt

log = logging.getLogger(__name__)


class CoplanarTriangles(FiniteGeometry):
    """Convex polygon with at least three vertices, given in order
    around its boundary."""

    rank = 6

    def __init__(self, *points):
        if len(points) < 3:
            log.debug('rejected %s with %d points', type(self).__name__, len(points))
            raise DegenerateGeometryError(
                'bad {}: needs at least 3 points, got {}'.format(type(self).__name__, len(points)))
        offset = points[0].offset
        super().__init__(offset, [pt.vector - offset for pt in points])

    @cached_property
    def triangles(self):
        """ the fan of triangles from the first vertex"""
        from exactgeom.triangle import Triangle  # triangle imports combine, which imports this

        pts = self.defining_points
        return tuple(Triangle(pts[0], pts[i], pts[i + 1])
                     for i in range(1, len(pts) - 1))

    def area(self, oom, rm):
        """ the summed area of the fan"""
        return sum_sqrt([t.normal.magnitude_squared() / 4 for t in self.triangles], oom, rm)

    def _contains_point(self, pt, oom, rm):
        return self.envelope().is_intersected_by(pt, oom) and \
            any(t._contains_point(pt, oom, rm) for t in self.triangles)

    def _intersection(self, other, oom, rm):
        from exactgeom.combine import merge  # combine builds this class

        if isinstance(other, Point):
            return other if self._contains_point(other, oom, rm) else None
        if isinstance(other, CoplanarTriangles):
            return merge([other._intersection(t, oom, rm) for t in self.triangles], oom, rm)
        return merge([t.get_intersection(other, oom, rm) for t in self.triangles], oom, rm)

    def _distance_squared(self, other, oom, rm):
        return min(t.distance_squared(other, oom, rm) for t in self.triangles)
