## axis-aligned bounding envelopes for exactgeom
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

"""axis-aligned bounding envelopes

An ``Envelope`` is the axis-aligned box spanning a set of points.  It is
a cheap, necessary-but-not-sufficient filter: if two envelopes do not
overlap, the shapes inside them cannot intersect, but an overlap proves
nothing and must be followed by the exact test.

Tests that take ``oom`` widen the boxes by ``10**oom`` so that points
which are equal at ``oom`` are never filtered out.
"""

from dataclasses import dataclass
from fractions import Fraction

from exactgeom.errors import GeometryError
from exactgeom.point import Point
from exactgeom.precision import RationalSqrt, unit
from exactgeom.vector import Vector


@dataclass(frozen=True)
class Envelope:
    """Immutable axis-aligned box with exact rational bounds."""

    xmin: Fraction
    xmax: Fraction
    ymin: Fraction
    ymax: Fraction
    zmin: Fraction
    zmax: Fraction

    def __post_init__(self):
        if self.xmin > self.xmax or self.ymin > self.ymax \
           or self.zmin > self.zmax:
            raise GeometryError('bad envelope bounds: {}'.format(self))

    @classmethod
    def of(cls, *items):
        """Return the envelope of any mix of points, envelopes and finite
        geometries (anything with a ``points()`` method)."""
        boxes = []
        for item in items:
            if isinstance(item, Envelope):
                boxes.append(item)
            elif isinstance(item, Point):
                boxes.append(cls(item.x, item.x, item.y, item.y,
                                 item.z, item.z))
            elif hasattr(item, 'points'):
                boxes.extend(cls.of(p) for p in item.points())
            else:
                raise GeometryError('bad thing passed to Envelope.of(): {}'.format(item))
        if not boxes:
            raise GeometryError('an envelope needs at least one item')
        return cls(min(b.xmin for b in boxes), max(b.xmax for b in boxes),
                   min(b.ymin for b in boxes), max(b.ymax for b in boxes),
                   min(b.zmin for b in boxes), max(b.zmax for b in boxes))

    def union(self, e):
        return Envelope.of(self, e)

    def corners(self):
        """ the eight corner points"""
        return tuple(Point.of(x, y, z)
                     for x in (self.xmin, self.xmax)
                     for y in (self.ymin, self.ymax)
                     for z in (self.zmin, self.zmax))

    def translate(self, v):
        return Envelope(self.xmin + v.dx, self.xmax + v.dx,
                        self.ymin + v.dy, self.ymax + v.dy,
                        self.zmin + v.dz, self.zmax + v.dz)

    ## predicates
    ## ----------

    def _contains(self, pt, margin):
        return self.xmin - margin <= pt.x <= self.xmax + margin and \
            self.ymin - margin <= pt.y <= self.ymax + margin and \
            self.zmin - margin <= pt.z <= self.zmax + margin

    def _overlaps(self, e, margin):
        ## no overlap is possible if the maximum of one box is below the
        ## minimum of the other on any axis
        return not (self.xmax + margin < e.xmin or e.xmax + margin < self.xmin or
                    self.ymax + margin < e.ymin or e.ymax + margin < self.ymin or
                    self.zmax + margin < e.zmin or e.zmax + margin < self.zmin)

    def is_intersected_by(self, item, oom):
        """Does the point or envelope ``item`` touch this envelope, with
        both widened by ``10**oom``?"""
        if isinstance(item, Point):
            return self._contains(item, unit(oom))
        if isinstance(item, Envelope):
            return self._overlaps(item, unit(oom))
        raise GeometryError('bad thing passed to Envelope.is_intersected_by(): {}'.format(item))

    def is_intersected_by_line(self, l, oom):
        """Exact slab test of a line, ray or line segment against the
        widened box, over the parameter domain of ``l``."""
        margin = unit(oom)
        tlo, thi = l.domain
        p = l.p
        v = l.v
        for pa, va, lo, hi in ((p.x, v.dx, self.xmin, self.xmax),
                               (p.y, v.dy, self.ymin, self.ymax),
                               (p.z, v.dz, self.zmin, self.zmax)):
            lo -= margin
            hi += margin
            if va == 0:
                if pa < lo or pa > hi:
                    return False
                continue
            t1 = (lo - pa) / va
            t2 = (hi - pa) / va
            if t1 > t2:
                t1, t2 = t2, t1
            tlo = t1 if tlo is None else max(tlo, t1)
            thi = t2 if thi is None else min(thi, t2)
            if tlo > thi:
                return False
        return True

    def is_contained_by(self, e):
        return e.xmin <= self.xmin and self.xmax <= e.xmax and \
            e.ymin <= self.ymin and self.ymax <= e.ymax and \
            e.zmin <= self.zmin and self.zmax <= e.zmax

    def get_intersection(self, e):
        """ the exact overlap of two envelopes, or ``None``"""
        if not self._overlaps(e, 0):
            return None
        return Envelope(max(self.xmin, e.xmin), min(self.xmax, e.xmax),
                        max(self.ymin, e.ymin), min(self.ymax, e.ymax),
                        max(self.zmin, e.zmin), min(self.zmax, e.zmax))

    ## measures
    ## --------

    def distance_squared(self, pt):
        """ exact squared distance from ``pt`` to the box (zero inside)"""
        def gap(a, lo, hi):
            if a < lo:
                return lo - a
            if a > hi:
                return a - hi
            return 0
        return Vector(gap(pt.x, self.xmin, self.xmax),
                      gap(pt.y, self.ymin, self.ymax),
                      gap(pt.z, self.zmin, self.zmax)).magnitude_squared()

    def distance(self, pt, oom, rm):
        return RationalSqrt(self.distance_squared(pt)).sqrt(oom, rm)
