## line segments
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

"""line segments, the part of a line between two points"""

from fractions import Fraction

from exactgeom.geometry import FiniteGeometry
from exactgeom.line import Line
from exactgeom.precision import RationalSqrt


class LineSegment(Line, FiniteGeometry):
    """Closed segment from ``p`` to ``q``; its parameter domain is
    ``[0, 1]``.  Intersections and distances are those of the line,
    clipped to the segment."""

    rank = 2
    domain = (0, 1)

    def length_squared(self):
        return self.v.magnitude_squared()

    def length(self, oom, rm):
        """ length, exact if rational, otherwise rounded at ``oom``"""
        return RationalSqrt(self.length_squared()).sqrt(oom, rm)

    def midpoint(self):
        return self.point_at(Fraction(1, 2))

    def reverse(self):
        """ the same segment running from ``q`` to ``p``"""
        return LineSegment(self.q, self.p)

    def equals(self, l, oom, rm):
        """ same end points in the same order, at ``oom``"""
        return isinstance(l, LineSegment) and self.p.equals(l.p, oom, rm) \
            and self.q.equals(l.q, oom, rm)

    def equals_ignore_direction(self, l, oom, rm):
        return self.equals(l, oom, rm) or self.equals(l.reverse(), oom, rm)

    def _intersection(self, other, oom, rm):
        if isinstance(other, LineSegment) and \
           not self.envelope().is_intersected_by(other.envelope(), oom):
            return None
        return super()._intersection(other, oom, rm)
