## rays
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

"""rays, half-infinite lines starting at ``p`` and running through ``q``

A point is ahead of the ray's start when the vector from ``p`` to its
projection onto the line has the same direction code as ``v``.  Two
collinear rays meet in one of four ways:

* same direction: the ray that starts further along
* opposite directions, overlapping: the segment between the starts
* opposite directions, touching at the starts: that point
* opposite directions, apart: nothing
"""

from exactgeom.line import Line


class Ray(Line):
    """Ray from ``p`` through ``q``; its parameter domain is ``[0, inf)``."""

    rank = 3
    domain = (0, None)

    def _in_domain(self, t, oom, rm):
        if t == 0:
            return True
        if (self.v * t).direction() == self.v.direction():
            return True
        return self._is_negligible(t, oom, rm)

    def is_ahead(self, pt, oom, rm):
        """ does the projection of ``pt`` onto the line lie on the ray?"""
        return self._in_domain(self.parameter_of(pt), oom, rm)

    def equals(self, l, oom, rm):
        """ same start point and same direction at ``oom``"""
        return isinstance(l, Ray) and self.p.equals(l.p, oom, rm) and \
            self.is_parallel(l, oom, rm) and self.v.dot(l.v) > 0
