## exceptions raised by exactgeom
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

"""
exceptions raised by exactgeom.

Only construction and bad arguments raise.  Every intersection,
predicate and distance operation is total: when there is no
intersection the result is ``None``, never an exception.
"""


class GeometryError(ValueError):
    """Base class for exactgeom errors; a ``ValueError`` because bad
    geometry is a bad value."""


class DegenerateGeometryError(GeometryError):
    """The inputs do not define the requested shape: coincident points
    for a line, collinear points for a plane or triangle, coplanar
    points for a tetrahedron, or a zero normal or axis."""


class InconsistentGeometryError(GeometryError):
    """An internal self-check failed, e.g. the three median
    intersections of a triangle disagree."""
