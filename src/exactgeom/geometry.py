## base classes and generic queries for exactgeom shapes
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

"""base classes and generic queries for exactgeom shapes

Shapes are immutable values made of a shared ``offset`` vector plus
shape-local relative vectors, one per defining point.  ``translate``
replaces the offset; ``rotate`` and ``scale`` act on the relative
vectors about the offset.  Each returns a new shape.

Pairwise queries dispatch on a rank: Point < Line < LineSegment < Ray <
Plane < Triangle < CoplanarTriangles < Tetrahedron.  A shape answers
for arguments of equal or lower rank and hands higher-rank arguments
back to them, so ``intersection(a, b)`` and ``intersection(b, a)`` run
the same code.

The result of an intersection is one of

    None | Point | Line | Ray | LineSegment | Plane | Triangle
         | CoplanarTriangles | Tetrahedron

where ``None`` always means *no intersection*.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Optional, Union

from exactgeom.point import Point
from exactgeom.precision import ZERO, RationalSqrt

if TYPE_CHECKING:
    from exactgeom.coplanar import CoplanarTriangles
    from exactgeom.envelope import Envelope
    from exactgeom.line import Line
    from exactgeom.plane import Plane
    from exactgeom.ray import Ray
    from exactgeom.segment import LineSegment
    from exactgeom.tetrahedron import Tetrahedron
    from exactgeom.triangle import Triangle

GeometryResult = Optional[Union['Point', 'Line', 'Ray', 'LineSegment',
                                'Plane', 'Triangle', 'CoplanarTriangles',
                                'Tetrahedron']]


def rank(g):
    """ the dispatch rank of a point or shape"""
    if isinstance(g, Point):
        return 0
    return g.rank


class Geometry:
    """Base class for all shapes other than ``Point``."""

    rank = None

    def __init__(self, offset, rels):
        self.offset = offset
        self.rels = tuple(rels)

    ## offset and rels are set once, by __init__; nothing else is assigned
    def __setattr__(self, name, value):
        if name not in ('offset', 'rels') or name in self.__dict__:
            raise AttributeError('{} is immutable'.format(type(self).__name__))
        object.__setattr__(self, name, value)

    def __repr__(self):
        return "{}({})".format(type(self).__name__,
                               ", ".join(repr(p) for p in self.defining_points))

    @cached_property
    def defining_points(self):
        return tuple(Point(self.offset, r) for r in self.rels)

    def _make(self, points):
        return type(self)(*points)

    ## transforms
    ## ----------

    def translate(self, v):
        """ a copy moved by ``v``; only the shared offset changes"""
        return self._make([p.translate(v) for p in self.defining_points])

    def rotate(self, axis, theta, oom, rm):
        """ a copy rotated by ``theta`` radians about ``axis`` through the offset"""
        return self._make([p.rotate(axis, theta, oom, rm)
                           for p in self.defining_points])

    def scale(self, factor):
        """ a copy scaled by ``factor`` about the offset"""
        return self._make([p.scale(factor) for p in self.defining_points])

    ## pairwise queries
    ## ----------------

    def get_intersection(self, other, oom, rm) -> GeometryResult:
        """Return the intersection with ``other`` at precision ``oom``, or
        ``None`` if there is none."""
        if rank(other) > self.rank:
            return other.get_intersection(self, oom, rm)
        return self._intersection(other, oom, rm)

    def is_intersected_by(self, other, oom, rm):
        if rank(other) > self.rank:
            return other.is_intersected_by(self, oom, rm)
        return self._is_intersected_by(other, oom, rm)

    def distance_squared(self, other, oom, rm):
        """Return the exact squared distance to ``other``.  The result is
        rational, and zero whenever the shapes intersect at ``oom``."""
        if rank(other) > self.rank:
            return other.distance_squared(self, oom, rm)
        if self._is_intersected_by(other, oom, rm):
            return ZERO
        return self._distance_squared(other, oom, rm)

    def distance(self, other, oom, rm):
        """ the distance to ``other``, exact if rational, otherwise rounded"""
        return RationalSqrt(self.distance_squared(other, oom, rm)).sqrt(oom, rm)

    def _is_intersected_by(self, other, oom, rm):
        return self._intersection(other, oom, rm) is not None

    def _intersection(self, other, oom, rm):
        raise self._unsupported(other, 'intersection')

    def _distance_squared(self, other, oom, rm):
        raise self._unsupported(other, 'distance')

    def _unsupported(self, other, what):
        return TypeError('{} of {} and {} is not supported'.format(
            what, type(self).__name__, type(other).__name__))


class FiniteGeometry(Geometry):
    """A bounded shape: it has vertices and an envelope."""

    def points(self):
        return self.defining_points

    @cached_property
    def _envelope(self):
        from exactgeom.envelope import Envelope  # envelope builds on Point

        return Envelope.of(*self.points())

    def envelope(self) -> Envelope:
        return self._envelope


## generic queries over points and shapes
## --------------------------------------

def intersection(a, b, oom, rm) -> GeometryResult:
    """ the intersection of any two points or shapes, or ``None``"""
    if isinstance(a, Point):
        if isinstance(b, Point):
            return a if a.equals(b, oom, rm) else None
        return b.get_intersection(a, oom, rm)
    return a.get_intersection(b, oom, rm)


def intersects(a, b, oom, rm):
    """ do two points or shapes intersect at precision ``oom``?"""
    if isinstance(a, Point):
        if isinstance(b, Point):
            return a.equals(b, oom, rm)
        return b.is_intersected_by(a, oom, rm)
    return a.is_intersected_by(b, oom, rm)


def distance_squared(a, b, oom, rm):
    """ exact squared distance between any two points or shapes"""
    if isinstance(a, Point):
        if isinstance(b, Point):
            return a.distance_squared(b)
        return b.distance_squared(a, oom, rm)
    return a.distance_squared(b, oom, rm)


def distance(a, b, oom, rm):
    """ distance between any two points or shapes, rounded at ``oom`` if irrational"""
    return RationalSqrt(distance_squared(a, b, oom, rm)).sqrt(oom, rm)
