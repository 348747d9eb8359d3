## exact three-component vectors for exactgeom
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

"""exact three-component displacement vectors

A ``Vector`` holds three ``Fraction`` components and never changes
once constructed.  Addition, subtraction, scaling, dot and cross
products are exact.  The magnitude is a ``RationalSqrt``: exact when
the squared magnitude is a rational square, rounded on request
otherwise.
"""

from dataclasses import dataclass
from fractions import Fraction

from exactgeom.errors import GeometryError
from exactgeom.precision import GUARD_DIGITS, RationalSqrt, acos, \
    round_to_oom, to_rational


@dataclass(frozen=True)
class Vector:
    """Immutable exact displacement ``(dx, dy, dz)``."""

    dx: Fraction
    dy: Fraction
    dz: Fraction

    def __post_init__(self):
        object.__setattr__(self, 'dx', to_rational(self.dx))
        object.__setattr__(self, 'dy', to_rational(self.dy))
        object.__setattr__(self, 'dz', to_rational(self.dz))

    def __iter__(self):
        yield self.dx
        yield self.dy
        yield self.dz

    ## arithmetic
    ## ----------

    def add(self, v):
        """ `self + v`"""
        return Vector(self.dx + v.dx, self.dy + v.dy, self.dz + v.dz)

    def subtract(self, v):
        """ `self - v`"""
        return Vector(self.dx - v.dx, self.dy - v.dy, self.dz - v.dz)

    def multiply(self, s):
        """ vector times scalar ``s``"""
        s = to_rational(s)
        return Vector(self.dx * s, self.dy * s, self.dz * s)

    def divide(self, s):
        """ vector divided by non-zero scalar ``s``"""
        s = to_rational(s)
        if s == 0:
            raise GeometryError('bad zero divisor passed to Vector.divide')
        return Vector(self.dx / s, self.dy / s, self.dz / s)

    def reverse(self):
        """ the vector pointing the other way"""
        return Vector(-self.dx, -self.dy, -self.dz)

    __add__ = add
    __sub__ = subtract
    __neg__ = reverse

    def __mul__(self, s):
        return self.multiply(s)

    __rmul__ = __mul__

    def dot(self, v):
        """ exact dot product"""
        return self.dx * v.dx + self.dy * v.dy + self.dz * v.dz

    def cross(self, v):
        """ exact cross product `self x v`"""
        return Vector(self.dy * v.dz - self.dz * v.dy,
                      self.dz * v.dx - self.dx * v.dz,
                      self.dx * v.dy - self.dy * v.dx)

    ## magnitude
    ## ---------

    def magnitude_squared(self):
        return self.dot(self)

    def magnitude(self):
        """ the magnitude as a ``RationalSqrt``"""
        return RationalSqrt(self.magnitude_squared())

    def get_magnitude(self, oom, rm):
        """ the magnitude, exact if rational and otherwise rounded at ``oom``"""
        return self.magnitude().sqrt(oom, rm)

    def unit_vector(self, oom, rm):
        """Return the vector scaled to unit length.  If the magnitude is
        irrational each component is rounded at ``oom``."""
        if self.is_zero():
            raise GeometryError('the zero vector has no unit vector')
        m = self.magnitude()
        if m.exact is not None:
            return self.divide(m.exact)
        d = m.sqrt(oom - GUARD_DIGITS, rm)
        return Vector(round_to_oom(self.dx / d, oom, rm),
                      round_to_oom(self.dy / d, oom, rm),
                      round_to_oom(self.dz / d, oom, rm))

    ## predicates
    ## ----------

    def is_zero(self):
        return self.dx == 0 and self.dy == 0 and self.dz == 0

    def equals(self, v, oom, rm):
        """ are the components equal once rounded at ``oom``?"""
        return self.rounded(oom, rm) == v.rounded(oom, rm)

    def is_reverse(self, v):
        return self == v.reverse()

    def is_scalar_multiple(self, v, oom, rm):
        """Is ``v`` parallel to this vector, to within ``oom``?

        The test is on the sine of the angle between the vectors, the
        magnitude of the cross product normalised by both lengths, so
        it does not depend on how long the vectors are.  The zero
        vector is only a scalar multiple of the zero vector.
        """
        if self.is_zero() or v.is_zero():
            return self.is_zero() and v.is_zero()
        c2 = self.cross(v).magnitude_squared()
        if c2 == 0:
            return True
        return RationalSqrt(c2 / (self.magnitude_squared()
                                  * v.magnitude_squared())).is_zero(oom, rm)

    def is_orthogonal(self, v, oom, rm):
        """ is the cosine of the angle to ``v`` zero at ``oom``?"""
        if self.is_zero() or v.is_zero():
            return False
        d = self.dot(v)
        if d == 0:
            return True
        return RationalSqrt(d * d / (self.magnitude_squared()
                                     * v.magnitude_squared())).is_zero(oom, rm)

    def direction(self):
        """Return the direction code, 1 to 8, of the octant this vector
        points into, counting zero components as non-negative:

        ====  ===  ===  ===
        code  dx   dy   dz
        ====  ===  ===  ===
        1     +    +    +
        2     +    +    -
        3     +    -    +
        4     +    -    -
        5     -    +    +
        6     -    +    -
        7     -    -    +
        8     -    -    -
        ====  ===  ===  ===
        """
        if self.is_zero():
            raise GeometryError('the zero vector has no direction')
        code = 1
        if self.dx < 0:
            code += 4
        if self.dy < 0:
            code += 2
        if self.dz < 0:
            code += 1
        return code

    ## measures and transforms
    ## -----------------------

    def angle(self, v, oom, rm):
        """ the angle in radians between this vector and ``v``"""
        if self.is_zero() or v.is_zero():
            raise GeometryError('the angle to a zero vector is undefined')
        mm = RationalSqrt(self.magnitude_squared() * v.magnitude_squared())
        c = self.dot(v) / mm.sqrt(oom - GUARD_DIGITS, rm)
        c = min(max(c, Fraction(-1)), Fraction(1))
        return acos(c, oom, rm)

    def rounded(self, oom, rm):
        """ a copy with each component rounded at ``oom``"""
        return Vector(round_to_oom(self.dx, oom, rm),
                      round_to_oom(self.dy, oom, rm),
                      round_to_oom(self.dz, oom, rm))

    def rotate(self, axis, theta, oom, rm):
        """Rotate by ``theta`` radians about the direction ``axis``
        (right-handed), rounding the result at ``oom``."""
        from exactgeom.xform import Rotation  # xform builds on Vector

        if to_rational(theta) == 0 or self.is_zero():
            return self
        return Rotation(axis, theta, oom, rm).mul(self).rounded(oom, rm)


Vector.ZERO = Vector(0, 0, 0)
Vector.I = Vector(1, 0, 0)
Vector.J = Vector(0, 1, 0)
Vector.K = Vector(0, 0, 1)
