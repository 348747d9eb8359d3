## generalized matrix transformation operations for exactgeom vectors
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

"""rational 3x3 matrices for rotating and scaling vectors.

Translation never goes through a matrix in **exactgeom**: shapes carry
an offset vector and translating a shape only replaces that offset.
Matrices are applied to the shape-local (relative) vectors, so only
the linear part of an affine transform is needed.

A matrix is represented as a list of three rows.
"""

from fractions import Fraction

from exactgeom.errors import DegenerateGeometryError, GeometryError
from exactgeom.precision import GUARD_DIGITS, isgoodnum, round_to_oom, \
    sin_cos, to_rational
from exactgeom.vector import Vector


class Matrix:
    """3x3 exact rational transformation matrix"""

    def __init__(self, a=None):
        self.m = [[Fraction(1), Fraction(0), Fraction(0)],
                  [Fraction(0), Fraction(1), Fraction(0)],
                  [Fraction(0), Fraction(0), Fraction(1)]]

        if isinstance(a, (tuple, list)):
            if len(a) == 3 and all(isinstance(r, (tuple, list)) and len(r) == 3
                                   for r in a):
                for i in range(3):
                    for j in range(3):
                        self.m[i][j] = self._element(a[i][j])
            elif len(a) == 9:
                for i in range(3):
                    for j in range(3):
                        self.m[i][j] = self._element(a[i * 3 + j])
            else:
                raise GeometryError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not None:
            raise GeometryError('bad thing used in attempt to initialize matrix: {}'.format(a))

    @staticmethod
    def _element(x):
        if not isgoodnum(x):
            raise GeometryError('bad element in matrix initialization: {}'.format(x))
        return to_rational(x)

    def __repr__(self):
        return "Matrix({},{},{})".format(self.m[0], self.m[1], self.m[2])

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise GeometryError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i > 2:
            raise GeometryError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    # matrix times vector, Mx
    def mul(self, x):
        if not isinstance(x, Vector):
            raise GeometryError('bad thing passed to mul(): {}'.format(x))
        c = (x.dx, x.dy, x.dz)
        return Vector(*(sum(a * b for a, b in zip(row, c)) for row in self.m))


def Rotation(axis, theta, oom, rm):
    """Return the right-handed rotation matrix for angle ``theta``
    (radians) about the direction ``axis``.

    The unit axis and the sine and cosine of ``theta`` are irrational
    in general; they are rounded at ``oom`` less ``GUARD_DIGITS`` so
    that a vector rotated and then rounded at ``oom`` is correct to
    that precision.
    """
    if axis.is_zero():
        raise DegenerateGeometryError('zero-length rotation axis not allowed')
    work = oom - GUARD_DIGITS
    u = axis.unit_vector(work, rm)
    ux = u.dx
    uy = u.dy
    uz = u.dz

    sang, cang = sin_cos(theta, work, rm)
    cmin = 1 - cang

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin]]

    return Matrix([[round_to_oom(e, work, rm) for e in row] for row in R])


def Scale(factor):
    """ uniform scaling by a number, or per axis by the components of a ``Vector``"""
    if isgoodnum(factor):
        sx = sy = sz = to_rational(factor)
    elif isinstance(factor, Vector):
        sx = factor.dx
        sy = factor.dy
        sz = factor.dz
    else:
        raise GeometryError('bad scaling values passed to Scale')

    S = [[sx, 0, 0],
         [0, sy, 0],
         [0, 0, sz]]
    return Matrix(S)
