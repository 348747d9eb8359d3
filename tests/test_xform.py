import pytest
from fractions import Fraction

from exactgeom.errors import DegenerateGeometryError, GeometryError
from exactgeom.precision import RoundingMode, pi
from exactgeom.vector import Vector
from exactgeom.xform import *
## unit tests for exactgeom xform.py

RM = RoundingMode.HALF_EVEN


def rows(M):
    return [M.getrow(i) for i in range(3)]


class TestXform:
    """unit tests for exactgeom matrix operations"""

    def test_matrix(self):
        foo = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9])
        bar = Matrix([[1, 0, 1], [0, 1, 1], [0, 0, 1]])
        baz = Vector(1, 2, 3)
        I = Matrix()
        assert(rows(I) == [[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert(foo.get(1, 2) == 6)
        assert(foo.getrow(2) == [7, 8, 9])
        assert(bar.get(0, 2) == 1)
        assert(foo.mul(baz) == Vector(14, 32, 50))
        assert(bar.mul(baz) == Vector(4, 5, 3))
        assert(I.mul(baz) == baz)
        assert(Matrix([Fraction(1, 2)] * 9).get(2, 2) == Fraction(1, 2))

    def test_bad_matrices(self):
        with pytest.raises(GeometryError):
            Matrix([1, 2, 3])
        with pytest.raises(GeometryError):
            Matrix([1, 2, 3, 4, 5, 6, 7, 8, True])
        with pytest.raises(GeometryError):
            Matrix('identity')
        with pytest.raises(GeometryError):
            Matrix().get(3, 0)
        with pytest.raises(GeometryError):
            Matrix().getrow(-1)
        with pytest.raises(GeometryError):
            Matrix().mul(2)

    def test_rotation(self):
        quarter = pi(-20, RM) / 2
        R = Rotation(Vector.K, quarter, -3, RM)
        assert(rows(R) == [[0, -1, 0], [1, 0, 0], [0, 0, 1]])
        assert(rows(Rotation(Vector(0, 0, 5), quarter, -3, RM)) == rows(R))
        assert(R.mul(Vector(1, 2, 3)) == Vector(-2, 1, 3))
        back = Rotation(Vector.K, -quarter, -3, RM)
        assert(back.mul(R.mul(Vector(1, 2, 3))) == Vector(1, 2, 3))
        with pytest.raises(DegenerateGeometryError):
            Rotation(Vector.ZERO, quarter, -3, RM)

    def test_rotation_rounds_with_guard_digits(self):
        R = Rotation(Vector.K, pi(-20, RM) / 4, -3, RM)
        c = R.get(0, 0)
        assert(c == Fraction(707106781, 10**9))
        assert(R.get(1, 0) == c)
        assert(R.get(0, 1) == -c)

    def test_scale(self):
        S = Scale(2)
        assert(S.mul(Vector(1, 2, 3)) == Vector(2, 4, 6))
        S = Scale(Fraction(1, 2))
        assert(S.mul(Vector(2, 4, 6)) == Vector(1, 2, 3))
        S = Scale(Vector(1, 2, 4))
        assert(rows(S) == [[1, 0, 0], [0, 2, 0], [0, 0, 4]])
        assert(S.mul(Vector(1, 1, 1)) == Vector(1, 2, 4))
        with pytest.raises(GeometryError):
            Scale('big')
        with pytest.raises(GeometryError):
            Scale(True)
