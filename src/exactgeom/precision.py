## exact rational arithmetic and precision control for exactgeom
## Born on 19 October, 2026
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

"""exact rational arithmetic and precision control

====================
OVERVIEW
====================

All coordinates in **exactgeom** are exact rationals
(``fractions.Fraction``).  Sums, differences, dot and cross products of
rationals stay rational, so most of the kernel never rounds anything.
Irrational quantities only appear when a length (a square root) or an
angle (a trigonometric function) has to be materialised.

precision order
===============

Every operation that has to round takes a *precision order*, ``oom``,
which is an integer exponent of ten.  A value rounded at ``oom=-3`` is
a multiple of ``10**-3``.  The same ``oom`` is the zero tolerance of
the geometric predicates: a distance is treated as zero when it rounds
to zero at the caller's ``oom``.  There is no default precision
anywhere in the kernel; callers always say what they want.

rounding modes
==============

``RoundingMode`` names the usual policies (``HALF_UP``, ``FLOOR``,
*etc.*).  Every operation that rounds takes one explicitly, next to
``oom``.

square roots
============

``RationalSqrt(x)`` stands for the square root of a non-negative
rational ``x``.  If ``x`` is the square of a rational, the root is held
exactly; otherwise ``sqrt(oom, rm)`` returns the correctly rounded
root.  ``mpmath`` supplies the estimate and exact integer comparisons
pin the result, so rounding never depends on binary floating point.

"""

import math
from decimal import Decimal, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, \
    ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP
from enum import Enum
from fractions import Fraction
from functools import cached_property, total_ordering

import mpmath as mpm

from exactgeom.errors import GeometryError


## constants
## extra decimal digits carried by irrational intermediates (unit
## vectors, trigonometry) before the final rounding
GUARD_DIGITS = 6

ZERO = Fraction(0)
ONE = Fraction(1)


class RoundingMode(Enum):
    """policy for rounding an inexact value to a precision order"""

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN


## operations on scalars
## ---------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and \
        isinstance(n, (int, float, Fraction, Decimal))


def to_rational(value):
    """Convert ``value`` to an exact ``Fraction``.

    Floats are converted through their shortest decimal representation,
    so ``0.1`` becomes ``1/10`` rather than the nearest binary fraction.
    Strings are parsed by ``Fraction``, so ``'1/3'`` and ``'0.25'`` both
    work.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise GeometryError('bad boolean passed as a number: {}'.format(value))
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise GeometryError('bad non-finite number: {}'.format(value))
        return Fraction(repr(value))
    if isinstance(value, (Decimal, str)):
        try:
            return Fraction(value)
        except (ValueError, ZeroDivisionError) as exc:
            raise GeometryError('bad number: {!r}'.format(value)) from exc
    raise GeometryError('bad number: {!r}'.format(value))


def unit(oom):
    """ the value ``10**oom`` as an exact rational"""
    return Fraction(10) ** oom


def _round_quotient(n, d, rm):
    """round the rational ``n/d`` (with ``d > 0``) to an integer"""
    q, r = divmod(n, d)  # q is the floor
    if r == 0:
        return q
    positive = n > 0
    if rm is RoundingMode.FLOOR:
        return q
    if rm is RoundingMode.CEILING:
        return q + 1
    if rm is RoundingMode.DOWN:
        return q if positive else q + 1
    if rm is RoundingMode.UP:
        return q + 1 if positive else q
    twice = 2 * r
    if twice < d:
        return q
    if twice > d:
        return q + 1
    ## exactly half way
    if rm is RoundingMode.HALF_UP:
        return q + 1 if positive else q
    if rm is RoundingMode.HALF_DOWN:
        return q if positive else q + 1
    if rm is RoundingMode.HALF_EVEN:
        return q if q % 2 == 0 else q + 1
    raise GeometryError('bad rounding mode: {}'.format(rm))


def round_to_oom(x, oom, rm):
    """Round the rational ``x`` to a multiple of ``10**oom`` using
    rounding mode ``rm``, and return it as an exact ``Fraction``.
    """
    u = unit(oom)
    scaled = to_rational(x) / u
    return _round_quotient(scaled.numerator, scaled.denominator, rm) * u


def to_decimal(x, oom, rm):
    """Round ``x`` at ``oom`` and return it as a ``Decimal`` whose
    exponent is ``oom``.
    """
    scaled = to_rational(x) / unit(oom)
    k = _round_quotient(scaled.numerator, scaled.denominator, rm)
    return Decimal(k).scaleb(oom)


def is_zero(x, oom, rm):
    """ does the magnitude of rational ``x`` round to zero at ``oom``?"""
    return round_to_oom(abs(to_rational(x)), oom, rm) == 0


def sign(x, oom, rm):
    """ -1, 0 or 1, treating values that round to zero at ``oom`` as zero"""
    if is_zero(x, oom, rm):
        return 0
    return 1 if x > 0 else -1


## square roots
## ------------

def isqrt(n):
    """Exact integer square root, ``floor(sqrt(n))``.  The estimate comes
    from mpmath at a working precision large enough for ``n``; the
    integer checks make the result exact whatever the estimate.
    """
    if n < 0:
        raise GeometryError('bad negative argument to isqrt: {}'.format(n))
    if n < 2:
        return n
    with mpm.workprec(n.bit_length() // 2 + 32):
        k = int(mpm.floor(mpm.sqrt(mpm.mpf(n))))
    while k * k > n:
        k -= 1
    while (k + 1) * (k + 1) <= n:
        k += 1
    return k


def _round_sqrt(x, oom, rm):
    """correctly rounded square root of the non-negative rational ``x``"""
    u = unit(oom)
    y = x / (u * u)
    k = isqrt(y.numerator // y.denominator)
    if k * k == y:
        return k * u
    ## k < sqrt(y) < k + 1
    if rm in (RoundingMode.DOWN, RoundingMode.FLOOR):
        r = k
    elif rm in (RoundingMode.UP, RoundingMode.CEILING):
        r = k + 1
    else:
        half = Fraction(2 * k + 1, 2) ** 2
        if y < half:
            r = k
        elif y > half:
            r = k + 1
        elif rm is RoundingMode.HALF_UP:
            r = k + 1
        elif rm is RoundingMode.HALF_DOWN:
            r = k
        else:
            r = k if k % 2 == 0 else k + 1
    return r * u


@total_ordering
class RationalSqrt:
    """The square root of a non-negative rational, held exactly when
    it is rational and rounded on demand when it is not.

    Comparisons are exact: two roots compare the way their radicands
    do.
    """

    def __init__(self, x):
        x = to_rational(x)
        if x < 0:
            raise GeometryError('bad negative argument to RationalSqrt: {}'.format(x))
        self.x = x

    def __repr__(self):
        return "RationalSqrt({})".format(self.x)

    def __eq__(self, other):
        if isinstance(other, RationalSqrt):
            return self.x == other.x
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, RationalSqrt):
            return self.x < other.x
        return NotImplemented

    def __hash__(self):
        return hash(self.x)

    @cached_property
    def exact(self):
        """the exact rational root, or ``None`` if the root is irrational"""
        n = self.x.numerator
        d = self.x.denominator
        rn = isqrt(n)
        rd = isqrt(d)
        if rn * rn == n and rd * rd == d:
            return Fraction(rn, rd)
        return None

    def sqrt(self, oom, rm):
        """Return the exact root if there is one, otherwise the root
        rounded at ``oom`` using ``rm``."""
        if self.exact is not None:
            return self.exact
        return _round_sqrt(self.x, oom, rm)

    def rounded(self, oom, rm):
        """the root rounded at ``oom``, even when it is exact"""
        return _round_sqrt(self.x, oom, rm)

    def is_zero(self, oom, rm):
        """ does the root round to zero at ``oom``?"""
        return self.x == 0 or _round_sqrt(self.x, oom, rm) == 0


def sqrt(x, oom, rm):
    """ square root of rational ``x``: exact if possible, else rounded"""
    return RationalSqrt(x).sqrt(oom, rm)


def sum_sqrt(xs, oom, rm):
    """Sum the square roots of the rationals ``xs``: exactly when every
    root is rational, otherwise at ``GUARD_DIGITS`` extra digits and then
    rounded at ``oom``."""
    roots = [RationalSqrt(x) for x in xs]
    if all(r.exact is not None for r in roots):
        return sum(r.exact for r in roots)
    return round_to_oom(sum(r.sqrt(oom - GUARD_DIGITS, rm) for r in roots), oom, rm)


## trigonometry
## ------------

def _digits(oom):
    return max(-oom, 0) + GUARD_DIGITS


def _mpf(x):
    x = to_rational(x)
    return mpm.mpf(x.numerator) / x.denominator


def _from_mpf(v, digits):
    scale = 10 ** digits
    return Fraction(int(mpm.nint(v * scale)), scale)


def sin_cos(theta, oom, rm):
    """Return ``(sin(theta), cos(theta))`` for ``theta`` in radians,
    each rounded at ``oom``."""
    digits = _digits(oom)
    with mpm.workdps(digits + 10):
        t = _mpf(theta)
        s = _from_mpf(mpm.sin(t), digits)
        c = _from_mpf(mpm.cos(t), digits)
    return round_to_oom(s, oom, rm), round_to_oom(c, oom, rm)


def acos(x, oom, rm):
    """ arc cosine in radians of rational ``x``, rounded at ``oom``"""
    x = to_rational(x)
    if x < -1 or x > 1:
        raise GeometryError('bad argument to acos: {}'.format(x))
    digits = _digits(oom)
    with mpm.workdps(digits + 10):
        a = _from_mpf(mpm.acos(_mpf(x)), digits)
    return round_to_oom(a, oom, rm)


def pi(oom, rm):
    """ pi rounded at ``oom``"""
    digits = _digits(oom)
    with mpm.workdps(digits + 10):
        p = _from_mpf(+mpm.pi, digits)
    return round_to_oom(p, oom, rm)
