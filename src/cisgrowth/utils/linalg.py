from __future__ import annotations

from fractions import Fraction
from typing import List, Sequence, Union

import sympy

Number = Union[int, Fraction]


def _exact(x: float) -> sympy.Rational:
    f = Fraction(float(x))
    return sympy.Rational(f.numerator, f.denominator)


def exact_matrix(M: Sequence[Sequence[float]]) -> sympy.Matrix:
    """Rational sympy copy of a real matrix (floats are taken at face value)."""
    return sympy.Matrix([[_exact(x) for x in row] for row in M])


def characteristic_polynomial(M: Sequence[Sequence[float]]) -> List[Number]:
    """Coefficients of det(xI - M), leading coefficient first.

    Transfer matrices hold integer counts, so the coefficients come back as
    ints; non-integral entries yield Fractions.
    """
    x = sympy.Symbol("x")
    poly = exact_matrix(M).charpoly(x)
    out: List[Number] = []
    for c in poly.all_coeffs():
        q = sympy.Rational(c)
        if q.q == 1:
            out.append(int(q.p))
        else:
            out.append(Fraction(int(q.p), int(q.q)))
    return out
