import pytest

from decimal import Decimal

from fractions import Fraction

import numpy as np

import gmpy2

from mp_rational.numeric_category import NumberKind, number_category

from mp_rational.rational import Rational, GMPRational


@pytest.mark.parametrize("value_or_type,exp", [
    # Integers
    (int, NumberKind.INTEGER),
    (bool, NumberKind.INTEGER),
    (np.int8, NumberKind.INTEGER),
    (np.uint64, NumberKind.INTEGER),
    (type(gmpy2.mpz(0)), NumberKind.INTEGER),
    (123, NumberKind.INTEGER),
    # Floating point
    (float, NumberKind.FLOATING_POINT),
    (np.float16, NumberKind.FLOATING_POINT),
    (np.float32, NumberKind.FLOATING_POINT),
    (np.float64, NumberKind.FLOATING_POINT),
    (np.longdouble, NumberKind.FLOATING_POINT),
    (Decimal, NumberKind.FLOATING_POINT),
    (type(gmpy2.mpfr(0)), NumberKind.FLOATING_POINT),
    (1.5, NumberKind.FLOATING_POINT),
    # Rationals
    (Fraction, NumberKind.RATIONAL),
    (Rational, NumberKind.RATIONAL),
    (GMPRational, NumberKind.RATIONAL),
    (type(gmpy2.mpq(0)), NumberKind.RATIONAL),
    (Fraction(1, 3), NumberKind.RATIONAL),
    (Rational(1, 3), NumberKind.RATIONAL),
    # Complex
    (complex, NumberKind.COMPLEX),
    (np.complex64, NumberKind.COMPLEX),
    (1j, NumberKind.COMPLEX),
    # Other
    (str, NumberKind.UNKNOWN),
    (object, NumberKind.UNKNOWN),
    ("123", NumberKind.UNKNOWN),
])
def test_number_category(value_or_type, exp):
    assert number_category(value_or_type) == exp


def test_number_kind_values():
    # Values are stable
    assert NumberKind.UNKNOWN == -1
    assert NumberKind.INTEGER == 0
    assert NumberKind.FLOATING_POINT == 1
    assert NumberKind.RATIONAL == 2
    assert NumberKind.FIXED_POINT == 3
    assert NumberKind.COMPLEX == 4
