"""
:py:mod:`mp_rational.numeric_category`: Numeric category tags
==============================================================

Conversions out of a :py:class:`~mp_rational.rational.Rational` (see
:py:mod:`mp_rational.conversions`) behave differently depending on the broad
category of number being converted to. This module classifies Python, numpy
and gmpy2 numeric types into one of a small closed set of categories::

    >>> from fractions import Fraction
    >>> import numpy as np
    
    >>> number_category(int)
    <NumberKind.INTEGER: 0>
    >>> number_category(np.float32)
    <NumberKind.FLOATING_POINT: 1>
    >>> number_category(Fraction(1, 3))
    <NumberKind.RATIONAL: 2>

.. autoclass:: NumberKind
    :members:

.. autofunction:: number_category

"""

import numbers

from decimal import Decimal

from enum import IntEnum

import numpy as np

import gmpy2


__all__ = [
    "NumberKind",
    "number_category",
]


class NumberKind(IntEnum):
    """
    Numeric category tags. The integer values are stable and may be stored.
    """
    
    UNKNOWN = -1
    INTEGER = 0
    FLOATING_POINT = 1
    RATIONAL = 2
    FIXED_POINT = 3
    COMPLEX = 4


_INTEGER_TYPES = (numbers.Integral, np.integer, type(gmpy2.mpz(0)))

# NB: Decimal and mpfr are not binary IEEE types but are floating point
# nonetheless; see conversions.rational_to_float for their handling.
_FLOATING_POINT_TYPES = (float, np.floating, Decimal, type(gmpy2.mpfr(0)))

_RATIONAL_TYPES = (numbers.Rational, type(gmpy2.mpq(0)))

_COMPLEX_TYPES = (numbers.Complex, np.complexfloating)


def number_category(value_or_type):
    """
    Return the :py:class:`NumberKind` of a numeric type (or of the type of a
    numeric value).
    """
    if isinstance(value_or_type, type):
        t = value_or_type
    else:
        t = type(value_or_type)
    
    # NB: Order matters: every Integral is also a Rational and every Rational
    # is also a Complex.
    if issubclass(t, _INTEGER_TYPES):
        return NumberKind.INTEGER
    elif issubclass(t, _FLOATING_POINT_TYPES):
        return NumberKind.FLOATING_POINT
    elif issubclass(t, _RATIONAL_TYPES):
        return NumberKind.RATIONAL
    elif issubclass(t, _COMPLEX_TYPES):
        return NumberKind.COMPLEX
    else:
        return NumberKind.UNKNOWN
