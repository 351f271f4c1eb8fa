r"""
:py:mod:`mp_rational.conversions`: Exact conversions to and from rationals
==========================================================================

This module contains the routines used to convert binary floating point
values into exact rationals and to convert rationals into other numeric types.

Floating point to rational
--------------------------

Every finite binary floating point value :math:`x` can be written exactly as
:math:`f 2^e` where :math:`f` and :math:`e` are integers.
:py:func:`decompose_float` computes this decomposition at the full precision
of the floating point type (including numpy's ``float16``, ``float32`` and
``longdouble`` types)::

    >>> decompose_float(0.75)
    (6755399441055744, -53)

Rational to other types
-----------------------

:py:func:`eval_convert_to` converts a
:py:class:`~mp_rational.rational.Rational` into any other numeric type. The
conversion strategy depends on the :py:func:`number_category` of the target
type:

* Floating point: the nearest representable value is chosen (ties to even)
  using :py:func:`rational_to_float`.
* Integer: the value is truncated toward zero.
* Other (e.g. rational): the numerator and denominator are converted
  separately and then divided using the target type's division operator.

For example::

    >>> from mp_rational.rational import Rational
    >>> import numpy as np
    
    >>> eval_convert_to(float, Rational(1, 3))
    0.3333333333333333
    >>> eval_convert_to(np.float16, Rational(1, 3))
    0.3333
    >>> eval_convert_to(int, Rational(-7, 2))
    -3

API
---

.. autofunction:: decompose_float

.. autofunction:: rational_to_float

.. autofunction:: eval_convert_to

"""

import math

import decimal

from decimal import Decimal

import numpy as np

import gmpy2

from mp_rational.numeric_category import NumberKind, number_category


__all__ = [
    "is_binary_float",
    "decompose_float",
    "rational_to_float",
    "eval_convert_to",
]


def is_binary_float(value):
    """
    True iff the value is a binary IEEE floating point number (i.e. a Python
    float or numpy floating point scalar).
    """
    return isinstance(value, (float, np.floating))


def decompose_float(value):
    """
    Decompose a finite binary floating point value into a pair of integers
    ``(mantissa, exponent)`` such that ``value == mantissa * 2**exponent``
    exactly.
    
    Raises :py:exc:`ValueError` for infinities and NaN.
    """
    if np.isnan(value):
        raise ValueError("Cannot convert NaN to a rational.")
    if np.isinf(value):
        raise ValueError("Cannot convert infinity to a rational.")
    
    digits = np.finfo(type(value)).nmant + 1
    
    if isinstance(value, np.floating):
        fraction, exponent = np.frexp(value)
        mantissa = int(np.ldexp(fraction, digits))
    else:
        fraction, exponent = math.frexp(value)
        mantissa = int(math.ldexp(fraction, digits))
    
    return (mantissa, int(exponent) - digits)


def _int_to_binary_float(value, float_type):
    """
    Convert a non-negative Python int (which must be exactly representable)
    into the specified floating point type.
    """
    if float_type is float:
        return float(value)
    
    # Python ints are converted to numpy floats via a double which may not be
    # wide enough (e.g. for longdouble) so the value is built up 32 bits at a
    # time.
    result = float_type(0)
    shift = 0
    while value:
        result += float_type(np.ldexp(float_type(value & 0xFFFFFFFF), shift))
        value >>= 32
        shift += 32
    return result


def rational_to_float(numerator, denominator, float_type=float):
    """
    Convert the rational value numerator/denominator into the nearest
    representable value of a floating point type (ties go to the value with
    an even mantissa).
    
    Parameters
    ==========
    numerator : int
    denominator : int
        Any integral types. The denominator must be positive.
    float_type : type
        A binary floating point type (:py:class:`float` or a numpy floating
        point type), :py:class:`decimal.Decimal` (rounded according to the
        current decimal context) or :py:class:`gmpy2.mpfr` (rounded according
        to the current gmpy2 context).
    
    Returns
    =======
    value : float_type
        Values too small to represent become (signed) zero, possibly via
        subnormal values. Values too large become (signed) infinity.
    """
    numerator = int(numerator)
    denominator = int(denominator)
    
    if issubclass(float_type, Decimal):
        return float_type(decimal.getcontext().divide(
            Decimal(numerator),
            Decimal(denominator),
        ))
    elif issubclass(float_type, type(gmpy2.mpfr(0))):
        return gmpy2.mpfr(gmpy2.mpq(numerator, denominator))
    
    info = np.finfo(float_type)
    
    if numerator == 0:
        return float_type(0)
    
    negative = numerator < 0
    numerator = abs(numerator)
    
    # Find the exponent, i.e. floor(log2(numerator/denominator))
    exponent = numerator.bit_length() - denominator.bit_length()
    if exponent >= 0:
        if numerator < (denominator << exponent):
            exponent -= 1
    else:
        if (numerator << -exponent) < denominator:
            exponent -= 1
    
    if exponent >= info.maxexp:
        result = float_type(math.inf)
        return -result if negative else result
    
    # The weight of the least significant mantissa bit. Below the normal range
    # this is fixed to give gradual underflow.
    lsb_exponent = max(exponent - info.nmant, info.minexp - info.nmant)
    
    if lsb_exponent >= 0:
        divisor = denominator << lsb_exponent
        mantissa, remainder = divmod(numerator, divisor)
    else:
        divisor = denominator
        mantissa, remainder = divmod(numerator << -lsb_exponent, divisor)
    
    # Round half to even
    if 2*remainder > divisor or (2*remainder == divisor and mantissa & 1):
        mantissa += 1
    
    # Rounding up may carry into the next binade and overflow
    if mantissa.bit_length() + lsb_exponent > info.maxexp:
        result = float_type(math.inf)
    elif float_type is float:
        result = math.ldexp(float(mantissa), lsb_exponent)
    else:
        result = float_type(np.ldexp(
            _int_to_binary_float(mantissa, float_type),
            lsb_exponent,
        ))
    
    return -result if negative else result


def _convert_to_floating_point(target_type, value):
    return rational_to_float(value.numerator, value.denominator, target_type)


def _convert_to_integer(target_type, value):
    truncated = value.backend.truncating_divide(value.numerator, value.denominator)
    
    if issubclass(target_type, np.integer):
        # Fixed width integers saturate
        info = np.iinfo(target_type)
        return target_type(min(max(int(truncated), info.min), info.max))
    elif isinstance(truncated, target_type) and not issubclass(target_type, bool):
        return truncated
    else:
        return target_type(int(truncated))


def _convert_by_components(target_type, value):
    numerator = value.numerator
    denominator = value.denominator
    if not isinstance(numerator, int):
        numerator = int(numerator)
        denominator = int(denominator)
    
    result = target_type(numerator)
    result /= target_type(denominator)
    return result


_CONVERTERS = {
    NumberKind.FLOATING_POINT: _convert_to_floating_point,
    NumberKind.INTEGER: _convert_to_integer,
}


def eval_convert_to(target_type, value):
    """
    Convert a :py:class:`~mp_rational.rational.Rational` into another numeric
    type.
    
    Parameters
    ==========
    target_type : type
        The numeric type to convert to. See
        :py:func:`~mp_rational.numeric_category.number_category` for the types
        recognised.
    value : :py:class:`~mp_rational.rational.Rational`
    
    Returns
    =======
    result : target_type
    """
    converter = _CONVERTERS.get(number_category(target_type), _convert_by_components)
    return converter(target_type, value)
