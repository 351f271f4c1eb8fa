r"""
:py:mod:`mp_rational.rational`: Exact rational numbers over any integer backend
===============================================================================

This module implements :py:class:`Rational`, an exact rational number type
whose numerator and denominator are held in an arbitrary-precision integer
type provided by an *integer backend* (see
:py:mod:`mp_rational.integer_backends`).

Usage
-----

Rationals may be constructed from integers, floating point values (exactly),
other rationals or strings::

    >>> from mp_rational.rational import Rational

    >>> Rational(3, 6)
    Rational(1, 2)
    >>> Rational("0x10/0x4")
    Rational(4)
    >>> Rational(0.75)
    Rational(3, 4)

Values are always held in canonical form: the numerator and denominator share
no common factor, the denominator is positive and zero is represented as
``0/1``::

    >>> r = Rational(-10, -4)
    >>> r.numerator, r.denominator
    (5, 2)

The usual Python arithmetic and comparison operators are supported and never
modify their operands::

    >>> print(Rational(1, 3) + Rational(1, 6))
    1/2
    >>> Rational(1, 3) > 0.3333333333333333
    True
    >>> Rational(1) / Rational(0)
    Traceback (most recent call last):
      ...
    DivideByZeroError: Divide by zero.

:py:class:`Rational` is registered as a :py:class:`numbers.Rational` and
supports the rest of that interface in the same way as
:py:class:`fractions.Fraction` (``//``, ``%``, :py:func:`divmod`, ``**``,
:py:func:`round` and so on)::

    >>> Rational(2, 3) ** -2
    Rational(9, 4)
    >>> round(Rational(5, 2))
    2

Values are formatted in the same way as GMP's ``mpq`` type, that is, the
denominator is omitted when it is 1. Format flags are applied to both the
numerator and denominator::

    >>> from mp_rational.integer_backends import FormatFlags
    >>> Rational(255, 16).to_string(flags=FormatFlags.HEX | FormatFlags.SHOWBASE)
    '0xff/0x10'


Integer backends
----------------

:py:class:`Rational` uses the ``"native"`` backend (Python :py:class:`int`).
:py:class:`GMPRational` is identical but uses the ``"gmp"`` backend
(:py:class:`gmpy2.mpz`). A :py:class:`Rational` subclass for any registered
backend may be obtained using :py:func:`rational_type`. Values of different
backends may be freely mixed; the result takes the type of the left-hand
:py:class:`Rational` operand.


Low-level operations
--------------------

In addition to the operator overloads, the ``eval_*`` functions below perform
arithmetic *in place*, modifying only their first argument. These are the
primitives on which the operators are built and may be useful when
accumulating results in a loop::

    >>> total = Rational()
    >>> for i in range(1, 4):
    ...     eval_add(total, Rational(1, i))
    >>> total
    Rational(11, 6)

.. warning::

    Since the ``eval_*`` functions modify values in place, a value which has
    been placed in a set or used as a dictionary key must not be passed as
    their first argument.


API
---

.. autoclass:: Rational
    :members:

.. autoclass:: GMPRational

.. autofunction:: rational_type

.. autofunction:: assign_components

.. autofunction:: eval_add

.. autofunction:: eval_subtract

.. autofunction:: eval_multiply

.. autofunction:: eval_divide

.. autofunction:: eval_negate

.. autofunction:: eval_is_zero

.. autofunction:: eval_get_sign

.. autofunction:: hash_value

.. autoexception:: RationalParseError

.. autoexception:: DivideByZeroError

.. autoexception:: ZeroDenominatorError

"""

import sys

import numbers

import operator

import numpy as np

from mp_rational.integer_backends import (
    FormatFlags,
    NATIVE_BACKEND,
    GMP_BACKEND,
    get_backend,
)

from mp_rational.numeric_category import NumberKind, number_category

from mp_rational.conversions import (
    is_binary_float,
    decompose_float,
    eval_convert_to,
)


__all__ = [
    "Rational",
    "GMPRational",
    "rational_type",
    "assign_components",
    "eval_add",
    "eval_subtract",
    "eval_multiply",
    "eval_divide",
    "eval_negate",
    "eval_is_zero",
    "eval_get_sign",
    "hash_value",
    "RationalParseError",
    "DivideByZeroError",
    "ZeroDenominatorError",
]


class RationalParseError(ValueError):
    """
    Thrown when a string could not be parsed as a rational. The offending
    string is given by the :py:attr:`string` attribute.
    """

    def __init__(self, string):
        super(RationalParseError, self).__init__(
            "Could not parse the string \"{}\" as a valid rational "
            "number.".format(string)
        )
        self.string = string


class DivideByZeroError(ZeroDivisionError):
    """Thrown when dividing by a rational whose value is zero."""


class ZeroDenominatorError(DivideByZeroError):
    """Thrown when attempting to create a rational with a zero denominator."""


_INTEGER_CHARACTERS = frozenset("0123456789+-xX")

_HEX_LETTERS = frozenset("abcdefABCDEF")


def _scan_integer(string, position, have_hex):
    """
    Scan forward from position over characters which may form part of an
    integer literal. Hex digit letters are only accepted once an 'x' has been
    seen (possibly in an earlier call, as indicated by have_hex).

    Returns (text, new_position, have_hex).
    """
    start = position
    while position < len(string):
        c = string[position]
        if c in "xX":
            have_hex = True
        elif c not in _INTEGER_CHARACTERS and not (have_hex and c in _HEX_LETTERS):
            break
        position += 1
    return (string[start:position], position, have_hex)


_PyHASH_MODULUS = sys.hash_info.modulus

_PyHASH_INF = sys.hash_info.inf


class Rational(object):
    r"""
    An exact rational number.

    Parameters
    ==========
    value : int or float or str or rational
        The value to be represented.

        If an integer (of any integral type, including numpy and gmpy2
        integers), the rational will have that value.

        If a binary floating point number (Python or numpy), the rational will
        hold the *exact* value of that number. For example, ``Rational(0.1)``
        is ``3602879701896397/36028797018963968``. NaN and infinities are
        rejected with :py:exc:`ValueError`.

        If a string, it is parsed (see :py:meth:`parse`).

        If a rational (another :py:class:`Rational`, regardless of backend,
        or any :py:class:`numbers.Rational` such as
        :py:class:`fractions.Fraction`), the value is copied.

        Other types (e.g. :py:class:`decimal.Decimal`) are only accepted by
        the :py:meth:`explicit` constructor.
    denominator : integer, optional
        If given, value must be an integer and the rational will be
        value/denominator (reduced to canonical form). A zero denominator
        results in a :py:exc:`ZeroDenominatorError`.
    """

    __slots__ = ["_numerator", "_denominator"]

    backend = NATIVE_BACKEND
    """The :py:class:`~mp_rational.integer_backends.IntegerBackend` used."""

    is_exact = True
    """Arithmetic on rationals never rounds."""

    is_integer = False
    """Rationals are not restricted to integer values."""

    def __init__(self, value=0, denominator=None):
        if denominator is None:
            self.assign(value)
        else:
            assign_components(self, value, denominator)

    @classmethod
    def explicit(cls, value):
        """
        Construct a rational from a value which is only *explicitly*
        convertible into an integer (e.g. a :py:class:`decimal.Decimal` or a
        string containing an integer). The value is converted (and possibly
        narrowed) using the backend's
        :py:meth:`~mp_rational.integer_backends.IntegerBackend.explicit_convert`.
        """
        self = cls.__new__(cls)
        self._set(cls.backend.explicit_convert(value), cls.backend.from_int(1))
        return self

    @classmethod
    def parse(cls, string):
        """
        Parse a string of the form ``N`` or ``N/D`` where N and D are
        (optionally signed) integer literals. Literals may be given in
        hexadecimal using a ``0x`` prefix or octal using a leading ``0``.

        The resulting rational is reduced to canonical form, for example
        ``"3/6"`` becomes 1/2.

        Raises :py:exc:`RationalParseError` if unexpected characters follow
        the rational, :py:exc:`ValueError` if either integer is malformed or
        :py:exc:`ZeroDenominatorError` if the denominator is zero.
        """
        numerator_text, position, have_hex = _scan_integer(string, 0, False)

        denominator_text = None
        if string[position:position + 1] == "/":
            denominator_text, position, have_hex = _scan_integer(
                string,
                position + 1,
                have_hex,
            )

        if position != len(string):
            raise RationalParseError(string)

        numerator = cls.backend.parse(numerator_text)
        if denominator_text is None:
            denominator = cls.backend.from_int(1)
        else:
            denominator = cls.backend.parse(denominator_text)

        self = cls.__new__(cls)
        assign_components(self, numerator, denominator)
        return self

    def _set(self, numerator, denominator):
        # NB: Callers are responsible for the canonical form invariant.
        self._numerator = numerator
        self._denominator = denominator

    def assign(self, value):
        """
        Replace the value of this rational, in place, with any value accepted
        by the :py:class:`Rational` constructor. Returns self.
        """
        backend = self.backend

        if isinstance(value, Rational):
            # Already canonical; just convert between backends if necessary
            self._set(
                backend.convert(value._numerator),
                backend.convert(value._denominator),
            )
        elif isinstance(value, str):
            parsed = type(self).parse(value)
            self._set(parsed._numerator, parsed._denominator)
        elif is_binary_float(value):
            self._assign_float(value)
        else:
            kind = number_category(value)
            if kind == NumberKind.INTEGER:
                self._set(backend.convert(value), backend.from_int(1))
            elif kind == NumberKind.RATIONAL:
                assign_components(self, value.numerator, value.denominator)
            else:
                raise TypeError(
                    "Cannot implicitly convert {} to {}; use {}.explicit() "
                    "instead.".format(
                        type(value).__name__,
                        type(self).__name__,
                        type(self).__name__,
                    )
                )

        return self

    def _assign_float(self, value):
        mantissa, exponent = decompose_float(value)

        numerator = self.backend.from_int(mantissa)
        denominator = self.backend.from_int(1)
        if exponent > 0:
            numerator <<= exponent
        elif exponent < 0:
            denominator <<= -exponent

        assign_components(self, numerator, denominator)

    @property
    def numerator(self):
        """The numerator (an integer of the backend's integer type)."""
        return self._numerator

    @property
    def denominator(self):
        """The (always positive) denominator."""
        return self._denominator

    def copy(self):
        """Return an independent copy of this value."""
        other = type(self).__new__(type(self))
        other._set(self._numerator, self._denominator)
        return other

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def swap(self, other):
        """Exchange the values of two rationals of the same type."""
        if type(other) is not type(self):
            raise TypeError("Can only swap rationals of the same type.")
        (
            self._numerator, self._denominator,
            other._numerator, other._denominator,
        ) = (
            other._numerator, other._denominator,
            self._numerator, self._denominator,
        )

    def negate(self):
        """Negate this value in place."""
        eval_negate(self)

    def is_zero(self):
        return eval_is_zero(self)

    def sign(self):
        """Return -1, 0 or +1 according to the sign of this value."""
        return eval_get_sign(self)

    def compare(self, other):
        """
        Three-way comparison of this value with another value.

        Parameters
        ==========
        other : rational or integer or float
            Floating point values are converted exactly before comparison.
            Infinities compare as larger (or smaller) than every rational.

        Returns
        =======
        result : int
            +1 if self is greater than other, 0 if they are equal, -1 if self
            is less than other.

        Raises :py:exc:`ValueError` when compared with NaN and
        :py:exc:`TypeError` for non-numeric types.
        """
        if is_binary_float(other):
            if np.isnan(other):
                raise ValueError("Cannot compare a rational with NaN.")
            elif np.isinf(other):
                return -1 if other > 0 else 1
            other = type(self)(other)
        elif not isinstance(other, Rational):
            kind = number_category(other)
            if kind == NumberKind.INTEGER:
                lhs = self._numerator
                rhs = self.backend.convert(other) * self._denominator
                return (lhs > rhs) - (lhs < rhs)
            elif kind == NumberKind.RATIONAL:
                other = type(self)(other)
            else:
                raise TypeError("Cannot compare {} with {}.".format(
                    type(self).__name__,
                    type(other).__name__,
                ))

        # Denominators are always positive so cross-multiplying preserves the
        # ordering
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def _richcmp(self, other, op):
        if isinstance(other, str):
            return NotImplemented
        if is_binary_float(other) and np.isnan(other):
            return False
        try:
            return op(self.compare(other), 0)
        except TypeError:
            return NotImplemented

    def __eq__(self, other):
        return self._richcmp(other, operator.eq)

    def __lt__(self, other):
        return self._richcmp(other, operator.lt)

    def __le__(self, other):
        return self._richcmp(other, operator.le)

    def __gt__(self, other):
        return self._richcmp(other, operator.gt)

    def __ge__(self, other):
        return self._richcmp(other, operator.ge)

    def __hash__(self):
        # Uses the same algorithm as fractions.Fraction so that rationals hash
        # equal to the equivalent int, float and Fraction values. See
        # hash_value() for a structural hash of the components.
        numerator = int(self._numerator)
        denominator = int(self._denominator)
        try:
            inverse = pow(denominator, -1, _PyHASH_MODULUS)
        except ValueError:
            # Denominator is a multiple of the modulus
            hash_ = _PyHASH_INF
        else:
            hash_ = hash(hash(abs(numerator)) * inverse)
        result = hash_ if numerator >= 0 else -hash_
        return -2 if result == -1 else result

    def __bool__(self):
        return not eval_is_zero(self)

    def to_string(self, digits=0, flags=FormatFlags.NONE):
        """
        Format this value as a string, ``numerator/denominator``, omitting
        ``/denominator`` when the denominator is 1 (as GMP's ``mpq`` type
        does).

        Parameters
        ==========
        digits : int
        flags : :py:class:`~mp_rational.integer_backends.FormatFlags`
            Passed to the backend's
            :py:meth:`~mp_rational.integer_backends.IntegerBackend.format`
            for both the numerator and denominator.
        """
        result = self.backend.format(self._numerator, digits, flags)
        if self._denominator != 1:
            result += "/" + self.backend.format(self._denominator, digits, flags)
        return result

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        if self._denominator == 1:
            return "{}({})".format(type(self).__name__, self._numerator)
        else:
            return "{}({}, {})".format(
                type(self).__name__,
                self._numerator,
                self._denominator,
            )

    def convert_to(self, target_type):
        """
        Convert this value to another numeric type. See
        :py:func:`~mp_rational.conversions.eval_convert_to`.
        """
        return eval_convert_to(target_type, self)

    def __int__(self):
        return eval_convert_to(int, self)

    def __trunc__(self):
        return eval_convert_to(int, self)

    def __float__(self):
        return eval_convert_to(float, self)

    def __floor__(self):
        return int(self._numerator // self._denominator)

    def __ceil__(self):
        return int(-(-self._numerator // self._denominator))

    def _operand(self, value):
        """Convert an operator argument into this type."""
        if isinstance(value, str):
            raise TypeError("Strings are not valid operands.")
        elif type(value) is type(self):
            return value
        else:
            return type(self)(value)

    def _binary_operator(self, a, b, eval_op):
        try:
            a = self._operand(a)
            b = self._operand(b)
        except TypeError:
            return NotImplemented

        result = a.copy()
        eval_op(result, b)
        return result

    def __add__(self, other):
        return self._binary_operator(self, other, eval_add)
    def __radd__(self, other):
        return self._binary_operator(other, self, eval_add)

    def __sub__(self, other):
        return self._binary_operator(self, other, eval_subtract)
    def __rsub__(self, other):
        return self._binary_operator(other, self, eval_subtract)

    def __mul__(self, other):
        return self._binary_operator(self, other, eval_multiply)
    def __rmul__(self, other):
        return self._binary_operator(other, self, eval_multiply)

    def __truediv__(self, other):
        return self._binary_operator(self, other, eval_divide)
    def __rtruediv__(self, other):
        return self._binary_operator(other, self, eval_divide)

    def __neg__(self):
        result = self.copy()
        eval_negate(result)
        return result

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        result = self.copy()
        if eval_get_sign(result) < 0:
            eval_negate(result)
        return result

    def _floor_divide(self, other):
        if eval_is_zero(other):
            raise DivideByZeroError("Divide by zero.")
        return int(
            (self._numerator * other._denominator) //
            (self._denominator * other._numerator)
        )

    def _rational_operator(self, a, b, op):
        try:
            a = self._operand(a)
            b = self._operand(b)
        except TypeError:
            return NotImplemented
        return op(a, b)

    def __floordiv__(self, other):
        """Floor division, returning an :py:class:`int` (as for Fraction)."""
        return self._rational_operator(self, other, type(self)._floor_divide)
    def __rfloordiv__(self, other):
        return self._rational_operator(other, self, type(self)._floor_divide)

    def _modulo(self, other):
        result = other.copy()
        eval_multiply(result, self._floor_divide(other))
        eval_negate(result)
        eval_add(result, self)
        return result

    def __mod__(self, other):
        """
        Remainder of floor division. The result has the same sign as other
        (or is zero).
        """
        return self._rational_operator(self, other, type(self)._modulo)
    def __rmod__(self, other):
        return self._rational_operator(other, self, type(self)._modulo)

    def __divmod__(self, other):
        return self._rational_operator(
            self, other, lambda a, b: (a._floor_divide(b), a._modulo(b)))
    def __rdivmod__(self, other):
        return self._rational_operator(
            other, self, lambda a, b: (a._floor_divide(b), a._modulo(b)))

    def _integer_power(self, exponent):
        numerator = self._numerator
        denominator = self._denominator
        if exponent < 0:
            if eval_is_zero(self):
                raise DivideByZeroError("Divide by zero.")
            exponent = -exponent
            numerator, denominator = denominator, numerator
            if denominator < 0:
                numerator = -numerator
                denominator = -denominator

        # NB: Powers of coprime values remain coprime
        result = type(self).__new__(type(self))
        result._set(numerator ** exponent, denominator ** exponent)
        return result

    def __pow__(self, other, modulo=None):
        """
        Raise to a power. Integer (or integer-valued rational) exponents give
        an exact result; other exponents give a :py:class:`float`, as for
        :py:class:`fractions.Fraction`.
        """
        if modulo is not None:
            return NotImplemented

        if number_category(other) == NumberKind.INTEGER:
            return self._integer_power(operator.index(other))
        elif isinstance(other, Rational) and other._denominator == 1:
            return self._integer_power(int(other._numerator))
        elif is_binary_float(other) or number_category(other) == NumberKind.RATIONAL:
            return float(self) ** float(other)
        else:
            return NotImplemented

    def __rpow__(self, other):
        if self._denominator == 1:
            try:
                base = self._operand(other)
            except TypeError:
                return NotImplemented
            return base._integer_power(int(self._numerator))
        elif is_binary_float(other) or number_category(other) in (
            NumberKind.INTEGER,
            NumberKind.RATIONAL,
        ):
            return float(other) ** float(self)
        else:
            return NotImplemented

    def __round__(self, ndigits=None):
        """
        Round to the nearest integer (or, if ndigits is given, the nearest
        multiple of ``10**-ndigits``) with ties going to the even choice.
        Returns an :py:class:`int` when ndigits is omitted, otherwise a
        rational of the same type.
        """
        if ndigits is None:
            floor, remainder = divmod(self._numerator, self._denominator)
            twice_remainder = remainder * 2
            if twice_remainder < self._denominator:
                return int(floor)
            elif twice_remainder > self._denominator:
                return int(floor) + 1
            else:
                return int(floor) + (int(floor) % 2)

        shift = type(self)(10 ** abs(ndigits))
        if ndigits > 0:
            return type(self)(round(self * shift)) / shift
        else:
            return type(self)(round(self / shift)) * shift

    @property
    def real(self):
        """The real part (a copy of this value)."""
        return self.copy()

    @property
    def imag(self):
        """The imaginary part (always zero)."""
        return 0

    def conjugate(self):
        return self.copy()


numbers.Rational.register(Rational)


class GMPRational(Rational):
    """A :py:class:`Rational` using the ``"gmp"`` (:py:mod:`gmpy2`) backend."""

    __slots__ = []

    backend = GMP_BACKEND


_rational_types = {
    NATIVE_BACKEND: Rational,
    GMP_BACKEND: GMPRational,
}


def rational_type(backend=None):
    """
    Return the :py:class:`Rational` class which uses the specified integer
    backend.

    Parameters
    ==========
    backend : str or :py:class:`~mp_rational.integer_backends.IntegerBackend` or None
        The backend (or backend name) to use. If None, the default backend is
        used (see
        :py:func:`~mp_rational.integer_backends.set_default_backend`).
    """
    backend = get_backend(backend)
    cls = _rational_types.get(backend)
    if cls is None:
        cls = type(
            "Rational_{}".format(backend.name),
            (Rational, ),
            {"__slots__": [], "backend": backend, "__module__": __name__},
        )
        _rational_types[backend] = cls
    return cls


def assign_components(result, numerator, denominator):
    """
    Set the value of a :py:class:`Rational`, in place, to
    numerator/denominator (reduced to canonical form).

    Parameters
    ==========
    result : :py:class:`Rational`
    numerator : integer
    denominator : integer
        Any integral types (converted using the result's backend). A zero
        denominator results in :py:exc:`ZeroDenominatorError`.
    """
    backend = result.backend
    numerator = backend.convert(numerator)
    denominator = backend.convert(denominator)

    if backend.is_zero(denominator):
        raise ZeroDenominatorError("bad rational: zero denominator")

    gcd = backend.gcd(numerator, denominator)
    numerator //= gcd
    denominator //= gcd

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    result._set(numerator, denominator)


def _add_or_subtract(result, operand, op):
    operand = result._operand(operand)
    gcd = result.backend.gcd

    # NB: Components are read before result is modified since operand may be
    # result.
    a, b = result._numerator, result._denominator
    c, d = operand._numerator, operand._denominator

    # Reduce the intermediate values as we go so that only the final gcd
    # computation needs to deal with the full-sized numerator.
    g = gcd(b, d)
    b //= g
    numerator = op(a * (d // g), c * b)
    g = gcd(numerator, g)
    result._set(numerator // g, b * (d // g))


def eval_add(result, operand):
    """Set result to result + operand, in place."""
    _add_or_subtract(result, operand, operator.add)


def eval_subtract(result, operand):
    """Set result to result - operand, in place."""
    _add_or_subtract(result, operand, operator.sub)


def eval_multiply(result, operand):
    """Set result to result * operand, in place."""
    operand = result._operand(operand)
    gcd = result.backend.gcd

    a, b = result._numerator, result._denominator
    c, d = operand._numerator, operand._denominator

    gcd1 = gcd(a, d)
    gcd2 = gcd(c, b)
    result._set((a // gcd1) * (c // gcd2), (b // gcd2) * (d // gcd1))


def eval_divide(result, operand):
    """
    Set result to result / operand, in place.

    Raises :py:exc:`DivideByZeroError` if operand is zero (leaving result
    unmodified).
    """
    operand = result._operand(operand)
    if eval_is_zero(operand):
        raise DivideByZeroError("Divide by zero.")

    if eval_is_zero(result):
        return

    gcd = result.backend.gcd

    a, b = result._numerator, result._denominator
    c, d = operand._numerator, operand._denominator

    gcd1 = gcd(a, c)
    gcd2 = gcd(d, b)
    numerator = (a // gcd1) * (d // gcd2)
    denominator = (b // gcd2) * (c // gcd1)

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    result._set(numerator, denominator)


def eval_negate(result):
    """Negate result in place."""
    result._set(-result._numerator, result._denominator)


def eval_is_zero(value):
    """True iff the value is zero."""
    return value.backend.is_zero(value._numerator)


def eval_get_sign(value):
    """Return -1, 0 or +1 according to the sign of the value."""
    return value.backend.sign(value._numerator)


_HASH_MASK = (1 << sys.hash_info.width) - 1


def _hash_combine(seed, value_hash):
    # The mixing function used by boost::hash_combine
    seed ^= (value_hash + 0x9e3779b9 + (seed << 6) + (seed >> 2)) & _HASH_MASK
    return seed & _HASH_MASK


def hash_value(value):
    """
    Compute a structural hash of a :py:class:`Rational` by combining the
    backend hashes of its numerator and denominator (in that order).

    Equal rationals always have equal hashes (even when using different
    backends) but, unlike :py:func:`hash`, the result is not consistent with
    the hashes of Python's numeric types.
    """
    backend = value.backend
    result = backend.hash(value._numerator) & _HASH_MASK
    return _hash_combine(result, backend.hash(value._denominator) & _HASH_MASK)
