r"""
:py:mod:`mp_rational.integer_backends`: Pluggable arbitrary-precision integers
==============================================================================

The :py:class:`~mp_rational.rational.Rational` type never performs integer
arithmetic itself: it relies on an *integer backend* to provide an
arbitrary-precision signed integer type along with a handful of helper
operations (parsing, formatting, gcd and so on). Two backends are provided:

* ``"native"`` (:py:class:`NativeIntegerBackend`) uses Python's built-in
  :py:class:`int`.
* ``"gmp"`` (:py:class:`GMPIntegerBackend`) uses :py:class:`gmpy2.mpz`.

For example::

    >>> from mp_rational.integer_backends import get_backend, FormatFlags
    
    >>> native = get_backend("native")
    >>> native.parse("-0x1F")
    -31
    >>> native.format(255, 0, FormatFlags.HEX | FormatFlags.SHOWBASE)
    '0xff'

Integer values are manipulated using their own Python operators (``+``,
``-``, ``*``, ``//``, ``<<``, comparisons) and so the only requirement on an
``integer_type`` is that it behaves like a Python integer.

Backend registry
----------------

Backends are looked up by name. The default backend (used when no backend is
named) is ``"native"`` but may be changed using :py:func:`set_default_backend`.

.. autofunction:: get_backend

.. autofunction:: register_backend

.. autofunction:: available_backends

.. autofunction:: set_default_backend


API
---

.. autoclass:: FormatFlags

.. autoclass:: IntegerBackend
    :members:

.. autoclass:: NativeIntegerBackend

.. autoclass:: GMPIntegerBackend

"""

import math

import logging

import operator

from enum import IntFlag

import gmpy2


__all__ = [
    "FormatFlags",
    "IntegerBackend",
    "NativeIntegerBackend",
    "GMPIntegerBackend",
    "NATIVE_BACKEND",
    "GMP_BACKEND",
    "register_backend",
    "get_backend",
    "available_backends",
    "set_default_backend",
]


logger = logging.getLogger(__name__)


class FormatFlags(IntFlag):
    """
    Formatting flags accepted by :py:meth:`IntegerBackend.format`, modelled on
    the C++ iostream format flags of the same names.
    """
    
    NONE = 0
    
    HEX = 1
    """Format in base 16."""
    
    OCT = 2
    """Format in base 8 (ignored if :py:attr:`HEX` is also given)."""
    
    SHOWBASE = 4
    """Prefix non-zero hexadecimal values with ``0x`` and octal with ``0``."""
    
    SHOWPOS = 8
    """Prefix non-negative values with ``+``."""
    
    UPPERCASE = 16
    """Use upper case hexadecimal digits (and the ``0X`` prefix)."""


_BASE_DIGITS = {
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_BASE_FORMAT_SPEC = {
    8: "o",
    10: "d",
    16: "x",
}


class IntegerBackend(object):
    """
    Base class for integer backends.
    
    Subclasses must set :py:attr:`name` and :py:attr:`integer_type` and
    implement :py:meth:`from_int`, :py:meth:`from_digits`, :py:meth:`gcd` and
    :py:meth:`truncating_divide`.
    """
    
    name = None
    """The name this backend is registered under."""
    
    integer_type = None
    """The Python type used to hold integer values."""
    
    def from_int(self, value):
        """Convert a Python :py:class:`int` into an :py:attr:`integer_type`."""
        raise NotImplementedError()
    
    def from_digits(self, digits, base):
        """
        Convert a string of (unsigned, unprefixed) digits in the specified
        base (8, 10 or 16) into an :py:attr:`integer_type`.
        """
        raise NotImplementedError()
    
    def gcd(self, a, b):
        """Return the (non-negative) greatest common divisor of a and b."""
        raise NotImplementedError()
    
    def truncating_divide(self, a, b):
        """Divide a by b, rounding toward zero."""
        raise NotImplementedError()
    
    def convert(self, value):
        """
        Implicitly (i.e. losslessly) convert an integral value of any width or
        signedness into an :py:attr:`integer_type`.
        
        Raises :py:exc:`TypeError` if the value is not integral.
        """
        if type(value) is self.integer_type:
            return value
        return self.from_int(operator.index(value))
    
    def explicit_convert(self, value):
        """
        Explicitly convert a value into an :py:attr:`integer_type`. Unlike
        :py:meth:`convert`, this conversion may narrow its input: non-integral
        numbers are truncated toward zero and strings are parsed using
        :py:meth:`parse`.
        """
        if isinstance(value, str):
            return self.parse(value)
        try:
            return self.convert(value)
        except TypeError:
            return self.from_int(int(value))
    
    def parse(self, string):
        """
        Parse an optionally signed integer literal.
        
        As for GMP's base-0 parsing, a ``0x`` or ``0X`` prefix selects base 16
        and a leading zero followed by further digits selects base 8.
        Otherwise, the literal is decimal.
        
        Raises :py:exc:`ValueError` if the string is not a valid integer.
        """
        text = string
        negative = False
        if text[:1] in ("+", "-"):
            negative = text[0] == "-"
            text = text[1:]
        
        if text[:2] in ("0x", "0X"):
            base = 16
            text = text[2:]
        elif len(text) > 1 and text[0] == "0":
            base = 8
            text = text[1:]
        else:
            base = 10
        
        if not text or not _BASE_DIGITS[base].issuperset(text):
            raise ValueError(
                "Could not interpret \"{}\" as an integer.".format(string)
            )
        
        value = self.from_digits(text, base)
        return -value if negative else value
    
    def to_digits(self, magnitude, base):
        """
        Return the digits of a non-negative value in the specified base (8, 10
        or 16) using lower case letters and no prefix.
        """
        return format(magnitude, _BASE_FORMAT_SPEC[base])
    
    def format(self, value, digits=0, flags=FormatFlags.NONE):
        """
        Format an integer as a string.
        
        Parameters
        ==========
        value : :py:attr:`integer_type`
        digits : int
            Requested precision. Integers are always formatted exactly so this
            value is ignored.
        flags : :py:class:`FormatFlags`
        """
        flags = FormatFlags(flags)
        
        if flags & FormatFlags.HEX:
            base = 16
            prefix = "0X" if flags & FormatFlags.UPPERCASE else "0x"
        elif flags & FormatFlags.OCT:
            base = 8
            prefix = "0"
        else:
            base = 10
            prefix = ""
        
        text = self.to_digits(abs(value), base)
        if base == 16 and flags & FormatFlags.UPPERCASE:
            text = text.upper()
        
        if flags & FormatFlags.SHOWBASE and not self.is_zero(value):
            text = prefix + text
        
        if value < 0:
            text = "-" + text
        elif flags & FormatFlags.SHOWPOS:
            text = "+" + text
        
        return text
    
    def is_zero(self, value):
        return value == 0
    
    def sign(self, value):
        return (value > 0) - (value < 0)
    
    def hash(self, value):
        return hash(value)
    
    def __repr__(self):
        return "<{} {!r}>".format(type(self).__name__, self.name)


class NativeIntegerBackend(IntegerBackend):
    """An integer backend using Python's built-in :py:class:`int`."""
    
    name = "native"
    integer_type = int
    
    def from_int(self, value):
        return int(value)
    
    def from_digits(self, digits, base):
        return int(digits, base)
    
    def gcd(self, a, b):
        return math.gcd(a, b)
    
    def truncating_divide(self, a, b):
        # NB: Python's // rounds toward negative infinity
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient


class GMPIntegerBackend(IntegerBackend):
    """An integer backend using :py:class:`gmpy2.mpz`."""
    
    name = "gmp"
    integer_type = type(gmpy2.mpz(0))
    
    def from_int(self, value):
        return gmpy2.mpz(value)
    
    def from_digits(self, digits, base):
        return gmpy2.mpz(digits, base)
    
    def gcd(self, a, b):
        return gmpy2.gcd(a, b)
    
    def truncating_divide(self, a, b):
        return gmpy2.t_div(a, b)


NATIVE_BACKEND = NativeIntegerBackend()

GMP_BACKEND = GMPIntegerBackend()


_backends = {}

_default_backend_name = NATIVE_BACKEND.name


def register_backend(backend):
    """
    Register an :py:class:`IntegerBackend` instance under its
    :py:attr:`~IntegerBackend.name`, replacing any backend previously
    registered with that name.
    """
    if not backend.name:
        raise ValueError("Integer backends must have a name.")
    _backends[backend.name] = backend
    logger.debug("Registered %r integer backend", backend.name)


def get_backend(name=None):
    """
    Return the :py:class:`IntegerBackend` registered under the given name, or
    the default backend if name is None. Raises :py:exc:`KeyError` for
    unknown names.
    
    For convenience, if an :py:class:`IntegerBackend` is passed, it is
    returned unchanged.
    """
    if isinstance(name, IntegerBackend):
        return name
    if name is None:
        name = _default_backend_name
    try:
        return _backends[name]
    except KeyError:
        raise KeyError("No integer backend named {!r}.".format(name))


def available_backends():
    """Return the sorted names of all registered backends."""
    return sorted(_backends)


def set_default_backend(name):
    """Set the backend returned by :py:func:`get_backend` by default."""
    global _default_backend_name
    
    _default_backend_name = get_backend(name).name
    logger.debug("Default integer backend is now %r", _default_backend_name)


register_backend(NATIVE_BACKEND)
register_backend(GMP_BACKEND)
