"""
:py:mod:`mp_rational.json_serialisations`: JSON Serialisation/Deserialisation
=============================================================================

The :py:mod:`mp_rational.json_serialisations` module provides functions for
serialising and deserialising :py:class:`~mp_rational.rational.Rational`
values.

.. note::

    These functions do not serialise/deserialise JSON directly, instead they
    produce/accept standard Python data structures compatible with the Python
    :py:mod:`json` module.

.. autofunction:: serialise_rational

.. autofunction:: deserialise_rational

.. autofunction:: serialise_rationals

.. autofunction:: deserialise_rationals

"""

from collections import OrderedDict

from mp_rational.rational import Rational, assign_components


__all__ = [
    "serialise_rational",
    "deserialise_rational",
    "serialise_rationals",
    "deserialise_rationals",
]


def serialise_rational(value):
    """
    Serialise a :py:class:`~mp_rational.rational.Rational` into JSON form.
    
    Example::
    
        >>> serialise_rational(Rational(-2, 3))
        OrderedDict([('numerator', '-2'), ('denominator', '3')])
    
    .. note::
        
        Numbers are encoded as (decimal) strings to avoid floating point
        precision limitations.
    """
    return OrderedDict([
        ("numerator", str(value.numerator)),
        ("denominator", str(value.denominator)),
    ])


def deserialise_rational(dictionary, rational_class=Rational):
    """
    Inverse of :py:func:`serialise_rational`.
    
    Parameters
    ==========
    dictionary : {"numerator": str, "denominator": str}
    rational_class : type
        The :py:class:`~mp_rational.rational.Rational` (sub)class to
        construct (see :py:func:`~mp_rational.rational.rational_type`).
    
    The value is reduced to canonical form. A zero denominator results in
    :py:exc:`~mp_rational.rational.ZeroDenominatorError`.
    """
    value = rational_class()
    assign_components(
        value,
        int(dictionary["numerator"]),
        int(dictionary["denominator"]),
    )
    return value


def serialise_rationals(values):
    """
    Serialise a list of :py:class:`~mp_rational.rational.Rational` values
    (see :py:func:`serialise_rational`).
    """
    return [serialise_rational(value) for value in values]


def deserialise_rationals(lst, rational_class=Rational):
    """
    Inverse of :py:func:`serialise_rationals`.
    """
    return [deserialise_rational(d, rational_class) for d in lst]
