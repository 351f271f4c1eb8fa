"""
Utility functions for parsing more complex command line arguments.
"""

import sys

from collections import OrderedDict

from decimal import Decimal

from fractions import Fraction

import numpy as np

from mp_rational.integer_backends import FormatFlags, get_backend

from mp_rational.rational import (
    eval_add,
    eval_subtract,
    eval_multiply,
    eval_divide,
)


CONVERSION_TARGETS = OrderedDict([
    ("int", int),
    ("int64", np.int64),
    ("float", float),
    ("float16", np.float16),
    ("float32", np.float32),
    ("float64", np.float64),
    ("longdouble", np.longdouble),
    ("decimal", Decimal),
    ("fraction", Fraction),
])
"""The types which may be named by the --convert-to argument."""


OPERATORS = OrderedDict([
    ("+", eval_add),
    ("-", eval_subtract),
    ("*", eval_multiply),
    ("/", eval_divide),
])
"""The in-place operations performed by each operator symbol."""


def backend_name(string):
    try:
        return get_backend(string).name
    except KeyError:
        raise ValueError("No matching integer backend found.")


def conversion_target(string):
    try:
        return CONVERSION_TARGETS[string]
    except KeyError:
        raise ValueError("No matching conversion target found.")


def format_flags_from_arguments(args):
    """
    Combine the --hex, --oct, --showbase, --showpos and --uppercase arguments
    into a :py:class:`~mp_rational.integer_backends.FormatFlags`.
    """
    flags = FormatFlags.NONE
    if args.hex:
        flags |= FormatFlags.HEX
    if args.oct:
        flags |= FormatFlags.OCT
    if args.showbase:
        flags |= FormatFlags.SHOWBASE
    if args.showpos:
        flags |= FormatFlags.SHOWPOS
    if args.uppercase:
        flags |= FormatFlags.UPPERCASE
    return flags


def parse_expression_arguments(arguments, rational_class):
    """
    Convert an expression argument list of the form ``OPERAND [OPERATOR
    OPERAND ...]`` into the initial operand and a list of subsequent
    operations.
    
    If the argument can't be parsed, calls :py:func:`sys.exit` with 1 and
    prints a message to stderr.
    
    Parameters
    ==========
    arguments : ["operand", "operator", "operand", ...]
        The argument strings from :py:class:`~argparse.ArgumentParser`.
    rational_class : type
        The :py:class:`~mp_rational.rational.Rational` class used to parse
        operands.
    
    Returns
    =======
    value : rational_class
    operations : [(operator, rational_class), ...]
        The operator symbols (keys of :py:data:`OPERATORS`) and operands.
    """
    if len(arguments) % 2 != 1:
        sys.stderr.write(
            "Expressions must alternate between operands and operators, "
            "starting and ending with an operand.\n"
        )
        sys.exit(1)
    
    try:
        value = rational_class.parse(arguments[0])
        
        operations = []
        i = iter(arguments[1:])
        for symbol, operand in zip(i, i):
            if symbol not in OPERATORS:
                sys.stderr.write("Unknown operator '{}' (expected one of {}).\n".format(
                    symbol,
                    ", ".join(OPERATORS),
                ))
                sys.exit(1)
            operations.append((symbol, rational_class.parse(operand)))
    except (ValueError, ZeroDivisionError) as e:
        sys.stderr.write("{}\n".format(e))
        sys.exit(1)
    
    return (value, operations)
