r"""
.. _mp-rational-eval:

``mp-rational-eval``
====================

Evaluate a simple arithmetic expression using exact rational arithmetic and
print the result in canonical form.

Operands are written ``N`` or ``N/D`` (with ``0x`` for hexadecimal and a
leading ``0`` for octal) and operators are ``+``, ``-``, ``*`` and ``/``.
Expressions are evaluated strictly from left to right (there is no operator
precedence).


Example usage
-------------

::

    $ mp-rational-eval 1/3 + 1/6
    1/2
    
    $ mp-rational-eval 0x10/0x4 '*' 3/8
    3/2
    
    $ mp-rational-eval --hex --showbase 255/16
    0xff/0x10
    
    $ mp-rational-eval 1/3 --convert-to float32
    0.33333334
    
    $ mp-rational-eval --json -- -6/4
    {"numerator": "-3", "denominator": "2"}

Negative operands must follow a ``--`` argument to avoid them being mistaken
for options.


Arguments
---------

The complete set of arguments can be listed using ``--help``

.. program-output:: mp-rational-eval --help

"""

import sys

import json

import logging

from argparse import ArgumentParser

from mp_rational.integer_backends import available_backends

from mp_rational.rational import rational_type

from mp_rational.json_serialisations import serialise_rational

from mp_rational.scripts.argument_parsers import (
    OPERATORS,
    CONVERSION_TARGETS,
    backend_name,
    conversion_target,
    format_flags_from_arguments,
    parse_expression_arguments,
)


logger = logging.getLogger(__name__)


def parse_args(args=None):
    parser = ArgumentParser(description="""
        Evaluate an arithmetic expression using exact rational arithmetic.
    """)
    
    parser.add_argument(
        "expression",
        nargs="+",
        help="""
            The expression to evaluate: an operand optionally followed by
            pairs of operators ({}) and operands. Evaluated left to right.
        """.format(" ".join(OPERATORS)),
    )
    
    parser.add_argument(
        "--backend", "-B",
        type=backend_name, default=None,
        help="""
            The integer backend to use. One of: {}. (Default: native.)
        """.format(", ".join(available_backends())),
    )
    
    formatting_group = parser.add_argument_group("formatting options")
    formatting_group.add_argument(
        "--hex", action="store_true",
        help="""
            Print the result in hexadecimal.
        """,
    )
    formatting_group.add_argument(
        "--oct", action="store_true",
        help="""
            Print the result in octal.
        """,
    )
    formatting_group.add_argument(
        "--showbase", action="store_true",
        help="""
            Prefix hexadecimal values with 0x and octal values with 0.
        """,
    )
    formatting_group.add_argument(
        "--showpos", action="store_true",
        help="""
            Prefix non-negative values with +.
        """,
    )
    formatting_group.add_argument(
        "--uppercase", action="store_true",
        help="""
            Use upper case hexadecimal digits.
        """,
    )
    
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--convert-to", "-c",
        type=conversion_target,
        help="""
            Convert the result to another numeric type before printing it. One
            of: {}.
        """.format(", ".join(CONVERSION_TARGETS)),
    )
    output_group.add_argument(
        "--json", action="store_true",
        help="""
            Print the result as a JSON object with 'numerator' and
            'denominator' fields.
        """,
    )
    
    parser.add_argument(
        "--verbose", "-v", default=0, action="count",
        help="""
            Show each step of the evaluation.
        """,
    )
    
    return parser.parse_args(args)


def main(args=None):
    args = parse_args(args)
    
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    
    rational_class = rational_type(args.backend)
    
    value, operations = parse_expression_arguments(args.expression, rational_class)
    
    for symbol, operand in operations:
        # NB: value is modified in place so must be formatted now
        logger.info("%s %s %s", str(value), symbol, operand)
        try:
            OPERATORS[symbol](value, operand)
        except ZeroDivisionError as e:
            sys.stderr.write("{}\n".format(e))
            return 1
    
    if args.convert_to is not None:
        print(value.convert_to(args.convert_to))
    elif args.json:
        print(json.dumps(serialise_rational(value)))
    else:
        print(value.to_string(flags=format_flags_from_arguments(args)))
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
