from mp_rational.version import __version__

from mp_rational.integer_backends import (
    FormatFlags,
    get_backend,
    set_default_backend,
)

from mp_rational.rational import (
    Rational,
    GMPRational,
    rational_type,
    RationalParseError,
    DivideByZeroError,
    ZeroDenominatorError,
)
