"""Numeric domain for mathcli: parsing and formatting of decimal numbers.

Values are ``decimal.Decimal`` evaluated with 28 significant digits and
half-even rounding. Integer sums and products are exact while the result
fits in 28 digits; larger results are rounded. Non-finite values (NaN,
Infinity) are not accepted as input.
"""

import decimal
import re
from decimal import Decimal

# Signed decimal with optional fraction and exponent, e.g. "-3", "2.5", ".5", "1e3"
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

PRECISION = 28


def arithmetic_context() -> decimal.Context:
    """Build the decimal context used for folding.

    Invalid operations, division by zero and overflow trap (raise) rather
    than producing NaN or Infinity.
    """
    return decimal.Context(
        prec=PRECISION,
        rounding=decimal.ROUND_HALF_EVEN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


def parse_number(text: str) -> Decimal | None:
    """Parse trimmed text as a signed decimal number.

    Args:
        text: Line content with surrounding whitespace already removed.

    Returns:
        The parsed Decimal, or None if the text is not a valid number.

    """
    if not _NUMBER_PATTERN.match(text):
        return None
    return Decimal(text)


def format_number(value: Decimal) -> str:
    """Format a result as a plain number.

    Trailing fractional zeros are dropped and exponent notation is never
    used, so ``Decimal("3.0")`` prints as ``3`` and ``Decimal("1E+3")`` as
    ``1000``. Zero of either sign prints as ``0``.
    """
    if value.is_zero():
        return "0"
    return format(value.normalize(arithmetic_context()), "f")
