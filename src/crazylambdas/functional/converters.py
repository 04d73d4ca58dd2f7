"""Conversions between numbers and strings."""

import re
from decimal import Decimal
from typing import Callable, Union

from crazylambdas.core.errors import ParseError

__all__ = [
    "to_dollar_string_function",
    "string_to_int_converter",
]

# Optional sign followed by ASCII digits. int() alone would also accept
# surrounding whitespace and underscores.
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def to_dollar_string_function() -> Callable[[Union[Decimal, int, float, str]], str]:
    """Return a function formatting an amount as a dollar string.

    The amount is converted to ``Decimal`` and printed with its own scale, so
    ``Decimal("10.00")`` becomes ``"$10.00"`` and ``Decimal("10")`` becomes
    ``"$10"``. Floats go through ``str`` first to avoid binary expansion.
    """

    def to_dollar_string(amount: Union[Decimal, int, float, str]) -> str:
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        return f"${amount}"

    return to_dollar_string


def string_to_int_converter() -> Callable[[str], int]:
    """Return a strict string-to-int parser.

    Returns:
        A function parsing an optionally signed run of ASCII digits, e.g.
        ``"234" -> 234`` and ``"-122" -> -122``.

    Raises:
        ParseError: From the returned function, for any other input,
            including non-strings, blanks and padded literals.
    """

    def convert(value: str) -> int:
        if not isinstance(value, str):
            raise ParseError(value, f"Expected a string, got {type(value).__name__}.")
        if _INT_LITERAL.fullmatch(value) is None:
            raise ParseError(value)
        try:
            return int(value)
        except ValueError as e:
            # Digit strings past sys.get_int_max_str_digits()
            raise ParseError(value, str(e)) from e

    return convert
