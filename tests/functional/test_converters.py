from decimal import Decimal

import pytest
from crazylambdas.core.errors import ParseError
from crazylambdas.functional.converters import (
    string_to_int_converter,
    to_dollar_string_function,
)


def test_to_dollar_string_function():
    to_dollar_string = to_dollar_string_function()
    assert to_dollar_string(Decimal(10).quantize(Decimal("0.01"))) == "$10.00"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("10"), "$10"),
        (Decimal("0.5"), "$0.5"),
        (Decimal("-3.25"), "$-3.25"),
        (7, "$7"),
        (1.1, "$1.1"),
        ("12.30", "$12.30"),
    ],
)
def test_to_dollar_string_function_keeps_scale(amount, expected):
    to_dollar_string = to_dollar_string_function()
    assert to_dollar_string(amount) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("234", 234), ("-122", -122), ("+7", 7), ("0", 0), ("007", 7)],
)
def test_string_to_int_converter(text, expected):
    convert = string_to_int_converter()
    assert convert(text) == expected


@pytest.mark.parametrize("text", ["", " 12", "12 ", "1_000", "12a", "3.5", "-", "++1"])
def test_string_to_int_converter_rejects_malformed_input(text):
    convert = string_to_int_converter()

    with pytest.raises(ParseError) as exc_info:
        convert(text)

    assert exc_info.value.value == text


def test_string_to_int_converter_rejects_non_strings():
    convert = string_to_int_converter()

    with pytest.raises(ParseError, match="Expected a string"):
        convert(None)


def test_parse_error_is_value_error():
    convert = string_to_int_converter()

    with pytest.raises(ValueError):
        convert("abc")
