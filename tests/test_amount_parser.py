"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from fintrack.utils.amount_parser import parse_amount, parse_positive_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("-$123.45", Decimal("-123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("(123.45)", Decimal("-123.45")),
        ("€50", Decimal("50")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12.3.4", "NaN", "Infinity"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_positive_amount():
    assert parse_positive_amount("42.50") == Decimal("42.50")

    with pytest.raises(ValueError, match="greater than zero"):
        parse_positive_amount("0")
    with pytest.raises(ValueError):
        parse_positive_amount("-5")
