"""Formatting utilities for currency display."""

from decimal import Decimal
from typing import Union

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}

# Currencies displayed without minor units
_ZERO_DECIMAL_CURRENCIES = {"JPY"}


def format_currency(amount: Union[Decimal, float, int], currency: str = "USD") -> str:
    """Format an amount for display in the given ISO currency.

    Args:
        amount: The amount to format
        currency: ISO 4217 currency code

    Returns:
        Formatted string (e.g., "$1,234.56", "-$30.00", "CHF 12.00")

    Example:
        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
    """
    code = (currency or "USD").upper()
    places = 0 if code in _ZERO_DECIMAL_CURRENCIES else 2
    sign = "-" if amount < 0 else ""
    number = f"{abs(amount):,.{places}f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {number}"
    return f"{sign}{symbol}{number}"


def format_percentage(value: float) -> str:
    """Format a percentage rounded to whole numbers (e.g., "42%")."""
    return f"{value:.0f}%"
