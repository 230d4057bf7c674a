"""Utility functions for fintrack."""

from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.coercion import coerce_date, coerce_number, coerce_string
from fintrack.utils.date_parser import parse_date, parse_datetime
from fintrack.utils.formatting import format_currency

__all__ = [
    "parse_amount",
    "coerce_date",
    "coerce_number",
    "coerce_string",
    "parse_date",
    "parse_datetime",
    "format_currency",
]
