"""Date parsing utilities."""

import re
from datetime import UTC, date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from fintrack.utils.coercion import as_utc

_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
_OFFSET_PATTERN = re.compile(r"^in (\d+) (day|week|month|year)s?$")


def _start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=UTC)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year",
      "in 30 days", "in 1 year", etc.

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to today in UTC)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = datetime.now(UTC).date()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    offset_match = _OFFSET_PATTERN.match(date_str)
    if offset_match:
        count = int(offset_match.group(1))
        unit = offset_match.group(2)
        return today + relativedelta(**{f"{unit}s": count})

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            # Monday of last week, consistent with "this week" and "next week"
            days_since_monday = today.weekday()
            return today - timedelta(days=days_since_monday + 7)
        elif period in _WEEKDAYS:
            target_day = _WEEKDAYS.index(period)
            days_ago = (today.weekday() - target_day) % 7
            if days_ago == 0:
                days_ago = 7
            return today - timedelta(days=days_ago)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return (today + relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)
        elif period == "week":
            return today + timedelta(days=(7 - today.weekday()))

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str, now: Optional[datetime] = None) -> datetime:
    """Parse a user-supplied instant into an aware datetime.

    "now" returns the reference instant itself. Values that carry a time of
    day ("2024-01-15 13:30") keep it; relative and plain dates resolve to
    midnight UTC of that day.

    Args:
        value: Date or date-time string
        now: Reference instant (defaults to the current UTC time)

    Returns:
        Aware datetime

    Raises:
        ValueError: If the string cannot be parsed
    """
    now = as_utc(now) if now is not None else datetime.now(UTC)
    text = value.strip()

    if text.lower() == "now":
        return now

    if ":" in text:
        try:
            return as_utc(date_parser.parse(text))
        except (ValueError, TypeError, OverflowError) as e:
            raise ValueError(f"Could not parse date '{text}': {e}")

    return _start_of_day(parse_date(text, today=now.date()))
