"""Conversion of loosely-typed stored values.

The document store can hand back numbers as strings, timestamps as server
objects, epoch values or ISO strings, and sometimes nothing at all (for
example a timestamp that has been written but not materialized yet). These
helpers turn such values into canonical ``Decimal``/``datetime`` values and
degrade to a safe default instead of raising.
"""

import logging
import re
from collections.abc import Mapping
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil import parser as date_parser

from fintrack.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime, assuming UTC for naive values."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def coerce_number(value: Any, fallback: Decimal = Decimal("0")) -> Decimal:
    """Convert a stored value into a finite Decimal.

    Args:
        value: Number, numeric string or anything else
        fallback: Returned when ``value`` is not a usable number

    Returns:
        Decimal value, or ``fallback``
    """
    # bool is an int subclass but never a monetary value
    if value is None or isinstance(value, bool):
        return fallback

    if isinstance(value, Decimal):
        return value if value.is_finite() else fallback

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        try:
            number = Decimal(repr(value))
        except InvalidOperation:
            return fallback
        return number if number.is_finite() else fallback

    if isinstance(value, str):
        try:
            return parse_amount(value)
        except ValueError:
            pass
        # "12abc" reads as 12, like a lenient float parse
        match = _LEADING_NUMBER.match(value)
        return Decimal(match.group(1)) if match else fallback

    return fallback


def coerce_string(value: Any, fallback: str = "") -> str:
    """Convert a stored value into a string, using ``fallback`` for None."""
    if value is None:
        return fallback
    return str(value)


def _from_epoch_seconds(seconds: Any, nanoseconds: Any = 0) -> datetime:
    whole = coerce_number(seconds, fallback=None)
    if whole is None:
        raise ValueError(f"timestamp seconds {seconds!r} is not a number")
    fraction = coerce_number(nanoseconds) / Decimal(1_000_000_000)
    return _EPOCH + timedelta(seconds=float(whole + fraction))


def _to_datetime(value: Any) -> Optional[datetime]:
    """Convert a supported representation, or return None if unrecognized."""
    if isinstance(value, datetime):
        return as_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    # Backend timestamp objects that know how to convert themselves
    for method_name in ("to_datetime", "ToDatetime"):
        method = getattr(value, method_name, None)
        if callable(method):
            try:
                converted = method()
            except Exception as e:
                # Unmaterialized server timestamps raise from their converter
                raise ValueError(f"{type(value).__name__}.{method_name}() failed: {e!r}") from e
            if isinstance(converted, datetime):
                return as_utc(converted)

    if isinstance(value, Mapping):
        for key in ("seconds", "_seconds"):
            if key in value:
                nanos = value.get("nanoseconds", value.get("_nanoseconds", 0))
                return _from_epoch_seconds(value[key], nanos)
        return None

    if hasattr(value, "seconds") and not isinstance(value, (str, bytes)):
        return _from_epoch_seconds(value.seconds, getattr(value, "nanoseconds", 0))

    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        millis = coerce_number(value, fallback=None)
        if millis is None:
            return None
        return _EPOCH + timedelta(milliseconds=float(millis))

    if isinstance(value, str):
        return as_utc(date_parser.parse(value))

    return None


def coerce_date(value: Any, now: Optional[datetime] = None) -> datetime:
    """Convert a stored timestamp into an aware datetime.

    Accepted inputs are datetimes (naive values are taken as UTC), dates,
    backend timestamp objects or mappings exposing ``seconds`` (or
    ``_seconds``) since the epoch, objects with a ``to_datetime()`` method,
    parseable strings and numbers of epoch milliseconds.

    Args:
        value: Stored timestamp in any supported representation
        now: Value returned for absent or unparseable input; defaults to the
            current UTC time

    Returns:
        Aware datetime; never raises
    """
    fallback = as_utc(now) if now is not None else datetime.now(UTC)

    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    try:
        converted = _to_datetime(value)
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.warning("Could not parse timestamp %r: %s", value, e)
        return fallback

    if converted is None:
        logger.warning("Unsupported timestamp value %r", value)
        return fallback

    return converted
