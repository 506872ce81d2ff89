"""
Coercion of date inputs into datetime values.
"""

from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional, Union

from dateutil import parser as date_parser

DateLike = Union[str, date, datetime]

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

FRIDAY = 5

# Missing month and day fall back to January 1. The second default only
# differs in the year, to tell whether the string carried one.
PARSE_DEFAULT = datetime(1970, 1, 1)
OTHER_YEAR_DEFAULT = datetime(1972, 1, 1)


class InvalidDateError(ValueError):
    """Raised when a date string cannot be parsed."""

    def __init__(self, value: object, reason: str = ""):
        self.value = value
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def parse_date_string(value: str) -> datetime:
    """
    Parse a machine-readable date string.

    Accepts ISO 8601 ('2024-02-01T15:00:00.000Z', '2024-02-01') and
    RFC-like forms ('04 Dec 1995 00:12:00 UTC'). Reduced forms such as
    '2024' or '2024-02' start on the first day of the year or month.

    Raises:
        InvalidDateError: If the string is not a date or has no year.
    """
    if not value or not value.strip():
        raise InvalidDateError(value, "empty string")
    try:
        result = date_parser.parse(value, default=PARSE_DEFAULT)
        other_year = date_parser.parse(value, default=OTHER_YEAR_DEFAULT)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(value, str(e)) from e
    if result.year != other_year.year:
        raise InvalidDateError(value, "no year given")
    return result


def to_datetime(value: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """
    Convert a date input into a datetime.

    Strings without an offset are read as UTC. Plain dates become midnight.
    When ``tz`` is given, naive values are placed in it and aware values
    are converted to it.

    Args:
        value: Date string, date or datetime.
        tz: Optional zone to read calendar components in.

    Returns:
        The datetime value.
    """
    if isinstance(value, str):
        result = parse_date_string(value)
        if result.tzinfo is None and tz is None:
            result = result.replace(tzinfo=timezone.utc)
    elif isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time())
    else:
        raise TypeError(f"Expected str, date or datetime, got {type(value).__name__}")

    if tz is not None:
        if result.tzinfo is None:
            result = result.replace(tzinfo=tz)
        else:
            result = result.astimezone(tz)
    return result


def to_instant(value: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """Convert a date input into an aware datetime, pinning naive values to UTC."""
    result = to_datetime(value, tz)
    if result.tzinfo is None:
        result = result.replace(tzinfo=timezone.utc)
    return result


def is_plain_date(value: object) -> bool:
    """True for a ``date`` that is not a ``datetime``."""
    return isinstance(value, date) and not isinstance(value, datetime)


def day_index(value: date) -> int:
    """Day of week with Sunday = 0 .. Saturday = 6."""
    return (value.weekday() + 1) % 7
