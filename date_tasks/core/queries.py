"""
Scalar and boolean queries over one or two date values.
"""

import calendar
import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Mapping, Optional, Union

from date_tasks.core.dates import DAY_NAMES, DateLike, day_index, to_datetime, to_instant
from date_tasks.data.schemas import CalendarMonth, DatePeriod, coerce_period

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_DAY = timedelta(days=1)
ONE_MILLISECOND = timedelta(milliseconds=1)


def date_to_timestamp(value: DateLike, tz: Optional[tzinfo] = None) -> int:
    """
    Return milliseconds elapsed since 1970-01-01T00:00:00Z.

    Example:
        '01 Jan 1970 00:00:00 UTC' -> 0
        '04 Dec 1995 00:12:00 UTC' -> 818035920000

    Raises:
        InvalidDateError: If the date string cannot be parsed.
    """
    return (to_instant(value, tz) - EPOCH) // ONE_MILLISECOND


def get_day_name(value: DateLike, tz: Optional[tzinfo] = None) -> str:
    """Return the English name of the day of the week."""
    return DAY_NAMES[day_index(to_datetime(value, tz))]


def get_quarter(value: DateLike, tz: Optional[tzinfo] = None) -> int:
    """Return the quarter of the year (1-4)."""
    return (to_datetime(value, tz).month - 1) // 3 + 1


def is_leap_year(value: Union[DateLike, int], tz: Optional[tzinfo] = None) -> bool:
    """
    Determine whether the year of the date is a leap year.

    An int is taken as the year itself.
    """
    year = value if isinstance(value, int) else to_datetime(value, tz).year
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def get_count_days_in_month(month: int, year: int) -> int:
    """
    Return the number of days in a 1-indexed month of a year.

    Equals the day before the first of the next month. calendar.monthrange
    gives the same count without stepping past December 9999.

    Raises:
        pydantic.ValidationError: If month is outside 1..12.
    """
    target = CalendarMonth(month=month, year=year)
    return calendar.monthrange(target.year, target.month)[1]


def get_count_days_on_period(start: DateLike, end: DateLike, tz: Optional[tzinfo] = None) -> int:
    """
    Return the number of days between two dates, both ends included.

    Fractional days round half up. A reversed period yields a count
    below one.

    Example:
        '2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z' -> 12
    """
    days = (to_instant(end, tz) - to_instant(start, tz)) / ONE_DAY
    return math.floor(days + 0.5) + 1


def is_date_in_period(
    value: DateLike,
    period: Union[DatePeriod, Mapping[str, str]],
    tz: Optional[tzinfo] = None,
) -> bool:
    """
    Return True if the date lies within the period, both ends included.

    Example:
        '2024-02-01', {'start': '2024-02-02', 'end': '2024-03-02'} -> False
        '2024-02-02', {'start': '2024-02-02', 'end': '2024-03-02'} -> True
    """
    period = coerce_period(period)
    moment = to_instant(value, tz)
    return to_instant(period.start, tz) <= moment <= to_instant(period.end, tz)
