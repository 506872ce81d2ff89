"""
Searches for derived dates: next Friday, next Friday the 13th, week numbers.
"""

import math
from datetime import MAXYEAR, date, datetime, timedelta, tzinfo
from typing import Optional, Union

from date_tasks.core.dates import (
    FRIDAY,
    DateLike,
    InvalidDateError,
    day_index,
    is_plain_date,
    to_datetime,
)

ONE_WEEK = timedelta(weeks=1)


def get_next_friday(value: DateLike, tz: Optional[tzinfo] = None) -> Union[date, datetime]:
    """
    Return the date of the next Friday after the given date.

    A Friday yields the Friday one week later. The time of day is kept,
    and a plain date yields a plain date.

    Example:
        date(2024, 2, 3) -> date(2024, 2, 9)
        date(2024, 2, 16) -> date(2024, 2, 23)
    """
    moment = value if is_plain_date(value) else to_datetime(value, tz)
    offset = FRIDAY - day_index(moment)
    if offset <= 0:
        offset += 7
    try:
        return moment + timedelta(days=offset)
    except OverflowError as e:
        raise InvalidDateError(value, "next Friday is out of range") from e


def get_week_number_by_date(value: DateLike, tz: Optional[tzinfo] = None) -> int:
    """
    Return the week number of the year for a given date.

    Week 1 is the week containing January 1 and weeks start on Monday.
    Weeks are counted from the last day of week 1; when January 1 is a
    Sunday, that day is January 1 itself.

    Example:
        date(2024, 1, 3) -> 1
        date(2024, 1, 31) -> 5
        date(2024, 2, 23) -> 8
    """
    moment = to_datetime(value, tz)
    first_january = moment.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    index = day_index(first_january)

    if index > 0:
        anchor = first_january + timedelta(days=7 - index)
    else:
        anchor = first_january

    return math.ceil((moment - anchor) / ONE_WEEK) + 1


def get_next_friday_the_13th(value: DateLike, tz: Optional[tzinfo] = None) -> Union[date, datetime]:
    """
    Return the next Friday the 13th, scanning from the month of the date.

    The month of the date itself is included in the search, even when its
    13th has already passed.

    Example:
        date(2024, 1, 13) -> date(2024, 9, 13)
        date(2023, 2, 1) -> date(2023, 10, 13)
    """
    moment = value if is_plain_date(value) else to_datetime(value, tz)
    year, first_month = moment.year, moment.month

    while year <= MAXYEAR:
        for month in range(first_month, 13):
            thirteenth = date(year, month, 13)
            if day_index(thirteenth) == FRIDAY:
                if is_plain_date(moment):
                    return thirteenth
                return datetime(year, month, 13, tzinfo=moment.tzinfo)
        year += 1
        first_month = 1

    raise InvalidDateError(value, "next Friday the 13th is out of range")
