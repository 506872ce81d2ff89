"""
Rendering of date values as strings.
"""

from datetime import tzinfo
from typing import Optional

from date_tasks.core.dates import DateLike, to_datetime


def get_time(value: DateLike, tz: Optional[tzinfo] = None) -> str:
    """
    Return the time of day in HH:MM:SS format (24-hour clock).

    Example:
        datetime(2023, 6, 1, 8, 20, 55) -> '08:20:55'
    """
    moment = to_datetime(value, tz)
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


def format_date(value: DateLike, tz: Optional[tzinfo] = None) -> str:
    """
    Return the date formatted as 'M/D/YYYY, H:MM:SS AM|PM'.

    Example:
        '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
        '1999-01-05T02:20:00.000Z' -> '1/5/1999, 2:20:00 AM'
    """
    moment = to_datetime(value, tz)
    hour = moment.hour % 12 or 12
    meridiem = "PM" if moment.hour >= 12 else "AM"
    return (
        f"{moment.month}/{moment.day}/{moment.year:04d}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )
