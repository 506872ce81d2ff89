"""
Evaluation of every single-date operation at once.
"""

from datetime import tzinfo
from typing import Optional

from date_tasks.core.calendar_search import (
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)
from date_tasks.core.dates import DateLike, to_datetime
from date_tasks.core.formatting import format_date, get_time
from date_tasks.core.queries import (
    date_to_timestamp,
    get_count_days_in_month,
    get_day_name,
    get_quarter,
    is_leap_year,
)
from date_tasks.data.schemas import DateSummary


def summarize_date(value: DateLike, tz: Optional[tzinfo] = None) -> DateSummary:
    """
    Summarize a date.

    Args:
        value: Date string, date or datetime.
        tz: Optional zone to read calendar components in.

    Returns:
        DateSummary with every derived value.
    """
    moment = to_datetime(value, tz)
    next_friday_the_13th = get_next_friday_the_13th(moment)

    return DateSummary(
        value=moment,
        timestamp=date_to_timestamp(moment),
        time=get_time(moment),
        formatted=format_date(moment),
        day_name=get_day_name(moment),
        quarter=get_quarter(moment),
        week_number=get_week_number_by_date(moment),
        is_leap_year=is_leap_year(moment),
        days_in_month=get_count_days_in_month(moment.month, moment.year),
        next_friday=get_next_friday(moment),
        next_friday_the_13th=next_friday_the_13th.date(),
    )
