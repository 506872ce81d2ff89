"""
Core date calculations.
"""

from date_tasks.core.calendar_search import (
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)
from date_tasks.core.dates import InvalidDateError, to_datetime, to_instant
from date_tasks.core.formatting import format_date, get_time
from date_tasks.core.queries import (
    date_to_timestamp,
    get_count_days_in_month,
    get_count_days_on_period,
    get_day_name,
    get_quarter,
    is_date_in_period,
    is_leap_year,
)
from date_tasks.core.schedule import (
    build_work_schedule,
    get_count_weekends_in_month,
    get_work_schedule,
)
from date_tasks.core.summary import summarize_date

__all__ = [
    "InvalidDateError",
    "build_work_schedule",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
    "summarize_date",
    "to_datetime",
    "to_instant",
]
