"""
Date Tasks - date and calendar calculation utilities.
"""

from date_tasks.core import (
    InvalidDateError,
    build_work_schedule,
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    get_work_schedule,
    is_date_in_period,
    is_leap_year,
    summarize_date,
)
from date_tasks.data.schemas import DatePeriod, WorkScheduleRequest

__version__ = "0.1.0"

__all__ = [
    "DatePeriod",
    "InvalidDateError",
    "WorkScheduleRequest",
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
]
