"""
Schedule generation: weekend counts and cyclic work schedules.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Mapping, Tuple, Union

from date_tasks.core.dates import InvalidDateError
from date_tasks.core.queries import get_count_days_in_month
from date_tasks.data.schemas import (
    CalendarMonth,
    DatePeriod,
    WorkScheduleRequest,
    WorkScheduleResult,
    coerce_period,
)

logger = logging.getLogger(__name__)

SCHEDULE_DATE_FORMAT = "%d-%m-%Y"


def parse_schedule_date(value: str) -> date:
    """
    Parse a date in DD-MM-YYYY format.

    Raises:
        InvalidDateError: If the string is not a valid DD-MM-YYYY date.
    """
    try:
        return datetime.strptime(value.strip(), SCHEDULE_DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(value, str(e)) from e


def format_schedule_date(value: date) -> str:
    """Format a date as DD-MM-YYYY."""
    return f"{value.day:02d}-{value.month:02d}-{value.year}"


def get_count_weekends_in_month(month: int, year: int) -> int:
    """
    Return the number of Saturdays and Sundays in a month.

    Example:
        5, 2022 -> 9
        12, 2023 -> 10
        1, 2024 -> 8

    Raises:
        pydantic.ValidationError: If month is outside 1..12.
    """
    target = CalendarMonth(month=month, year=year)
    first_day = date(target.year, target.month, 1)

    count = 0
    for offset in range(get_count_days_in_month(target.month, target.year)):
        if (first_day + timedelta(days=offset)).weekday() in (5, 6):
            count += 1
    return count


def _generate_work_dates(request: WorkScheduleRequest) -> Tuple[List[str], int]:
    """Return the work dates and the number of calendar days in the period."""
    start = parse_schedule_date(request.period.start)
    end = parse_schedule_date(request.period.end)

    calendar_days = max((end - start).days + 1, 0)
    cycle = request.count_work_days + request.count_off_days

    work_dates: List[str] = []
    for offset in range(calendar_days):
        # First count_work_days positions of every cycle are working days
        if offset % cycle < request.count_work_days:
            work_dates.append(format_schedule_date(start + timedelta(days=offset)))

    logger.debug(
        f"Generated {len(work_dates)} work dates over {calendar_days} days "
        f"({request.count_work_days} on / {request.count_off_days} off)"
    )
    return work_dates, calendar_days


def build_work_schedule(request: WorkScheduleRequest) -> WorkScheduleResult:
    """
    Generate a work schedule from a validated request.

    Args:
        request: WorkScheduleRequest with period and cycle lengths.

    Returns:
        WorkScheduleResult with the working dates and day counts.
    """
    work_dates, calendar_days = _generate_work_dates(request)
    return WorkScheduleResult(
        request=request,
        work_dates=work_dates,
        calendar_days=calendar_days,
        work_days=len(work_dates),
        off_days=calendar_days - len(work_dates),
    )


def get_work_schedule(
    period: Union[DatePeriod, Mapping[str, str]],
    count_work_days: int,
    count_off_days: int,
) -> List[str]:
    """
    Generate a work schedule for a period in DD-MM-YYYY format.

    Starting at the first day of the period, the schedule repeats
    count_work_days working days followed by count_off_days days off.
    Both ends of the period are inclusive.

    Example:
        {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
            -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

    Raises:
        pydantic.ValidationError: If count_work_days < 1 or count_off_days < 0.
        InvalidDateError: If a period end is not a DD-MM-YYYY date.
    """
    request = WorkScheduleRequest(
        period=coerce_period(period),
        count_work_days=count_work_days,
        count_off_days=count_off_days,
    )
    work_dates, _ = _generate_work_dates(request)
    return work_dates
