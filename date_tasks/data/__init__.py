"""
Data models and schemas for the date tasks.
"""

from date_tasks.data.schemas import (
    CalendarMonth,
    Config,
    DatePeriod,
    DateSummary,
    WorkScheduleRequest,
    WorkScheduleResult,
    coerce_period,
)

__all__ = [
    "CalendarMonth",
    "Config",
    "DatePeriod",
    "DateSummary",
    "WorkScheduleRequest",
    "WorkScheduleResult",
    "coerce_period",
]
