"""
Data models for the date tasks using Pydantic.
"""

from datetime import date, datetime
from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class DatePeriod(BaseModel):
    """A period between two date strings, both ends inclusive."""

    start: str = Field(..., description="Start date of the period")
    end: str = Field(..., description="End date of the period")


class CalendarMonth(BaseModel):
    """A 1-indexed month of a specific year."""

    month: int = Field(..., ge=1, le=12, description="Month number (1 = January)")
    year: int = Field(..., ge=1, le=9999, description="Four-digit year")


class WorkScheduleRequest(BaseModel):
    """Request model for work schedule generation."""

    period: DatePeriod = Field(..., description="Period in DD-MM-YYYY format")
    count_work_days: int = Field(..., ge=1, description="Consecutive working days per cycle")
    count_off_days: int = Field(..., ge=0, description="Consecutive days off per cycle")


class WorkScheduleResult(BaseModel):
    """Complete result of work schedule generation."""

    request: WorkScheduleRequest = Field(..., description="The validated request")
    work_dates: List[str] = Field(default_factory=list, description="Working dates in DD-MM-YYYY format")
    calendar_days: int = Field(..., ge=0, description="Total calendar days in the period")
    work_days: int = Field(..., ge=0, description="Number of working days in the period")
    off_days: int = Field(..., ge=0, description="Number of days off in the period")


class DateSummary(BaseModel):
    """Every derived value for a single date."""

    value: datetime = Field(..., description="The evaluated date value")
    timestamp: int = Field(..., description="Milliseconds since 1970-01-01T00:00:00Z")
    time: str = Field(..., description="Time in HH:MM:SS format")
    formatted: str = Field(..., description="Date in M/D/YYYY, H:MM:SS AM/PM format")
    day_name: str = Field(..., description="English name of the day of the week")
    quarter: int = Field(..., ge=1, le=4, description="Quarter of the year")
    week_number: int = Field(..., description="Monday-based week number of the year")
    is_leap_year: bool = Field(..., description="Whether the year is a leap year")
    days_in_month: int = Field(..., ge=28, le=31, description="Number of days in the month")
    next_friday: datetime = Field(..., description="The next Friday after the date")
    next_friday_the_13th: date = Field(..., description="The next Friday the 13th")


class Config(BaseModel):
    """Configuration for the date tasks."""

    timezone: str = Field(default="UTC", description="IANA zone used to read calendar components")
    output_format: str = Field(default="console", description="Default output format: console or json")
    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the zone name is known to the zoneinfo database."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown time zone: {v}")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Only console and json output are supported."""
        v = v.lower()
        if v not in ("console", "json"):
            raise ValueError("output_format must be 'console' or 'json'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the logging level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    def get_tzinfo(self) -> ZoneInfo:
        """Return the configured zone as a tzinfo."""
        return ZoneInfo(self.timezone)


def coerce_period(period) -> DatePeriod:
    """Accept a DatePeriod or a mapping with 'start' and 'end' keys."""
    if isinstance(period, DatePeriod):
        return period
    return DatePeriod.model_validate(period)
