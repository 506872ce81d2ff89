"""
Tests for the date summary and the package-level API.
"""

from datetime import date, datetime, timedelta, timezone

import date_tasks
from date_tasks.core.summary import summarize_date


class TestSummarizeDate:
    """Tests for summarize_date."""

    def test_summary_of_string(self):
        summary = summarize_date("2024-02-01T15:00:00.000Z")

        assert summary.formatted == "2/1/2024, 3:00:00 PM"
        assert summary.time == "15:00:00"
        assert summary.day_name == "Thursday"
        assert summary.quarter == 1
        assert summary.week_number == 5
        assert summary.is_leap_year is True
        assert summary.days_in_month == 29
        assert summary.next_friday == datetime(2024, 2, 2, 15, tzinfo=timezone.utc)
        assert summary.next_friday_the_13th == date(2024, 9, 13)
        assert summary.timestamp == 1706799600000

    def test_summary_in_target_zone(self):
        plus_ten = timezone(timedelta(hours=10))
        summary = summarize_date("2024-03-31T20:00:00Z", tz=plus_ten)

        assert summary.day_name == "Monday"
        assert summary.quarter == 2
        assert summary.days_in_month == 30

    def test_summary_of_plain_date(self):
        summary = summarize_date(date(2023, 1, 1))

        assert summary.time == "00:00:00"
        assert summary.week_number == 1
        assert summary.next_friday_the_13th == date(2023, 1, 13)


class TestPackageApi:
    """The top-level package exposes every calculation."""

    def test_exports(self):
        for name in (
            "date_to_timestamp",
            "get_time",
            "get_day_name",
            "get_next_friday",
            "get_count_days_in_month",
            "get_count_days_on_period",
            "is_date_in_period",
            "format_date",
            "get_count_weekends_in_month",
            "get_week_number_by_date",
            "get_next_friday_the_13th",
            "get_quarter",
            "get_work_schedule",
            "is_leap_year",
        ):
            assert callable(getattr(date_tasks, name))

    def test_work_schedule_from_package(self):
        period = date_tasks.DatePeriod(start="01-01-2024", end="05-01-2024")
        assert date_tasks.get_work_schedule(period, 1, 3) == ["01-01-2024", "05-01-2024"]
