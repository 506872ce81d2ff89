"""
Tests for the calendar search functions.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from date_tasks.core.calendar_search import (
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)
from date_tasks.core.dates import InvalidDateError


class TestNextFriday:
    """Tests for get_next_friday."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 2, 3), date(2024, 2, 9)),    # Saturday
            (date(2024, 2, 13), date(2024, 2, 16)),  # Tuesday
            (date(2024, 2, 16), date(2024, 2, 23)),  # Friday -> next week
            (date(2024, 2, 18), date(2024, 2, 23)),  # Sunday
            (date(2024, 2, 15), date(2024, 2, 16)),  # Thursday
        ],
    )
    def test_examples(self, value, expected):
        assert get_next_friday(value) == expected

    def test_crosses_year_boundary(self):
        assert get_next_friday(date(2024, 12, 28)) == date(2025, 1, 3)

    def test_crosses_leap_day(self):
        assert get_next_friday(date(2024, 2, 24)) == date(2024, 3, 1)

    def test_string_input_returns_aware_datetime(self):
        result = get_next_friday("2024-02-03T00:00:00Z")
        assert result == datetime(2024, 2, 9, tzinfo=timezone.utc)

    def test_keeps_time_of_day(self):
        result = get_next_friday(datetime(2024, 2, 13, 17, 45, 10))
        assert result == datetime(2024, 2, 16, 17, 45, 10)

    def test_does_not_modify_input(self):
        value = datetime(2024, 2, 3, 9, 0)
        get_next_friday(value)
        assert value == datetime(2024, 2, 3, 9, 0)

    def test_always_friday_within_one_week(self):
        start = date(2023, 12, 20)
        for offset in range(60):
            value = start + timedelta(days=offset)
            result = get_next_friday(value)
            assert result.weekday() == 4
            assert 0 < (result - value).days <= 7


class TestWeekNumber:
    """Tests for get_week_number_by_date."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 1, 1), 1),
            (date(2024, 1, 3), 1),
            (date(2024, 1, 7), 1),
            (date(2024, 1, 8), 2),
            (date(2024, 1, 31), 5),
            (date(2024, 2, 23), 8),
            (date(2024, 12, 31), 53),
        ],
    )
    def test_year_starting_on_monday(self, value, expected):
        assert get_week_number_by_date(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2025, 1, 1), 1),   # Wednesday
            (date(2025, 1, 5), 1),   # Sunday
            (date(2025, 1, 6), 2),   # Monday
        ],
    )
    def test_year_starting_mid_week(self, value, expected):
        assert get_week_number_by_date(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2023, 1, 1), 1),   # Sunday, alone in week 1
            (date(2023, 1, 2), 2),   # Monday
            (date(2023, 1, 8), 2),   # Sunday
            (date(2023, 1, 9), 3),   # Monday
        ],
    )
    def test_january_first_on_sunday(self, value, expected):
        assert get_week_number_by_date(value) == expected

    def test_time_after_midnight_on_last_day_of_week_one(self):
        # Counting starts at the first instant of the Sunday closing week 1
        assert get_week_number_by_date(datetime(2024, 1, 7, 10, 0)) == 2

    def test_string_input(self):
        assert get_week_number_by_date("2024-01-31T00:00:00Z") == 5


class TestNextFridayThe13th:
    """Tests for get_next_friday_the_13th."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 1, 13), date(2024, 9, 13)),
            (date(2023, 2, 1), date(2023, 10, 13)),
            (date(2024, 10, 1), date(2024, 12, 13)),
        ],
    )
    def test_examples(self, value, expected):
        assert get_next_friday_the_13th(value) == expected

    def test_rolls_over_to_next_year(self):
        assert get_next_friday_the_13th(date(2025, 7, 1)) == date(2026, 2, 13)

    def test_current_month_is_included(self):
        assert get_next_friday_the_13th(date(2024, 9, 1)) == date(2024, 9, 13)

    def test_current_month_is_included_after_the_13th(self):
        # The month of the date is scanned even when its 13th has passed
        assert get_next_friday_the_13th(date(2024, 9, 20)) == date(2024, 9, 13)

    def test_datetime_input_returns_midnight(self):
        result = get_next_friday_the_13th(datetime(2024, 1, 13, 15, 30, tzinfo=timezone.utc))
        assert result == datetime(2024, 9, 13, tzinfo=timezone.utc)

    def test_result_is_friday_the_13th(self):
        for year in range(2000, 2030):
            result = get_next_friday_the_13th(date(year, 1, 1))
            assert result.day == 13
            assert result.weekday() == 4

    def test_no_friday_the_13th_before_end_of_calendar(self):
        with pytest.raises(InvalidDateError, match="out of range"):
            get_next_friday_the_13th(date(9999, 12, 14))


class TestEndOfCalendar:
    """Searches past the last representable day."""

    def test_next_friday_out_of_range(self):
        # 9999-12-31 is a Friday
        with pytest.raises(InvalidDateError, match="out of range"):
            get_next_friday(date(9999, 12, 31))

    def test_next_friday_at_end_of_calendar_is_value_error(self):
        with pytest.raises(ValueError):
            get_next_friday(datetime(9999, 12, 31, 12, tzinfo=timezone.utc))
