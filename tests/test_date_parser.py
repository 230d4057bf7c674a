"""Tests for date parsing utilities."""

from datetime import UTC, date, datetime

import pytest

from fintrack.utils.date_parser import parse_date, parse_datetime

# A Saturday
TODAY = date(2024, 6, 15)


class TestParseDate:
    """Test parse_date."""

    def test_absolute_dates(self):
        assert parse_date("2024-01-15", today=TODAY) == date(2024, 1, 15)
        assert parse_date("January 15, 2024", today=TODAY) == date(2024, 1, 15)

    def test_simple_relative_dates(self):
        assert parse_date("today", today=TODAY) == TODAY
        assert parse_date("Yesterday", today=TODAY) == date(2024, 6, 14)
        assert parse_date("tomorrow", today=TODAY) == date(2024, 6, 16)

    def test_last_period(self):
        assert parse_date("last month", today=TODAY) == date(2024, 5, 1)
        assert parse_date("last year", today=TODAY) == date(2023, 1, 1)
        assert parse_date("last week", today=TODAY) == date(2024, 6, 3)
        assert parse_date("last monday", today=TODAY) == date(2024, 6, 10)
        assert parse_date("last saturday", today=TODAY) == date(2024, 6, 8)

    def test_this_and_next_period(self):
        assert parse_date("this month", today=TODAY) == date(2024, 6, 1)
        assert parse_date("this year", today=TODAY) == date(2024, 1, 1)
        assert parse_date("this week", today=TODAY) == date(2024, 6, 10)
        assert parse_date("next month", today=TODAY) == date(2024, 7, 1)
        assert parse_date("next year", today=TODAY) == date(2025, 1, 1)
        assert parse_date("next week", today=TODAY) == date(2024, 6, 17)

    def test_offsets(self):
        assert parse_date("in 30 days", today=TODAY) == date(2024, 7, 15)
        assert parse_date("in 2 weeks", today=TODAY) == date(2024, 6, 29)
        assert parse_date("in 1 month", today=TODAY) == date(2024, 7, 15)
        assert parse_date("in 1 year", today=TODAY) == date(2025, 6, 15)

    def test_invalid(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("gibberish", today=TODAY)


class TestParseDatetime:
    """Test parse_datetime."""

    NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)

    def test_now(self):
        assert parse_datetime("now", now=self.NOW) == self.NOW

    def test_date_resolves_to_midnight_utc(self):
        assert parse_datetime("2024-01-15", now=self.NOW) == datetime(2024, 1, 15, tzinfo=UTC)
        assert parse_datetime("yesterday", now=self.NOW) == datetime(2024, 6, 14, tzinfo=UTC)

    def test_time_of_day_is_kept(self):
        assert parse_datetime("2024-01-15 13:30", now=self.NOW) == datetime(
            2024, 1, 15, 13, 30, tzinfo=UTC
        )

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_datetime("bogus:value", now=self.NOW)
