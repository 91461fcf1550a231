"""Tests for strict HH:mm time parsing.

These tests validate:
- Two-digit 24-hour times parse to the expected time
- Malformed and out-of-range input is rejected
- Date + time combination produces a naive local datetime
- Parse failures surface as FieldError for the right field
"""

from datetime import date, datetime, time

import pytest

from scheduling.appointments.errors import FieldError, RejectionKind
from scheduling.appointments.validators.time_parser import (
    parse_local_datetime,
    parse_time_of_day,
)


# =============================================================================
# parse_time_of_day
# =============================================================================

class TestParseTimeOfDay:
    """Tests for the HH:mm parser."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("09:30", time(9, 30)),
            ("00:00", time(0, 0)),
            ("23:59", time(23, 59)),
            ("12:05", time(12, 5)),
        ],
    )
    def test_valid_times_parse(self, text, expected):
        """Two-digit hour and minute parse exactly."""
        assert parse_time_of_day(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "9:30",      # single-digit hour
            "25:00",     # hour out of range
            "24:00",     # hour out of range
            "09:60",     # minute out of range
            "",          # empty
            "abc",       # non-numeric
            "09:30:00",  # seconds not allowed
            " 09:30",    # leading whitespace
            "09:30 ",    # trailing whitespace
            "0930",      # missing colon
            "09-30",     # wrong separator
            "９９:３０",   # non-ASCII digits
        ],
    )
    def test_invalid_times_raise_value_error(self, text):
        """Anything other than strict HH:mm is rejected."""
        with pytest.raises(ValueError):
            parse_time_of_day(text)

    def test_none_raises_value_error(self):
        """Missing text is a parse failure, not a TypeError."""
        with pytest.raises(ValueError):
            parse_time_of_day(None)


# =============================================================================
# parse_local_datetime
# =============================================================================

class TestParseLocalDatetime:
    """Tests for combining a date with a parsed time."""

    def test_combines_date_and_time(self):
        """Result is a naive datetime on the selected date."""
        result = parse_local_datetime(date(2024, 1, 1), "09:30", "start_time")

        assert result == datetime(2024, 1, 1, 9, 30)
        assert result.tzinfo is None

    def test_invalid_start_time_is_field_error(self):
        """Start time failures name the start_time field."""
        with pytest.raises(FieldError) as exc_info:
            parse_local_datetime(date(2024, 1, 1), "9:30", "start_time")

        assert exc_info.value.field == "start_time"
        assert exc_info.value.kind == RejectionKind.FIELD
        assert "HH:mm" in exc_info.value.detail

    def test_invalid_end_time_is_field_error(self):
        """End time failures name the end_time field."""
        with pytest.raises(FieldError) as exc_info:
            parse_local_datetime(date(2024, 1, 1), "25:00", "end_time")

        assert exc_info.value.field == "end_time"
        assert exc_info.value.detail.startswith("Invalid end time entered.")
