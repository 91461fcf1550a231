"""
Strict 24-hour HH:mm time parsing.

Accepts exactly two digits, a colon and two digits ("09:30"). Single-digit
hours, seconds, whitespace and out-of-range values are rejected.
"""

import re
from datetime import date, datetime, time
from typing import Optional

from core.contracts.appointment import AppointmentField
from scheduling.appointments.validators.field_validator import field_error

TIME_FORMAT = "HH:mm"

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")


def parse_time_of_day(text: Optional[str]) -> time:
    """
    Parse a 24-hour HH:mm string.

    Args:
        text: Raw time text from the form.

    Returns:
        Parsed time with zero seconds.

    Raises:
        ValueError: If text is not a valid HH:mm time.
    """
    if not isinstance(text, str):
        raise ValueError(f"Time must be text in {TIME_FORMAT} format, got {type(text).__name__}")

    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"Time '{text}' does not match {TIME_FORMAT}")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23:
        raise ValueError(f"Hour out of range in '{text}'")
    if minute > 59:
        raise ValueError(f"Minute out of range in '{text}'")
    return time(hour, minute)


def parse_local_datetime(
    day: date,
    text: Optional[str],
    field: AppointmentField,
) -> datetime:
    """
    Combine a calendar date with an HH:mm time into a naive local datetime.

    Args:
        day: Selected calendar date.
        text: Raw time text.
        field: "start_time" or "end_time", used for the error.

    Raises:
        FieldError: If the time text cannot be parsed.
    """
    try:
        time_of_day = parse_time_of_day(text)
    except ValueError:
        raise field_error(field) from None
    return datetime.combine(day, time_of_day)
