"""
Business-hours containment.

Opening and closing times are defined in the business timezone. For each
check they are placed on today's date, converted to the caller's local
timezone, and only the resulting clock time is compared against the
candidate's start and end clock times. Candidate dates are never compared
with today.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Tuple
from zoneinfo import ZoneInfo

from scheduling.appointments.errors import OrderingError, TimeWindowError


class BusinessHours:
    """Opening window in the business timezone plus comparison tolerance."""

    __slots__ = ("timezone", "open_time", "close_time", "tolerance")

    def __init__(
        self,
        timezone: tzinfo,
        open_time: time,
        close_time: time,
        tolerance: timedelta = timedelta(seconds=1),
    ) -> None:
        self.timezone = timezone
        self.open_time = open_time
        self.close_time = close_time
        self.tolerance = tolerance

    @property
    def label(self) -> str:
        """Human-readable window, e.g. '8:00 am and 10:00 pm EST'."""
        reference = datetime.combine(date(2000, 1, 1), self.open_time, tzinfo=self.timezone)
        zone_name = reference.tzname() or str(self.timezone)
        return f"{_format_clock(self.open_time)} and {_format_clock(self.close_time)} {zone_name}"

    def __repr__(self) -> str:
        return (
            f"BusinessHours(timezone={self.timezone!r}, open_time={self.open_time!r}, "
            f"close_time={self.close_time!r}, tolerance={self.tolerance!r})"
        )


DEFAULT_BUSINESS_HOURS = BusinessHours(
    timezone=ZoneInfo("America/New_York"),
    open_time=time(8, 0),
    close_time=time(22, 0),
)


def _format_clock(value: time) -> str:
    suffix = "am" if value.hour < 12 else "pm"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {suffix}"


def local_business_window(
    business_hours: BusinessHours,
    today: date,
    local_timezone: tzinfo,
) -> Tuple[time, time]:
    """
    Convert today's opening and closing times to local clock times.

    Args:
        business_hours: Window in the business timezone.
        today: Calendar date the conversion is anchored on.
        local_timezone: Caller's timezone.

    Returns:
        (local_open, local_close) as naive times of day.
    """
    zoned_open = datetime.combine(today, business_hours.open_time, tzinfo=business_hours.timezone)
    zoned_close = datetime.combine(today, business_hours.close_time, tzinfo=business_hours.timezone)
    local_open = zoned_open.astimezone(local_timezone).time().replace(tzinfo=None)
    local_close = zoned_close.astimezone(local_timezone).time().replace(tzinfo=None)
    return local_open, local_close


def _shift(value: time, delta: timedelta) -> time:
    # Wraps around midnight like a wall clock.
    return (datetime.combine(date(2000, 1, 1), value) + delta).time()


def check_ordering(start: datetime, end: datetime) -> None:
    """
    Raises:
        OrderingError: If end is not strictly after start.
    """
    if not start < end:
        raise OrderingError("Invalid data. Start date and time must be before end date and time.")


def check_business_hours(
    start: datetime,
    end: datetime,
    business_hours: BusinessHours,
    today: date,
    local_timezone: tzinfo,
) -> None:
    """
    Check that start and end clock times fall inside business hours.

    Start may be at or after ``open - tolerance``; end may be at or before
    ``close + tolerance``. Start is checked first.

    Raises:
        TimeWindowError: For the first boundary violated.
    """
    local_open, local_close = local_business_window(business_hours, today, local_timezone)

    if start.time() < _shift(local_open, -business_hours.tolerance):
        raise TimeWindowError(
            "start_time",
            f"Invalid data. Start time must be in-between business hours of {business_hours.label}.",
        )
    if end.time() > _shift(local_close, business_hours.tolerance):
        raise TimeWindowError(
            "end_time",
            f"Invalid data. End time must be in-between business hours of {business_hours.label}.",
        )
