"""Individual appointment checks used by validate_and_prepare."""

from scheduling.appointments.validators.business_hours import (
    DEFAULT_BUSINESS_HOURS,
    BusinessHours,
    check_business_hours,
    check_ordering,
    local_business_window,
)
from scheduling.appointments.validators.field_validator import (
    require_date,
    require_selection,
    require_text,
)
from scheduling.appointments.validators.overlap_detector import check_overlap, classify_conflict
from scheduling.appointments.validators.time_parser import parse_local_datetime, parse_time_of_day

__all__ = [
    "DEFAULT_BUSINESS_HOURS",
    "BusinessHours",
    "check_business_hours",
    "check_ordering",
    "local_business_window",
    "require_date",
    "require_selection",
    "require_text",
    "check_overlap",
    "classify_conflict",
    "parse_local_datetime",
    "parse_time_of_day",
]
