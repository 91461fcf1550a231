"""
Appointment validation entry point.

Turns raw form values plus a snapshot of the customer's existing
appointments into a tagged ValidationResult. Pure function implementation
with no I/O side effects.

CRITICAL INVARIANTS:
- Same inputs (including today and local timezone) -> same result
- No system clock or timezone lookups; both are parameters
- Exactly one rejection reason, the first in check order
- Never raises for user-correctable input

Check order:
    title -> description -> location -> type -> contact
    -> start date -> start time -> end date -> end time
    -> customer -> user
    -> ordering -> overlap -> business hours (start, then end)
"""

from datetime import date, tzinfo
from typing import Any, Optional, Sequence

from core.contracts.appointment import AppointmentForm, AppointmentRecord
from core.logger import get_logger
from scheduling.appointments.errors import AppointmentValidationError
from scheduling.appointments.results import Accepted, Rejected, ValidationResult
from scheduling.appointments.validators.business_hours import (
    DEFAULT_BUSINESS_HOURS,
    BusinessHours,
    check_business_hours,
    check_ordering,
)
from scheduling.appointments.validators.field_validator import (
    require_date,
    require_selection,
    require_text,
)
from scheduling.appointments.validators.overlap_detector import check_overlap
from scheduling.appointments.validators.time_parser import parse_local_datetime

logger = get_logger(__name__)


def _prepare_candidate(
    title: Optional[str],
    description: Optional[str],
    location: Optional[str],
    appointment_type: Optional[str],
    contact_id: Any,
    customer_id: Any,
    user_id: Any,
    start_date: Optional[date],
    start_time_text: Optional[str],
    end_date: Optional[date],
    end_time_text: Optional[str],
) -> AppointmentRecord:
    """Run the required-field checks in order and build the candidate."""
    title = require_text(title, "title")
    description = require_text(description, "description")
    location = require_text(location, "location")
    appointment_type = require_text(appointment_type, "type")
    contact = require_selection(contact_id, "contact")

    start_day = require_date(start_date, "start_date")
    start = parse_local_datetime(start_day, start_time_text, "start_time")

    end_day = require_date(end_date, "end_date")
    end = parse_local_datetime(end_day, end_time_text, "end_time")

    customer = require_selection(customer_id, "customer")
    user = require_selection(user_id, "user")

    return AppointmentRecord(
        title=title,
        description=description,
        location=location,
        type=appointment_type,
        start=start,
        end=end,
        customer_id=customer,
        user_id=user,
        contact_id=contact,
    )


def validate_and_prepare(
    title: Optional[str],
    description: Optional[str],
    location: Optional[str],
    appointment_type: Optional[str],
    contact_id: Optional[int],
    customer_id: Optional[int],
    user_id: Optional[int],
    start_date: Optional[date],
    start_time_text: Optional[str],
    end_date: Optional[date],
    end_time_text: Optional[str],
    existing_appointments: Sequence[AppointmentRecord],
    *,
    today: date,
    local_timezone: tzinfo,
    business_hours: BusinessHours = DEFAULT_BUSINESS_HOURS,
    appointment_id: Optional[int] = None,
) -> ValidationResult:
    """
    Validate raw appointment input and build the normalized candidate.

    Args:
        title, description, location, appointment_type: Required text fields.
        contact_id, customer_id, user_id: Selected entity ids (None if unselected).
        start_date, end_date: Selected calendar dates.
        start_time_text, end_time_text: HH:mm, 24-hour.
        existing_appointments: Fresh snapshot of the customer's appointments.
            The first conflicting appointment in this order is reported.
        today: Date the business-hours conversion is anchored on.
        local_timezone: Caller's timezone.
        business_hours: Opening window, defaults to 08:00-22:00 America/New_York.
        appointment_id: Set when validating an edit; that appointment is
            ignored by the overlap check and copied onto the candidate.

    Returns:
        Accepted(candidate) or Rejected(error).
    """
    try:
        candidate = _prepare_candidate(
            title,
            description,
            location,
            appointment_type,
            contact_id,
            customer_id,
            user_id,
            start_date,
            start_time_text,
            end_date,
            end_time_text,
        )
        start, end = candidate["start"], candidate["end"]

        check_ordering(start, end)
        check_overlap(
            start,
            end,
            existing_appointments,
            customer_id=candidate["customer_id"],
            exclude_appointment_id=appointment_id,
        )
        check_business_hours(start, end, business_hours, today, local_timezone)
    except AppointmentValidationError as e:
        logger.info(f"Appointment rejected ({e.kind.value}): {getattr(e, 'field', '-')}")
        return Rejected(e)

    if appointment_id is not None:
        candidate["appointment_id"] = appointment_id

    logger.debug(f"Appointment accepted: {candidate['start']} -> {candidate['end']}")
    return Accepted(candidate)


def validate_form(
    form: AppointmentForm,
    existing_appointments: Sequence[AppointmentRecord],
    *,
    today: date,
    local_timezone: tzinfo,
    business_hours: BusinessHours = DEFAULT_BUSINESS_HOURS,
) -> ValidationResult:
    """
    Validate an AppointmentForm dict.

    Thin adapter over validate_and_prepare for controllers that collect
    input as a dict. Missing keys are treated as empty inputs.
    """
    return validate_and_prepare(
        form.get("title"),
        form.get("description"),
        form.get("location"),
        form.get("type"),
        form.get("contact_id"),
        form.get("customer_id"),
        form.get("user_id"),
        form.get("start_date"),
        form.get("start_time"),
        form.get("end_date"),
        form.get("end_time"),
        existing_appointments,
        today=today,
        local_timezone=local_timezone,
        business_hours=business_hours,
        appointment_id=form.get("appointment_id"),
    )
