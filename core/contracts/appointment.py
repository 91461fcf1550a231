"""
Appointment Record Contract.

Defines the dict shapes exchanged between the appointment form controller,
the validation core and the appointment repository.

This contract is consumed by:
- validate_and_prepare (candidate construction, overlap detection)
- AppointmentRepository implementations (storage and lookup)
- Save pipeline agents (context passing)

CRITICAL INVARIANTS:
- start and end are naive datetimes in the caller's local timezone
- appointment_id is present ONLY on persisted appointments
- customer_id, user_id, contact_id reference entities owned elsewhere
- Pure schema definition only
"""

from datetime import date, datetime
from typing import Literal, Optional, TypedDict


# =============================================================================
# FIELD NAMES
# =============================================================================

AppointmentField = Literal[
    "title",
    "description",
    "location",
    "type",
    "contact",
    "start_date",
    "start_time",
    "end_date",
    "end_time",
    "customer",
    "user",
]

# Order in which required inputs are checked; first failure wins.
REQUIRED_FIELD_ORDER: tuple[AppointmentField, ...] = (
    "title",
    "description",
    "location",
    "type",
    "contact",
    "start_date",
    "start_time",
    "end_date",
    "end_time",
    "customer",
    "user",
)


# =============================================================================
# APPOINTMENT RECORD
# =============================================================================

class AppointmentRecord(TypedDict, total=False):
    """
    A candidate or persisted appointment.

    Candidates built by the validator carry every key except appointment_id.
    """
    appointment_id: int
    title: str
    description: str
    location: str
    type: str
    start: datetime   # naive, local wall-clock
    end: datetime     # naive, local wall-clock
    customer_id: int
    user_id: int
    contact_id: int


# =============================================================================
# RAW FORM INPUT
# =============================================================================

class AppointmentForm(TypedDict, total=False):
    """
    Raw appointment input as collected by a controller.

    Any key may be missing or None; the validator reports which.
    appointment_id is set only when editing an existing appointment.
    """
    appointment_id: Optional[int]
    title: Optional[str]
    description: Optional[str]
    location: Optional[str]
    type: Optional[str]
    contact_id: Optional[int]
    customer_id: Optional[int]
    user_id: Optional[int]
    start_date: Optional[date]
    start_time: Optional[str]   # HH:mm, 24-hour
    end_date: Optional[date]
    end_time: Optional[str]     # HH:mm, 24-hour
