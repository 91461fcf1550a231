"""
Required-field checks for appointment input.

Each check raises FieldError naming exactly one field. Callers run the checks
in REQUIRED_FIELD_ORDER so the first missing input is the one reported.
"""

from datetime import date
from typing import Any, Dict, Optional

from core.contracts.appointment import AppointmentField
from scheduling.appointments.errors import FieldError


# =============================================================================
# MESSAGES
# =============================================================================

FIELD_MESSAGES: Dict[AppointmentField, str] = {
    "title": "Invalid data. Title cannot be empty, please enter a title.",
    "description": "Invalid data. Description cannot be empty, please enter a description.",
    "location": "Invalid data. Location cannot be empty, please enter a location.",
    "type": "Invalid data. Type cannot be empty, please enter an appointment type.",
    "contact": "Invalid data. Please select a contact.",
    "start_date": "Invalid data. Please enter a start date.",
    "start_time": "Invalid start time entered. Please enter time as HH:mm in 24 hour format.",
    "end_date": "Invalid data. Please enter an end date.",
    "end_time": "Invalid end time entered. Please enter time as HH:mm in 24 hour format.",
    "customer": "Invalid data. Please select a customer.",
    "user": "Invalid data. Please select a user.",
}


def field_error(field: AppointmentField) -> FieldError:
    """Build the FieldError for a field with its display message."""
    return FieldError(field, FIELD_MESSAGES[field])


# =============================================================================
# CHECKS
# =============================================================================

def require_text(value: Optional[str], field: AppointmentField) -> str:
    """
    Return a non-empty text value.

    Raises:
        FieldError: If value is None or empty.
    """
    if value is None or value == "":
        raise field_error(field)
    return str(value)


def require_selection(value: Any, field: AppointmentField) -> int:
    """
    Return the identifier of a selected contact, customer or user.

    Raises:
        FieldError: If nothing was selected or the id is not an integer.
    """
    if value is None or isinstance(value, bool):
        raise field_error(field)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise field_error(field) from None


def require_date(value: Optional[date], field: AppointmentField) -> date:
    """
    Return a selected calendar date.

    Raises:
        FieldError: If no date was selected.
    """
    if not isinstance(value, date):
        raise field_error(field)
    return value
