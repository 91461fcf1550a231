"""
Overlap detection against a customer's existing appointments.

Three rules run in fixed order against each existing appointment, and the
first appointment matching any rule is reported:

    START_INSIDE:  existing.start <= start <  existing.end
    END_INSIDE:    existing.start <  end   <= existing.end
    ENGULFS:       (start < existing.start or end == existing.start)
                   and (end > existing.end or end == existing.end)

The comparisons are intentionally not a symmetric interval test. A
candidate starting exactly when an existing appointment ends is accepted.
"""

from datetime import datetime
from typing import Iterable, Optional

from core.contracts.appointment import AppointmentRecord
from scheduling.appointments.errors import ConflictClass, OverlapError


_CONFLICT_HEADLINES = {
    ConflictClass.START_INSIDE: "This appointment starts during an existing appointment for this customer.",
    ConflictClass.END_INSIDE: "This appointment ends during an existing appointment for this customer.",
    ConflictClass.ENGULFS: "This appointment overlaps with an existing appointment for this customer.",
}

_CONFLICT_HINTS = {
    ConflictClass.START_INSIDE: "Please select a new start time and try again.",
    ConflictClass.END_INSIDE: "Please select a new end time and try again.",
    ConflictClass.ENGULFS: "Please select a new start and end time and try again.",
}


def classify_conflict(
    start: datetime,
    end: datetime,
    existing: AppointmentRecord,
) -> Optional[ConflictClass]:
    """
    Return the first overlap rule the candidate interval matches, if any.

    Args:
        start: Candidate start.
        end: Candidate end.
        existing: Existing appointment with 'start' and 'end'.

    Returns:
        ConflictClass of the first matching rule, or None.
    """
    existing_start = existing["start"]
    existing_end = existing["end"]

    if existing_start <= start < existing_end:
        return ConflictClass.START_INSIDE
    if existing_start < end <= existing_end:
        return ConflictClass.END_INSIDE
    if (start < existing_start or end == existing_start) and end >= existing_end:
        return ConflictClass.ENGULFS
    return None


def format_overlap_detail(conflict: ConflictClass, existing: AppointmentRecord) -> str:
    """Build the display message listing the conflicting appointment."""
    return (
        f"{_CONFLICT_HEADLINES[conflict]} The conflicting appointment:\n\n"
        f"Appointment ID #:{existing.get('appointment_id')}\n"
        f"Title: {existing.get('title')}\n"
        f"From: {existing['start'].isoformat(timespec='minutes')}\n"
        f"To: {existing['end'].isoformat(timespec='minutes')}\n\n"
        f"{_CONFLICT_HINTS[conflict]}"
    )


def check_overlap(
    start: datetime,
    end: datetime,
    existing_appointments: Iterable[AppointmentRecord],
    customer_id: Optional[int] = None,
    exclude_appointment_id: Optional[int] = None,
) -> None:
    """
    Raise on the first existing appointment the candidate conflicts with.

    Args:
        start: Candidate start.
        end: Candidate end.
        existing_appointments: Snapshot of the customer's appointments, in
            the order the repository returned them.
        customer_id: When given, appointments of other customers are skipped.
        exclude_appointment_id: Appointment being updated, skipped if present.

    Raises:
        OverlapError: On the first conflict in iteration order.
    """
    for existing in existing_appointments:
        if customer_id is not None and existing.get("customer_id", customer_id) != customer_id:
            continue
        if exclude_appointment_id is not None and existing.get("appointment_id") == exclude_appointment_id:
            continue

        conflict = classify_conflict(start, end, existing)
        if conflict is not None:
            raise OverlapError(
                conflict_class=conflict,
                conflicting_appointment=existing,
                detail=format_overlap_detail(conflict, existing),
            )
