"""Tests for validate_and_prepare.

These tests validate:
- Accepted candidates are normalized AppointmentRecord dicts
- Check order: fields -> ordering -> overlap -> business hours
- Overlap scenarios for the same and a different customer
- Update validation ignores the appointment being edited
- Deterministic results (same input -> same output)
"""

import copy
from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from scheduling.appointments import (
    Accepted,
    ConflictClass,
    Rejected,
    RejectionKind,
    validate_and_prepare,
    validate_form,
)
from fixtures import APPOINTMENT_DAY, EASTERN, TODAY, make_existing, make_form


EXISTING = make_existing(7, "2024-01-01T10:00", "2024-01-01T11:00", title="Kickoff")


def validate(form, existing=(), local_tz=EASTERN, today=TODAY):
    return validate_form(form, list(existing), today=today, local_timezone=local_tz)


# =============================================================================
# ACCEPTANCE
# =============================================================================

class TestAccepted:
    """Tests for fully valid input."""

    def test_valid_candidate_accepted(self):
        """Valid input with no existing appointments is accepted."""
        result = validate_and_prepare(
            "Quarterly review",
            "Review of account activity",
            "Room 4",
            "Planning Session",
            3,
            1,
            2,
            APPOINTMENT_DAY,
            "12:00",
            APPOINTMENT_DAY,
            "13:00",
            [],
            today=TODAY,
            local_timezone=EASTERN,
        )

        assert isinstance(result, Accepted)
        assert result.accepted is True
        assert result.candidate == {
            "title": "Quarterly review",
            "description": "Review of account activity",
            "location": "Room 4",
            "type": "Planning Session",
            "start": datetime(2024, 1, 1, 12, 0),
            "end": datetime(2024, 1, 1, 13, 0),
            "customer_id": 1,
            "user_id": 2,
            "contact_id": 3,
        }

    def test_new_candidate_has_no_appointment_id(self):
        result = validate(make_form())
        assert "appointment_id" not in result.candidate

    def test_candidate_spanning_days_accepted(self):
        """Start and end may fall on different dates."""
        result = validate(make_form(end_date=date(2024, 1, 2), end_time="09:00"))
        assert result.accepted is True


# =============================================================================
# ORDERING
# =============================================================================

class TestOrderingThroughValidation:
    """Tests for start >= end handling."""

    @pytest.mark.parametrize(
        "start_time,end_time",
        [("13:00", "13:00"), ("14:00", "13:00"), ("21:00", "09:00")],
    )
    def test_start_not_before_end_is_ordering_error(self, start_time, end_time):
        result = validate(make_form(start_time=start_time, end_time=end_time))

        assert isinstance(result, Rejected)
        assert result.kind == RejectionKind.ORDERING

    def test_ordering_checked_before_overlap(self):
        """An inverted interval that also collides is still an ordering error."""
        result = validate(make_form(start_time="10:30", end_time="10:15"), [EXISTING])
        assert result.kind == RejectionKind.ORDERING

    def test_ordering_checked_before_business_hours(self):
        result = validate(make_form(start_time="23:00", end_time="06:00"))
        assert result.kind == RejectionKind.ORDERING


# =============================================================================
# OVERLAP
# =============================================================================

class TestOverlapThroughValidation:
    """Overlap scenarios against an existing 10:00-11:00 appointment."""

    @pytest.mark.parametrize(
        "start_time,end_time,expected",
        [
            ("09:30", "10:30", ConflictClass.END_INSIDE),
            ("10:30", "11:30", ConflictClass.START_INSIDE),
            ("09:00", "12:00", ConflictClass.ENGULFS),
        ],
    )
    def test_overlapping_candidate_rejected(self, start_time, end_time, expected):
        result = validate(make_form(start_time=start_time, end_time=end_time), [EXISTING])

        assert result.kind == RejectionKind.OVERLAP
        assert result.conflict_class == expected
        assert result.conflicting_appointment["appointment_id"] == 7
        assert "Title: Kickoff" in result.detail

    def test_adjacent_candidate_accepted(self):
        result = validate(make_form(start_time="11:00", end_time="12:00"), [EXISTING])
        assert result.accepted is True

    def test_different_customer_same_interval_accepted(self):
        result = validate(
            make_form(customer_id=2, start_time="10:00", end_time="11:00"),
            [EXISTING],
        )
        assert result.accepted is True

    def test_overlap_checked_before_business_hours(self):
        """A colliding candidate that also ends late reports the overlap."""
        late = make_existing(8, "2024-01-01T21:00", "2024-01-01T22:00")
        result = validate(make_form(start_time="21:30", end_time="23:00"), [late])
        assert result.kind == RejectionKind.OVERLAP


# =============================================================================
# UPDATES
# =============================================================================

class TestUpdateValidation:
    """Tests for validating an edit of an existing appointment."""

    def test_moving_appointment_over_itself_accepted(self):
        result = validate(
            make_form(appointment_id=7, start_time="10:30", end_time="11:30"),
            [EXISTING],
        )

        assert result.accepted is True
        assert result.candidate["appointment_id"] == 7

    def test_update_still_conflicts_with_others(self):
        other = make_existing(8, "2024-01-01T11:00", "2024-01-01T12:00")
        result = validate(
            make_form(appointment_id=7, start_time="10:30", end_time="11:30"),
            [EXISTING, other],
        )

        assert result.kind == RejectionKind.OVERLAP
        assert result.conflicting_appointment["appointment_id"] == 8


# =============================================================================
# BUSINESS HOURS
# =============================================================================

class TestBusinessHoursThroughValidation:
    """Business-hours scenarios with local time equal to Eastern."""

    def test_start_too_early(self):
        result = validate(make_form(start_time="07:00", end_time="09:00"))

        assert result.kind == RejectionKind.TIME_WINDOW
        assert result.field == "start_time"

    def test_end_too_late(self):
        result = validate(make_form(start_time="21:00", end_time="23:00"))

        assert result.kind == RejectionKind.TIME_WINDOW
        assert result.field == "end_time"

    def test_exact_business_hours_accepted(self):
        result = validate(make_form(start_time="08:00", end_time="22:00"))
        assert result.accepted is True

    def test_local_timezone_shifts_window(self):
        """07:00 is too early in New York but fine in Chicago."""
        form = make_form(start_time="07:00", end_time="08:00")

        assert validate(form).accepted is False
        assert validate(form, local_tz=ZoneInfo("America/Chicago")).accepted is True


# =============================================================================
# DETERMINISM
# =============================================================================

class TestDeterminism:
    """Tests for pure-function behavior."""

    @pytest.mark.parametrize(
        "form",
        [
            make_form(),
            make_form(title=""),
            make_form(start_time="09:30", end_time="10:30"),
            make_form(start_time="21:00", end_time="23:00"),
        ],
    )
    def test_same_input_same_result(self, form):
        first = validate(form, [EXISTING])
        second = validate(form, [EXISTING])

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_inputs_not_mutated(self):
        form = make_form(start_time="10:30", end_time="11:30")
        existing = [EXISTING]
        form_before = copy.deepcopy(form)
        existing_before = copy.deepcopy(existing)

        validate(form, existing)

        assert form == form_before
        assert existing == existing_before
