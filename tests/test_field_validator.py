"""Tests for required-field checks.

These tests validate:
- Each missing field is reported by name
- Check order: title, description, location, type, contact,
  start date, start time, end date, end time, customer, user
- Earlier fields win when several are invalid
"""

import pytest

from core.contracts.appointment import REQUIRED_FIELD_ORDER
from scheduling.appointments.errors import FieldError, RejectionKind
from scheduling.appointments.validation import validate_form
from scheduling.appointments.validators.field_validator import (
    FIELD_MESSAGES,
    require_date,
    require_selection,
    require_text,
)
from fixtures import EASTERN, TODAY, make_form


# Form key that, when blanked, triggers each field's error
FORM_KEY_FOR_FIELD = {
    "title": ("title", ""),
    "description": ("description", ""),
    "location": ("location", ""),
    "type": ("type", ""),
    "contact": ("contact_id", None),
    "start_date": ("start_date", None),
    "start_time": ("start_time", "9:30"),
    "end_date": ("end_date", None),
    "end_time": ("end_time", "abc"),
    "customer": ("customer_id", None),
    "user": ("user_id", None),
}


def _validate(form):
    return validate_form(form, [], today=TODAY, local_timezone=EASTERN)


# =============================================================================
# INDIVIDUAL CHECKS
# =============================================================================

class TestRequireText:
    """Tests for required text fields."""

    def test_returns_value_when_present(self):
        assert require_text("Checkup", "title") == "Checkup"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_rejected(self, value):
        """None and empty text count as missing."""
        with pytest.raises(FieldError) as exc_info:
            require_text(value, "description")

        assert exc_info.value.field == "description"
        assert exc_info.value.detail == FIELD_MESSAGES["description"]

    @pytest.mark.parametrize("value", ["   ", "\t\n"])
    def test_whitespace_only_values_kept_as_entered(self, value):
        assert require_text(value, "description") == value

    def test_whitespace_only_title_accepted_by_validation(self):
        result = _validate(make_form(title="   "))

        assert result.accepted is True
        assert result.candidate["title"] == "   "


class TestRequireSelection:
    """Tests for contact, customer and user selections."""

    def test_returns_integer_id(self):
        assert require_selection(7, "customer") == 7

    def test_none_rejected(self):
        with pytest.raises(FieldError) as exc_info:
            require_selection(None, "user")
        assert exc_info.value.field == "user"

    @pytest.mark.parametrize("value", [True, "abc", object()])
    def test_non_integer_rejected(self, value):
        with pytest.raises(FieldError):
            require_selection(value, "contact")


class TestRequireDate:
    """Tests for date selections."""

    def test_none_rejected(self):
        with pytest.raises(FieldError) as exc_info:
            require_date(None, "end_date")
        assert exc_info.value.field == "end_date"

    def test_string_rejected(self):
        """A date must already be a date object."""
        with pytest.raises(FieldError):
            require_date("2024-01-01", "start_date")


# =============================================================================
# ORDER OF CHECKS
# =============================================================================

class TestFieldOrder:
    """Tests for fail-fast ordering through validate_form."""

    @pytest.mark.parametrize("field", REQUIRED_FIELD_ORDER)
    def test_each_missing_field_is_named(self, field):
        """Blanking one field reports exactly that field."""
        key, bad_value = FORM_KEY_FOR_FIELD[field]
        result = _validate(make_form(**{key: bad_value}))

        assert result.accepted is False
        assert result.kind == RejectionKind.FIELD
        assert result.field == field

    @pytest.mark.parametrize(
        "earlier,later",
        list(zip(REQUIRED_FIELD_ORDER, REQUIRED_FIELD_ORDER[1:])),
    )
    def test_earlier_field_wins(self, earlier, later):
        """With two adjacent invalid fields, the earlier one is reported."""
        earlier_key, earlier_bad = FORM_KEY_FOR_FIELD[earlier]
        later_key, later_bad = FORM_KEY_FOR_FIELD[later]

        result = _validate(make_form(**{earlier_key: earlier_bad, later_key: later_bad}))

        assert result.field == earlier

    def test_title_reported_before_user(self):
        """First and last fields both missing: title wins."""
        result = _validate(make_form(title="", user_id=None))

        assert result.field == "title"
        assert result.detail == "Invalid data. Title cannot be empty, please enter a title."

    def test_start_time_checked_before_end_date(self):
        """Time parsing is interleaved with the date checks."""
        result = _validate(make_form(start_time="", end_date=None))

        assert result.field == "start_time"

    def test_missing_keys_treated_as_empty(self):
        """An empty form reports the first field."""
        result = _validate({})

        assert result.field == "title"
