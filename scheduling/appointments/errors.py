"""Rejection taxonomy for appointment validation.

Every error carries a human-readable ``detail`` suitable for direct display
and a ``kind`` tag for programmatic branching. Validators raise these; the
public entry points convert them into Rejected results.
"""

from enum import Enum
from typing import Any, Dict, Optional

from core.contracts.appointment import AppointmentField, AppointmentRecord


class RejectionKind(str, Enum):
    """Programmatic tag for each rejection class."""
    FIELD = "field_error"
    ORDERING = "ordering_error"
    OVERLAP = "overlap_error"
    TIME_WINDOW = "time_window_error"
    PERSISTENCE = "persistence_error"


class ConflictClass(str, Enum):
    """Which overlap rule matched an existing appointment."""
    START_INSIDE = "start_inside"
    END_INSIDE = "end_inside"
    ENGULFS = "engulfs"


class AppointmentValidationError(Exception):
    """Base class for all recoverable appointment rejections."""

    kind: RejectionKind

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "detail": self.detail}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.detail!r})"


class FieldError(AppointmentValidationError):
    """A required input is missing or malformed."""

    kind = RejectionKind.FIELD

    def __init__(self, field: AppointmentField, detail: str) -> None:
        super().__init__(detail)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class OrderingError(AppointmentValidationError):
    """End is not strictly after start."""

    kind = RejectionKind.ORDERING


class OverlapError(AppointmentValidationError):
    """The candidate conflicts with an existing appointment of the same customer."""

    kind = RejectionKind.OVERLAP

    def __init__(
        self,
        conflict_class: ConflictClass,
        conflicting_appointment: AppointmentRecord,
        detail: str,
    ) -> None:
        super().__init__(detail)
        self.conflict_class = conflict_class
        self.conflicting_appointment = conflicting_appointment

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["conflict_class"] = self.conflict_class.value
        data["conflicting_appointment_id"] = self.conflicting_appointment.get("appointment_id")
        return data


class TimeWindowError(AppointmentValidationError):
    """Start or end falls outside business hours."""

    kind = RejectionKind.TIME_WINDOW

    def __init__(self, field: AppointmentField, detail: str) -> None:
        super().__init__(detail)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class PersistenceError(AppointmentValidationError):
    """The appointment repository refused or failed an operation."""

    kind = RejectionKind.PERSISTENCE

    def __init__(self, detail: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(detail)
        self.cause = cause


__all__ = [
    "RejectionKind",
    "ConflictClass",
    "AppointmentValidationError",
    "FieldError",
    "OrderingError",
    "OverlapError",
    "TimeWindowError",
    "PersistenceError",
]
