"""Tagged validation outcome: Accepted or Rejected."""

from typing import Any, Dict, Optional, Union

from core.contracts.appointment import AppointmentField, AppointmentRecord
from scheduling.appointments.errors import (
    AppointmentValidationError,
    ConflictClass,
    RejectionKind,
)


class Accepted:
    """All checks passed; ``candidate`` holds the normalized appointment."""

    __slots__ = ("candidate",)

    accepted = True

    def __init__(self, candidate: AppointmentRecord) -> None:
        self.candidate = candidate

    def to_dict(self) -> Dict[str, Any]:
        return {"accepted": True, "candidate": dict(self.candidate)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Accepted):
            return NotImplemented
        return self.candidate == other.candidate

    def __repr__(self) -> str:
        return f"Accepted(candidate={self.candidate!r})"


class Rejected:
    """
    A single rejection reason.

    Accessors mirror the wrapped error so callers can branch on ``kind``
    without isinstance checks.
    """

    __slots__ = ("error",)

    accepted = False

    def __init__(self, error: AppointmentValidationError) -> None:
        self.error = error

    @property
    def kind(self) -> RejectionKind:
        return self.error.kind

    @property
    def detail(self) -> str:
        return self.error.detail

    @property
    def field(self) -> Optional[AppointmentField]:
        return getattr(self.error, "field", None)

    @property
    def conflict_class(self) -> Optional[ConflictClass]:
        return getattr(self.error, "conflict_class", None)

    @property
    def conflicting_appointment(self) -> Optional[AppointmentRecord]:
        return getattr(self.error, "conflicting_appointment", None)

    def to_dict(self) -> Dict[str, Any]:
        data = self.error.to_dict()
        data["accepted"] = False
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rejected):
            return NotImplemented
        return self.error == other.error

    def __repr__(self) -> str:
        return f"Rejected(error={self.error!r})"


ValidationResult = Union[Accepted, Rejected]

__all__ = ["Accepted", "Rejected", "ValidationResult"]
