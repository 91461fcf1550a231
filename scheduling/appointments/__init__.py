"""Appointment validation and save pipeline."""

from scheduling.appointments.errors import ConflictClass, RejectionKind
from scheduling.appointments.results import Accepted, Rejected, ValidationResult
from scheduling.appointments.validation import validate_and_prepare, validate_form
from scheduling.appointments.pipeline import build_pipeline, save_appointment, PIPELINE_NAME

__all__ = [
    "ConflictClass",
    "RejectionKind",
    "Accepted",
    "Rejected",
    "ValidationResult",
    "validate_and_prepare",
    "validate_form",
    "build_pipeline",
    "save_appointment",
    "PIPELINE_NAME",
]
