"""Appointment save pipeline construction.

Pipeline flow:
    CustomerAppointmentsLoaderAgent -> existing_appointments
    AppointmentValidatorAgent       -> appointment_result (halts on rejection)
    AppointmentPersistenceAgent     -> appointment_result (with appointment_id)
"""

from typing import Optional

from core.contracts.appointment import AppointmentForm
from core.infrastructure.appointment_store import AppointmentRepository
from core.infrastructure.clock import Clock, SystemClock
from core.logger import get_logger
from scheduling.appointments.agents import (
    AppointmentPersistenceAgent,
    AppointmentValidatorAgent,
    CustomerAppointmentsLoaderAgent,
)
from scheduling.appointments.config import PIPELINE_NAME, RESULT_KEY
from scheduling.appointments.results import ValidationResult
from scheduling.appointments.validators.business_hours import (
    DEFAULT_BUSINESS_HOURS,
    BusinessHours,
)
from scheduling.core.runner import PipelineRunner

logger = get_logger(__name__)


__all__ = [
    "build_pipeline",
    "save_appointment",
    "PIPELINE_NAME",
]


def build_pipeline(
    repository: AppointmentRepository,
    clock: Clock,
    business_hours: BusinessHours = DEFAULT_BUSINESS_HOURS,
) -> PipelineRunner:
    """
    Build the load -> validate -> persist pipeline.

    Args:
        repository: Appointment lookup and persistence.
        clock: Source of today's date and the local timezone.
        business_hours: Opening window to enforce.

    Returns:
        Configured PipelineRunner instance.
    """
    return PipelineRunner(
        agents=[
            CustomerAppointmentsLoaderAgent(repository),
            AppointmentValidatorAgent(clock, business_hours),
            AppointmentPersistenceAgent(repository),
        ],
        name=PIPELINE_NAME,
    )


def save_appointment(
    form: AppointmentForm,
    repository: AppointmentRepository,
    clock: Optional[Clock] = None,
    business_hours: BusinessHours = DEFAULT_BUSINESS_HOURS,
) -> ValidationResult:
    """
    Validate and persist one appointment form.

    The repository is called only when every check passes. Updates are
    selected by a non-None 'appointment_id' in the form.

    Args:
        form: Raw form values.
        repository: Appointment lookup and persistence.
        clock: Defaults to the system clock.
        business_hours: Opening window to enforce.

    Returns:
        Accepted with the stored appointment, or Rejected with the reason.
    """
    pipeline = build_pipeline(repository, clock or SystemClock(), business_hours)
    context = pipeline.run({"appointment_form": form})
    result: ValidationResult = context[RESULT_KEY]

    if result.accepted:
        logger.info("Appointment saved")
    else:
        logger.info(f"Appointment not saved: {result.kind.value}")  # type: ignore[union-attr]
    return result
