"""
Appointment Validator Agent.

Runs validate_and_prepare on the form using the injected clock and
business hours. This is the boundary where "today" and the local timezone
are read; the validation core itself never touches the clock.

Input: appointment_form, existing_appointments
Output: appointment_result (halts the pipeline on rejection)
"""

from typing import Any, Dict

from core.infrastructure.clock import Clock
from core.logger import get_logger
from scheduling.appointments.config import RESULT_KEY
from scheduling.appointments.validation import validate_form
from scheduling.appointments.validators.business_hours import (
    DEFAULT_BUSINESS_HOURS,
    BusinessHours,
)
from scheduling.core.base_agent import BaseAgent
from scheduling.core.runner import HALT_KEY

logger = get_logger(__name__)


class AppointmentValidatorAgent(BaseAgent):
    """
    Agent that validates a candidate appointment.

    Contract:
        Input: appointment_form, existing_appointments
        Output: appointment_result (Accepted | Rejected)
    """

    def __init__(
        self,
        clock: Clock,
        business_hours: BusinessHours = DEFAULT_BUSINESS_HOURS,
    ) -> None:
        super().__init__(name="AppointmentValidatorAgent")
        self.clock = clock
        self.business_hours = business_hours

    def run(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        form = input_data.get("appointment_form")
        existing = input_data.get("existing_appointments")

        if form is None or existing is None:
            raise ValueError(
                "Pipeline contract violation: 'appointment_form' and "
                "'existing_appointments' are required. "
                "AppointmentValidatorAgent requires input from CustomerAppointmentsLoaderAgent."
            )

        result = validate_form(
            form,
            existing,
            today=self.clock.today(),
            local_timezone=self.clock.local_timezone(),
            business_hours=self.business_hours,
        )

        return {
            RESULT_KEY: result,
            HALT_KEY: not result.accepted,
        }
