"""
Customer Appointments Loader Agent.

Fetches a fresh snapshot of the target customer's appointments right before
validation. Repository failures are reported as a PersistenceError rejection
and halt the pipeline; they are never raised.

Integration Position:
    CustomerAppointmentsLoaderAgent   <- THIS AGENT
           |
    AppointmentValidatorAgent
           |
    AppointmentPersistenceAgent

Input: appointment_form
Output: existing_appointments
"""

from typing import Any, Dict

from core.infrastructure.appointment_store import (
    AppointmentRepository,
    AppointmentRepositoryError,
)
from core.logger import get_logger
from scheduling.appointments.config import RESULT_KEY
from scheduling.appointments.errors import PersistenceError
from scheduling.appointments.results import Rejected
from scheduling.core.base_agent import BaseAgent
from scheduling.core.runner import HALT_KEY

logger = get_logger(__name__)


class CustomerAppointmentsLoaderAgent(BaseAgent):
    """
    Agent that loads existing appointments for the form's customer.

    Contract:
        Input: appointment_form (AppointmentForm)
        Output: existing_appointments (list, empty when no customer selected)
    """

    def __init__(self, repository: AppointmentRepository) -> None:
        super().__init__(name="CustomerAppointmentsLoaderAgent")
        self.repository = repository

    def run(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        form = input_data.get("appointment_form")
        if form is None:
            raise ValueError(
                "Pipeline contract violation: 'appointment_form' key missing."
            )

        customer_id = form.get("customer_id")
        if customer_id is None:
            # Validation reports the missing customer in its normal order.
            return {"existing_appointments": []}

        try:
            existing = self.repository.get_customer_appointments(customer_id)
        except AppointmentRepositoryError as e:
            logger.warning(f"Could not load appointments for customer {customer_id}: {e}")
            return {
                "existing_appointments": [],
                RESULT_KEY: Rejected(PersistenceError(str(e), cause=e)),
                HALT_KEY: True,
            }

        logger.debug(f"Loaded {len(existing)} appointment(s) for customer {customer_id}")
        return {"existing_appointments": list(existing)}
