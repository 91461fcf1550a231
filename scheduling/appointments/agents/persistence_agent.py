"""
Appointment Persistence Agent.

Hands an accepted candidate to the repository exactly once: insert for new
appointments, update when the candidate carries an appointment_id. Refusals
and repository errors become a PersistenceError rejection carrying the
repository's own message.

Input: appointment_result (Accepted)
Output: appointment_result (Accepted with appointment_id, or Rejected)
"""

from typing import Any, Dict

from core.infrastructure.appointment_store import (
    AppointmentRepository,
    AppointmentRepositoryError,
)
from core.logger import get_logger
from scheduling.appointments.config import RESULT_KEY
from scheduling.appointments.errors import PersistenceError
from scheduling.appointments.results import Accepted, Rejected
from scheduling.core.base_agent import BaseAgent

logger = get_logger(__name__)


class AppointmentPersistenceAgent(BaseAgent):
    """
    Agent that stores an accepted appointment.

    Contract:
        Input: appointment_result (must be Accepted)
        Output: appointment_result
    """

    def __init__(self, repository: AppointmentRepository) -> None:
        super().__init__(name="AppointmentPersistenceAgent")
        self.repository = repository

    def run(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        result = input_data.get(RESULT_KEY)

        if not isinstance(result, Accepted):
            raise ValueError(
                "Pipeline contract violation: AppointmentPersistenceAgent requires "
                f"an Accepted '{RESULT_KEY}', got {type(result).__name__}"
            )

        candidate = dict(result.candidate)
        appointment_id = candidate.pop("appointment_id", None)

        try:
            if appointment_id is None:
                new_id = self.repository.add_appointment(candidate)  # type: ignore[arg-type]
                if new_id is None:
                    return {RESULT_KEY: Rejected(PersistenceError("The appointment could not be saved."))}
                appointment_id = new_id
            elif not self.repository.update_appointment(appointment_id, candidate):  # type: ignore[arg-type]
                return {
                    RESULT_KEY: Rejected(
                        PersistenceError(f"Appointment #{appointment_id} could not be updated.")
                    )
                }
        except AppointmentRepositoryError as e:
            logger.warning(f"Appointment save failed: {e}")
            return {RESULT_KEY: Rejected(PersistenceError(str(e), cause=e))}

        candidate["appointment_id"] = appointment_id
        logger.info(f"Appointment #{appointment_id} saved for customer {candidate['customer_id']}")
        return {RESULT_KEY: Accepted(candidate)}  # type: ignore[arg-type]
