"""Appointment repository interface and in-memory implementation.

This module provides the persistence boundary of the scheduler:
- get_customer_appointments for the overlap snapshot
- add_appointment for new appointments
- update_appointment for edits

Current implementation is an in-memory dict.
A database-backed repository only has to implement AppointmentRepository.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from core.contracts.appointment import AppointmentRecord
from core.logger import get_logger

logger = get_logger(__name__)


class AppointmentRepositoryError(Exception):
    """Raised by a repository when the backing store cannot be reached."""


class AppointmentRepository(ABC):
    """
    Capability set the scheduler needs from appointment storage.

    Implementations report infrastructure failure by raising
    AppointmentRepositoryError, and report a refused write through the
    return value (None from add_appointment, False from update_appointment).
    """

    @abstractmethod
    def get_customer_appointments(self, customer_id: int) -> List[AppointmentRecord]:
        """
        Return every appointment on file for a customer.

        Args:
            customer_id: Customer to look up

        Returns:
            Appointments in repository order
        """

    @abstractmethod
    def add_appointment(self, appointment: AppointmentRecord) -> Optional[int]:
        """
        Persist a new appointment.

        Args:
            appointment: Normalized appointment fields (no appointment_id)

        Returns:
            The assigned appointment_id, or None if the store refused the insert
        """

    @abstractmethod
    def update_appointment(
        self,
        appointment_id: int,
        appointment: AppointmentRecord,
    ) -> bool:
        """
        Replace the fields of an existing appointment.

        Args:
            appointment_id: Appointment to update
            appointment: Normalized appointment fields

        Returns:
            True if the appointment existed and was updated
        """


class InMemoryAppointmentRepository(AppointmentRepository):
    """
    In-memory appointment store.

    Assigns sequential appointment ids starting at 1 and returns a customer's
    appointments ordered by start time, so overlap reporting is deterministic.

    Thread-safe for single-threaded use only.

    Usage:
        repo = InMemoryAppointmentRepository()
        repo.add_appointment({"title": "Intro", ..., "customer_id": 1})
        repo.get_customer_appointments(1)
    """

    def __init__(self, appointments: Optional[List[AppointmentRecord]] = None) -> None:
        """
        Initialize the store, optionally seeded with appointments.

        Seed records keep their appointment_id when they have one.
        """
        self._data: Dict[int, AppointmentRecord] = {}
        self._next_id = 1
        for appointment in appointments or []:
            self._store(dict(appointment))  # type: ignore[arg-type]
        logger.debug(f"InMemoryAppointmentRepository initialized with {len(self._data)} appointment(s)")

    def _store(self, appointment: AppointmentRecord) -> int:
        appointment_id = appointment.get("appointment_id")
        if appointment_id is None:
            appointment_id = self._next_id
        if appointment_id in self._data:
            raise ValueError(f"Duplicate appointment id: {appointment_id}")
        appointment["appointment_id"] = appointment_id
        self._data[appointment_id] = appointment
        self._next_id = max(self._next_id, appointment_id + 1)
        return appointment_id

    def get_customer_appointments(self, customer_id: int) -> List[AppointmentRecord]:
        appointments = [
            dict(a) for a in self._data.values() if a.get("customer_id") == customer_id
        ]
        appointments.sort(key=lambda a: (a["start"], a["appointment_id"]))
        return appointments  # type: ignore[return-value]

    def get(self, appointment_id: int) -> Optional[AppointmentRecord]:
        """Return a copy of one appointment, or None if unknown."""
        appointment = self._data.get(appointment_id)
        return dict(appointment) if appointment is not None else None  # type: ignore[return-value]

    def add_appointment(self, appointment: AppointmentRecord) -> Optional[int]:
        record = dict(appointment)
        record.pop("appointment_id", None)
        appointment_id = self._store(record)  # type: ignore[arg-type]
        logger.debug(f"Appointment added: {appointment_id}")
        return appointment_id

    def update_appointment(
        self,
        appointment_id: int,
        appointment: AppointmentRecord,
    ) -> bool:
        if appointment_id not in self._data:
            logger.debug(f"Update skipped, unknown appointment: {appointment_id}")
            return False
        record = dict(appointment)
        record["appointment_id"] = appointment_id
        self._data[appointment_id] = record  # type: ignore[assignment]
        logger.debug(f"Appointment updated: {appointment_id}")
        return True

    def clear(self) -> None:
        """Remove all appointments and restart id assignment."""
        self._data = {}
        self._next_id = 1
        logger.debug("InMemoryAppointmentRepository cleared")

    def size(self) -> int:
        """Get number of stored appointments."""
        return len(self._data)


# Singleton instance for global access
_appointment_repository: Optional[InMemoryAppointmentRepository] = None


def get_appointment_repository() -> InMemoryAppointmentRepository:
    """
    Get the global in-memory repository instance.

    Returns:
        Singleton InMemoryAppointmentRepository instance
    """
    global _appointment_repository
    if _appointment_repository is None:
        _appointment_repository = InMemoryAppointmentRepository()
    return _appointment_repository


def reset_appointment_repository() -> None:
    """Reset the global repository instance (for testing)."""
    global _appointment_repository
    _appointment_repository = None
