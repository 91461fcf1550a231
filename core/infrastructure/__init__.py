"""Infrastructure components at the boundary of the scheduler.

This module provides swappable infrastructure interfaces:
- AppointmentRepository: appointment lookup and persistence
- Clock: current date and local timezone

Current implementations are in-memory and system-backed.
Future versions can swap in a database repository.
"""

from core.infrastructure.appointment_store import (
    AppointmentRepository,
    AppointmentRepositoryError,
    InMemoryAppointmentRepository,
    get_appointment_repository,
)
from core.infrastructure.clock import Clock, FixedClock, SystemClock

__all__ = [
    "AppointmentRepository",
    "AppointmentRepositoryError",
    "InMemoryAppointmentRepository",
    "get_appointment_repository",
    "Clock",
    "FixedClock",
    "SystemClock",
]
