"""Agents for the appointment save pipeline."""

from scheduling.appointments.agents.loader_agent import CustomerAppointmentsLoaderAgent
from scheduling.appointments.agents.validator_agent import AppointmentValidatorAgent
from scheduling.appointments.agents.persistence_agent import AppointmentPersistenceAgent

__all__ = [
    "CustomerAppointmentsLoaderAgent",
    "AppointmentValidatorAgent",
    "AppointmentPersistenceAgent",
]
