"""
Fixtures package for scheduler testing.

Provides reusable appointment builders and a fixed clock.
"""

from fixtures.sample_appointments import (
    APPOINTMENT_DAY,
    EASTERN,
    TODAY,
    eastern_clock,
    make_existing,
    make_form,
)

__all__ = [
    "APPOINTMENT_DAY",
    "EASTERN",
    "TODAY",
    "eastern_clock",
    "make_existing",
    "make_form",
]
