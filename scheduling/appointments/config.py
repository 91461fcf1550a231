"""Configuration for the appointment save pipeline."""

from datetime import timedelta
from typing import Any, Dict, Optional

from core.config_loader import load_scheduling_config
from core.infrastructure.clock import SystemClock, resolve_timezone
from scheduling.appointments.validators.business_hours import BusinessHours
from scheduling.appointments.validators.time_parser import parse_time_of_day

# Pipeline identification
PIPELINE_NAME = "APPOINTMENT_SAVE_PIPELINE"

# Context key holding the ValidationResult as it moves through the pipeline
RESULT_KEY = "appointment_result"


def build_business_hours(config: Dict[str, Any]) -> BusinessHours:
    """
    Build BusinessHours from the 'business_hours' section of the config.

    Raises:
        ValueError: On an unknown timezone, a malformed HH:mm value,
            a negative tolerance, or close not after open.
    """
    section = config["business_hours"]

    timezone = resolve_timezone(section.get("timezone"))
    if timezone is None:
        raise ValueError("business_hours.timezone is required")

    try:
        open_time = parse_time_of_day(str(section.get("open")))
        close_time = parse_time_of_day(str(section.get("close")))
    except ValueError as e:
        raise ValueError(f"Invalid business_hours time: {e}") from e

    if close_time <= open_time:
        raise ValueError("business_hours.close must be after business_hours.open")

    tolerance_seconds = int(section.get("tolerance_seconds", 1))
    if tolerance_seconds < 0:
        raise ValueError("business_hours.tolerance_seconds must not be negative")

    return BusinessHours(
        timezone=timezone,
        open_time=open_time,
        close_time=close_time,
        tolerance=timedelta(seconds=tolerance_seconds),
    )


def build_clock(config: Dict[str, Any]) -> SystemClock:
    """Build the system clock, honoring a configured local timezone."""
    return SystemClock(resolve_timezone(config.get("local_timezone")))


def load_settings(path: Optional[str] = None) -> tuple[BusinessHours, SystemClock]:
    """
    Load business hours and clock from YAML and environment.

    Args:
        path: Optional YAML path (see core.config_loader.load_scheduling_config).

    Returns:
        (business_hours, clock)
    """
    config = load_scheduling_config(path)
    return build_business_hours(config), build_clock(config)
