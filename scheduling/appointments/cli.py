#!/usr/bin/env python
"""
CLI entry point for the appointment scheduler.

Commands:
    add       Validate and save a new appointment
    update    Validate and save changes to an existing appointment
    hours     Show business hours in the local timezone

Appointments are kept in an in-memory store for the lifetime of the command.
Use --seed to load existing appointments from a YAML file so overlap checks
have something to compare against:

    - appointment_id: 1
      title: Kickoff
      description: Project kickoff
      location: Room 1
      type: Planning
      start: 2024-01-01 10:00
      end: 2024-01-01 11:00
      customer_id: 1
      user_id: 1
      contact_id: 1

Options via environment variables:
    SCHEDULER_CONFIG_PATH        YAML config (default: config/scheduling.yaml)
    SCHEDULER_LOCAL_TIMEZONE     IANA timezone overriding the system timezone
    SCHEDULER_BUSINESS_TIMEZONE  IANA timezone of the business hours
    SCHEDULER_LOG_LEVEL          Logging level (default: INFO)
"""

import argparse
import sys
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from core.config_loader import load_config
from core.contracts.appointment import AppointmentForm, AppointmentRecord
from core.infrastructure.appointment_store import InMemoryAppointmentRepository
from core.logger import get_logger
from scheduling.appointments.config import PIPELINE_NAME, load_settings
from scheduling.appointments.pipeline import save_appointment
from scheduling.appointments.results import ValidationResult
from scheduling.appointments.validators.business_hours import local_business_window

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Appointment scheduler - validate and save customer appointments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add an appointment
  appointment-scheduler add --title Checkup --description "Yearly" \\
      --location "Room 2" --type Consult --contact-id 1 --customer-id 7 \\
      --user-id 1 --start-date 2024-01-01 --start-time 09:00 \\
      --end-date 2024-01-01 --end-time 10:00

  # Show business hours in the local timezone
  appointment-scheduler hours
        """,
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to scheduling YAML config (default: SCHEDULER_CONFIG_PATH or config/scheduling.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in ("add", "update"):
        sub = subparsers.add_parser(command, help=f"{command.capitalize()} an appointment")
        if command == "update":
            sub.add_argument("--appointment-id", type=int, required=True, help="Appointment to update")
        sub.add_argument("--title", default="")
        sub.add_argument("--description", default="")
        sub.add_argument("--location", default="")
        sub.add_argument("--type", dest="appointment_type", default="")
        sub.add_argument("--contact-id", type=int, default=None)
        sub.add_argument("--customer-id", type=int, default=None)
        sub.add_argument("--user-id", type=int, default=None)
        sub.add_argument("--start-date", default=None, help="YYYY-MM-DD")
        sub.add_argument("--start-time", default="", help="HH:mm, 24-hour")
        sub.add_argument("--end-date", default=None, help="YYYY-MM-DD")
        sub.add_argument("--end-time", default="", help="HH:mm, 24-hour")
        sub.add_argument("--seed", default=None, help="YAML file of existing appointments")

    subparsers.add_parser("hours", help="Show business hours in the local timezone")

    return parser.parse_args(argv)


def _parse_date(value: Optional[str]) -> Optional[date]:
    """Parse YYYY-MM-DD; anything else counts as no date selected."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Ignoring unreadable date '{value}', expected YYYY-MM-DD")
        return None


def _coerce_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.fromisoformat(str(value))


def load_seed_appointments(path: str) -> List[AppointmentRecord]:
    """
    Load existing appointments from a YAML list.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a list of appointment mappings
            or an entry has no start or end.
    """
    raw = load_config(path)
    if raw == {}:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Seed file must contain a list of appointments: {path}")

    appointments: List[AppointmentRecord] = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValueError(f"Seed entry must be a mapping, got {type(entry).__name__}")
        record: Dict[str, Any] = dict(entry)
        missing = [key for key in ("start", "end") if record.get(key) is None]
        if missing:
            raise ValueError(f"Seed entry missing {', '.join(missing)}: {entry}")
        record["start"] = _coerce_datetime(record["start"])
        record["end"] = _coerce_datetime(record["end"])
        appointments.append(record)  # type: ignore[arg-type]
    return appointments


def build_form(args: argparse.Namespace) -> AppointmentForm:
    """Marshal command line values into an AppointmentForm."""
    return AppointmentForm(
        appointment_id=getattr(args, "appointment_id", None),
        title=args.title,
        description=args.description,
        location=args.location,
        type=args.appointment_type,
        contact_id=args.contact_id,
        customer_id=args.customer_id,
        user_id=args.user_id,
        start_date=_parse_date(args.start_date),
        start_time=args.start_time,
        end_date=_parse_date(args.end_date),
        end_time=args.end_time,
    )


def _print_result(result: ValidationResult) -> None:
    logger.info("-" * 60)
    if result.accepted:
        candidate = result.candidate  # type: ignore[union-attr]
        logger.info(f"✓ Appointment #{candidate.get('appointment_id')} saved")
        logger.info(f"  Title: {candidate['title']}")
        logger.info(f"  From: {candidate['start'].isoformat(timespec='minutes')}")
        logger.info(f"  To: {candidate['end'].isoformat(timespec='minutes')}")
        logger.info(f"  Customer: {candidate['customer_id']}")
    else:
        logger.error(f"✗ Appointment rejected ({result.kind.value})")  # type: ignore[union-attr]
        for line in result.detail.splitlines():  # type: ignore[union-attr]
            logger.error(f"  {line}" if line else "")
    logger.info("-" * 60)


def _run_save(args: argparse.Namespace) -> int:
    business_hours, clock = load_settings(args.config)
    seed = load_seed_appointments(args.seed) if args.seed else []
    repository = InMemoryAppointmentRepository(seed)

    logger.info(f"Running {PIPELINE_NAME} ({args.command})")
    result = save_appointment(build_form(args), repository, clock, business_hours)
    _print_result(result)
    return 0 if result.accepted else 1


def _run_hours(args: argparse.Namespace) -> int:
    business_hours, clock = load_settings(args.config)
    local_tz = clock.local_timezone()
    local_open, local_close = local_business_window(business_hours, clock.today(), local_tz)
    zone_label = datetime.now(local_tz).tzname() or str(local_tz)

    logger.info(f"Business hours: {business_hours.label}")
    logger.info(
        f"Local ({zone_label}): {local_open.strftime('%H:%M')} - {local_close.strftime('%H:%M')}"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 when the appointment was saved (or hours shown), 1 on rejection
        or invalid configuration.
    """
    args = parse_args(argv)

    try:
        if args.command == "hours":
            return _run_hours(args)
        return _run_save(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
