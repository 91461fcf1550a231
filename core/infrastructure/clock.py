"""Clock abstraction for "today" and the local timezone.

The validation core never reads the system clock itself; callers pass in
values obtained from a Clock at the outermost boundary.
"""

import os
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.logger import get_logger

logger = get_logger(__name__)

LOCALTIME_PATH = Path("/etc/localtime")


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Resolve an IANA timezone name.

    Args:
        name: IANA name (e.g., "America/Chicago"), or None/empty for system default.

    Returns:
        ZoneInfo instance, or None when no name was given.

    Raises:
        ValueError: If the name is not a known timezone.
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: '{name}'") from e


def system_timezone(localtime_path: Path = LOCALTIME_PATH) -> tzinfo:
    """
    Resolve the operating system's region timezone.

    Resolution order:
        1. TZ environment variable (IANA name, optional leading ':')
        2. Zone name from the /etc/localtime symlink target
        3. Current fixed UTC offset, when no region name is available

    Returns:
        ZoneInfo for a region zone, otherwise a fixed-offset tzinfo.
    """
    tz_name = os.getenv("TZ", "").strip().lstrip(":")
    if tz_name:
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug(f"TZ '{tz_name}' is not an IANA zone name, trying {localtime_path}")

    if localtime_path.is_symlink():
        target = str(localtime_path.resolve())
        if "zoneinfo/" in target:
            zone_name = target.split("zoneinfo/", 1)[1]
            try:
                return ZoneInfo(zone_name)
            except (ZoneInfoNotFoundError, ValueError):
                logger.debug(f"No zone named '{zone_name}' for {localtime_path}")

    logger.debug("No region timezone found, using the current UTC offset")
    return datetime.now().astimezone().tzinfo or timezone.utc


class Clock(ABC):
    """Source of the current date and the caller's local timezone."""

    @abstractmethod
    def today(self) -> date:
        """Return the current calendar date in the local timezone."""

    @abstractmethod
    def local_timezone(self) -> tzinfo:
        """Return the local timezone."""


class SystemClock(Clock):
    """
    Clock backed by the operating system.

    An explicit timezone overrides the system timezone, e.g. when
    SCHEDULER_LOCAL_TIMEZONE is configured.
    """

    def __init__(self, timezone: Optional[tzinfo] = None) -> None:
        self._timezone = timezone

    def local_timezone(self) -> tzinfo:
        if self._timezone is not None:
            return self._timezone
        return system_timezone()

    def today(self) -> date:
        return datetime.now(self.local_timezone()).date()

    def __repr__(self) -> str:
        return f"SystemClock(timezone={self._timezone!r})"


class FixedClock(Clock):
    """Clock pinned to a date and timezone (for tests and replays)."""

    def __init__(self, today: date, timezone: tzinfo) -> None:
        self._today = today
        self._timezone = timezone

    def today(self) -> date:
        return self._today

    def local_timezone(self) -> tzinfo:
        return self._timezone

    def __repr__(self) -> str:
        return f"FixedClock(today={self._today!r}, timezone={self._timezone!r})"
