"""YAML configuration loader utility."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_PATH_ENV = "SCHEDULER_CONFIG_PATH"
LOCAL_TIMEZONE_ENV = "SCHEDULER_LOCAL_TIMEZONE"
BUSINESS_TIMEZONE_ENV = "SCHEDULER_BUSINESS_TIMEZONE"

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "scheduling.yaml"

# Used for any key the YAML file leaves out
DEFAULT_SCHEDULING_CONFIG: dict[str, Any] = {
    "business_hours": {
        "timezone": "America/New_York",
        "open": "08:00",
        "close": "22:00",
        "tolerance_seconds": 1,
    },
    "local_timezone": None,
}


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Dictionary containing the parsed configuration.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    return config if config is not None else {}


def load_scheduling_config(path: Optional[str | Path] = None) -> dict[str, Any]:
    """
    Load the scheduling configuration with defaults and environment overrides.

    Resolution order for the file path:
        1. Explicit path argument
        2. SCHEDULER_CONFIG_PATH environment variable
        3. config/scheduling.yaml at the project root (optional)

    Environment overrides applied after the file:
        SCHEDULER_LOCAL_TIMEZONE     -> local_timezone
        SCHEDULER_BUSINESS_TIMEZONE  -> business_hours.timezone

    Args:
        path: Optional path to a YAML file.

    Returns:
        Dictionary with 'business_hours' and 'local_timezone' keys.

    Raises:
        FileNotFoundError: If an explicitly requested file doesn't exist.
        ValueError: If a section has the wrong shape.
    """
    explicit = path or os.getenv(CONFIG_PATH_ENV)
    if explicit:
        raw = load_config(explicit)
    elif DEFAULT_CONFIG_PATH.exists():
        raw = load_config(DEFAULT_CONFIG_PATH)
    else:
        raw = {}

    if not isinstance(raw, dict):
        raise ValueError("Scheduling config must be a mapping at the top level")

    business_hours = dict(DEFAULT_SCHEDULING_CONFIG["business_hours"])
    raw_hours = raw.get("business_hours") or {}
    if not isinstance(raw_hours, dict):
        raise ValueError("'business_hours' must be a mapping")
    business_hours.update(raw_hours)

    config: dict[str, Any] = {
        "business_hours": business_hours,
        "local_timezone": raw.get("local_timezone", DEFAULT_SCHEDULING_CONFIG["local_timezone"]),
    }

    if os.getenv(LOCAL_TIMEZONE_ENV):
        config["local_timezone"] = os.getenv(LOCAL_TIMEZONE_ENV, "").strip()
    if os.getenv(BUSINESS_TIMEZONE_ENV):
        business_hours["timezone"] = os.getenv(BUSINESS_TIMEZONE_ENV, "").strip()

    return config
