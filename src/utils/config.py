"""Application settings loaded from environment variables and .env."""
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dotenv import load_dotenv

from src.utils.date_utils import parse_date

DEFAULT_CATALOG_FILE = "data/catalog.json"
DEFAULT_ATTENDEES_FILE = "data/attendees.json"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    catalog_file: str = DEFAULT_CATALOG_FILE
    attendees_file: str = DEFAULT_ATTENDEES_FILE
    conference_start: Optional[date] = None
    lock_timeout: float = 5.0
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Behavior:
        - Loads .env from the working directory first (existing variables win)
        - AGENDA_CONFERENCE_START must be YYYY-MM-DD when set

    Raises:
        ValueError: If a variable holds an unparsable value
    """
    load_dotenv()

    start_raw = os.getenv("AGENDA_CONFERENCE_START", "").strip()
    conference_start = parse_date(start_raw).date() if start_raw else None

    try:
        lock_timeout = float(os.getenv("AGENDA_LOCK_TIMEOUT", "5.0"))
    except ValueError as e:
        raise ValueError(f"AGENDA_LOCK_TIMEOUT must be a number: {e}") from e

    return Settings(
        catalog_file=os.getenv("AGENDA_CATALOG_FILE", DEFAULT_CATALOG_FILE),
        attendees_file=os.getenv("AGENDA_ATTENDEES_FILE", DEFAULT_ATTENDEES_FILE),
        conference_start=conference_start,
        lock_timeout=lock_timeout,
        log_level=os.getenv("AGENDA_LOG_LEVEL", "INFO").upper(),
    )
