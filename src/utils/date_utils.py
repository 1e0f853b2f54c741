"""Date and time utility functions."""
from datetime import date, datetime, time
from typing import Tuple, Union


def parse_date(date_str: str) -> datetime:
    """
    Parse date string in YYYY-MM-DD format.

    Args:
        date_str: Date string (e.g., "2025-11-15")

    Returns:
        datetime object

    Raises:
        ValueError: If date format is invalid
    """
    return datetime.strptime(date_str, "%Y-%m-%d")


def parse_time(time_str: str) -> Tuple[time, time]:
    """
    Parse time range string in HH:MM-HH:MM format.

    Args:
        time_str: Time range string (e.g., "14:00-16:00")

    Returns:
        Tuple of (start_time, end_time) as datetime.time objects

    Raises:
        ValueError: If time format is invalid
    """
    try:
        start_str, end_str = time_str.split("-")
        start_time = datetime.strptime(start_str.strip(), "%H:%M").time()
        end_time = datetime.strptime(end_str.strip(), "%H:%M").time()
        return (start_time, end_time)
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid time format: {time_str}") from e


def parse_session_datetimes(date_str: str, time_str: str) -> Tuple[datetime, datetime]:
    """
    Combine a session date and time range into start/end datetimes.

    Raises:
        ValueError: If either part is malformed or end is not after start
    """
    day = parse_date(date_str).date()
    start_time, end_time = parse_time(time_str)
    start = datetime.combine(day, start_time)
    end = datetime.combine(day, end_time)
    if end <= start:
        raise ValueError(f"Start time must be before end time: {time_str}")
    return start, end


def truncate_to_minute(moment: datetime) -> datetime:
    """Drop seconds and microseconds; used as the time-slot key."""
    return moment.replace(second=0, microsecond=0)


def weekday_label(day: Union[date, datetime]) -> str:
    """Return the English weekday name, e.g. "Monday"."""
    return day.strftime("%A")
