"""Day and time-slot grouping of sessions for schedule pages.

Everything here is pure: no store access, no Streamlit. Bad day parameters
never raise; they fall back to the all-days view.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from src.models.session import Session
from src.utils.date_utils import truncate_to_minute, weekday_label


@dataclass(frozen=True)
class DayTab:
    """One day-selector tab."""

    offset: int
    label: str


@dataclass
class AgendaView:
    """Schedule shaped for rendering."""

    days: List[DayTab] = field(default_factory=list)
    selected_day: Optional[int] = None
    slots: Dict[datetime, List[Session]] = field(default_factory=dict)

    @property
    def is_filtered(self) -> bool:
        return self.selected_day is not None


def parse_day_param(value: Any) -> Optional[int]:
    """
    Read a day offset from a query value.

    Returns:
        int offset, or None for missing or unreadable input
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (list, tuple)):
        return parse_day_param(value[0]) if value else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _day_offset(day: date, first_day: date) -> int:
    return (day - first_day).days


def project_agenda(
    sessions: Iterable[Session],
    requested_day: Any = None,
    conference_start: Optional[date] = None,
) -> AgendaView:
    """
    Group sessions into day tabs and time slots.

    Args:
        sessions: Sessions in catalog order
        requested_day: Day offset asked for (int, numeric str, or anything else)
        conference_start: First conference day; defaults to the earliest
            session date in ``sessions``

    Returns:
        AgendaView where ``selected_day`` is the requested offset only if a
        session falls on that day, and ``slots`` maps each truncated start
        time (ascending) to its sessions in input order.
    """
    sessions = list(sessions)
    if not sessions:
        return AgendaView()

    first_day = conference_start or min(session.day for session in sessions)

    labels: Dict[int, str] = {}
    for session in sessions:
        labels.setdefault(_day_offset(session.day, first_day), weekday_label(session.day))
    days = [DayTab(offset=offset, label=labels[offset]) for offset in sorted(labels)]

    selected_day = parse_day_param(requested_day)
    if selected_day not in labels:
        selected_day = None

    grouped: Dict[datetime, List[Session]] = {}
    for session in sessions:
        if selected_day is not None and _day_offset(session.day, first_day) != selected_day:
            continue
        grouped.setdefault(truncate_to_minute(session.start), []).append(session)

    slots = {slot: grouped[slot] for slot in sorted(grouped)}
    return AgendaView(days=days, selected_day=selected_day, slots=slots)
