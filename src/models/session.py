"""Session data model."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List

from src.utils.date_utils import parse_session_datetimes


@dataclass
class Session:
    """Conference session as published by the catalog."""

    id: str
    title: str
    track: str
    date: str
    time: str
    speakers: List[str] = field(default_factory=list)
    description: str = ""
    location: str = ""

    def __post_init__(self):
        """Validate session data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Session ID cannot be empty")

        if not self.title or not self.title.strip():
            raise ValueError("Title cannot be empty")

        if not self.track or not self.track.strip():
            raise ValueError("Track cannot be empty")

        # Raises ValueError on malformed date/time or an empty time range
        self._start, self._end = parse_session_datetimes(self.date, self.time)

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def day(self) -> date:
        return self._start.date()

    def is_past(self) -> bool:
        """Check if session start has passed."""
        return self._start < datetime.now()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        return cls(
            id=data["id"],
            title=data["title"],
            track=data["track"],
            date=data["date"],
            time=data["time"],
            speakers=list(data.get("speakers", [])),
            description=data.get("description", ""),
            location=data.get("location", ""),
        )
