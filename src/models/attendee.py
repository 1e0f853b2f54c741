"""Attendee data model."""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Set

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class Attendee:
    """Registered profile bound to one authenticated identity."""

    identity: str
    first_name: str
    last_name: str
    email: str
    sessions: Set[str] = field(default_factory=set)

    def __post_init__(self):
        """Validate attendee data."""
        if not self.identity or not self.identity.strip():
            raise ValueError("Identity cannot be empty")

        for label, value in (("First name", self.first_name), ("Last name", self.last_name)):
            if not value or not value.strip():
                raise ValueError(f"{label} cannot be empty")
            if len(value) > 50:
                raise ValueError(f"{label} cannot exceed 50 characters")

        if not EMAIL_PATTERN.match(self.email or ""):
            raise ValueError(f"Invalid email address: {self.email}")

        # Stored lists may carry duplicates; the agenda is a set
        self.sessions = set(self.sessions)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def has_session(self, session_id: str) -> bool:
        """Check if a session is on this attendee's agenda."""
        return session_id in self.sessions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identity": self.identity,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "sessions": sorted(self.sessions),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attendee":
        return cls(
            identity=data["identity"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            sessions=set(data.get("sessions", [])),
        )
