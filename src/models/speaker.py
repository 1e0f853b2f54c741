"""Speaker data model."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Speaker:
    """Speaker listed in the session catalog."""

    id: str
    name: str
    bio: str = ""
    photo: Optional[str] = None

    def __post_init__(self):
        """Validate speaker data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Speaker ID cannot be empty")

        if not self.name or not self.name.strip():
            raise ValueError("Speaker name cannot be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Speaker":
        return cls(
            id=data["id"],
            name=data["name"],
            bio=data.get("bio", ""),
            photo=data.get("photo"),
        )
