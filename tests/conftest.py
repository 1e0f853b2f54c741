"""Shared fixtures: sample catalog and an in-memory backing store."""
import asyncio
import json
from typing import Dict, List, Optional, Set

import pytest

from src.models.attendee import Attendee
from src.models.session import Session
from src.models.speaker import Speaker
from src.utils.exceptions import AlreadyRegisteredError, AttendeeNotFoundError, BackendError

CATALOG_DATA = {
    "speakers": [
        {"id": "spk_a", "name": "Ada Chen", "bio": "Backend engineer"},
        {"id": "spk_b", "name": "Ben Lin", "bio": "Data engineer", "photo": "images/ben.jpg"},
    ],
    "sessions": [
        {
            "id": "session_001",
            "title": "Async Python",
            "track": "Backend",
            "date": "2026-11-20",
            "time": "09:00-10:00",
            "speakers": ["spk_a"],
        },
        {
            "id": "session_002",
            "title": "Pipelines",
            "track": "Data",
            "date": "2026-11-20",
            "time": "09:00-10:00",
            "speakers": ["spk_b"],
        },
        {
            "id": "session_003",
            "title": "Frontend Perf",
            "track": "Frontend",
            "date": "2026-11-21",
            "time": "10:00-11:00",
            "speakers": ["spk_b", "spk_a"],
        },
    ],
}


class InMemoryStore:
    """BackingStore fake that records calls and can be told to fail."""

    def __init__(self, sessions: List[Session], speakers: Optional[List[Speaker]] = None):
        self.sessions = list(sessions)
        self.speakers = list(speakers or [])
        self.attendees: Dict[str, Dict] = {}
        self.calls: List[str] = []
        self.fail_on: Set[str] = set()
        self.cancelled: List[str] = []
        self.catalog_gate: Optional[asyncio.Event] = None

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise BackendError(f"{operation} failed")

    async def get_attendee(self, identity: str) -> Optional[Attendee]:
        self._record("get_attendee")
        await asyncio.sleep(0)
        record = self.attendees.get(identity)
        return Attendee.from_dict(record) if record is not None else None

    async def create_attendee(self, attendee: Attendee) -> None:
        self._record("create_attendee")
        if attendee.identity in self.attendees:
            raise AlreadyRegisteredError(attendee.identity)
        self.attendees[attendee.identity] = attendee.to_dict()

    async def get_all_sessions(self) -> List[Session]:
        self._record("get_all_sessions")
        if self.catalog_gate is not None:
            try:
                await self.catalog_gate.wait()
            except asyncio.CancelledError:
                self.cancelled.append("get_all_sessions")
                raise
        return list(self.sessions)

    async def get_all_speakers(self) -> List[Speaker]:
        self._record("get_all_speakers")
        return list(self.speakers)

    async def add_session_association(self, identity: str, session_id: str) -> None:
        self._record("add_session_association")
        record = self.attendees.get(identity)
        if record is None:
            raise AttendeeNotFoundError(identity)
        if session_id not in record["sessions"]:
            record["sessions"].append(session_id)

    async def remove_session_association(self, identity: str, session_id: str) -> None:
        self._record("remove_session_association")
        record = self.attendees.get(identity)
        if record is not None and session_id in record["sessions"]:
            record["sessions"].remove(session_id)


@pytest.fixture
def catalog_sessions():
    """S1@09:00 day0, S2@09:00 day0, S3@10:00 day1."""
    return [Session.from_dict(item) for item in CATALOG_DATA["sessions"]]


@pytest.fixture
def catalog_speakers():
    return [Speaker.from_dict(item) for item in CATALOG_DATA["speakers"]]


@pytest.fixture
def memory_store(catalog_sessions, catalog_speakers):
    return InMemoryStore(catalog_sessions, catalog_speakers)


@pytest.fixture
def alice():
    return Attendee(
        identity="alice",
        first_name="Alice",
        last_name="Wu",
        email="alice@example.com",
    )


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG_DATA, ensure_ascii=False, indent=2), encoding="utf-8")
    return str(path)


@pytest.fixture
def attendees_file(tmp_path):
    return str(tmp_path / "attendees.json")
