"""Remote store for attendees and the session catalog."""
import asyncio
import logging
import os
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple, TypeVar

from src.models.attendee import Attendee
from src.models.session import Session
from src.models.speaker import Speaker
from src.services.storage_service import load_json, lock_file, save_json
from src.utils.exceptions import (
    AlreadyRegisteredError,
    AttendeeNotFoundError,
    BackendError,
)

logger = logging.getLogger(__name__)

EMPTY_ATTENDEES: Dict[str, Any] = {"attendees": []}

# Failures that mean the store itself is broken rather than a domain outcome.
# JSONDecodeError is a ValueError and lock timeouts are OSErrors.
_BACKEND_FAILURES = (OSError, ValueError)

T = TypeVar("T")


def _parse_record(factory: Callable[[Dict[str, Any]], T], record: Any) -> T:
    """Build a model from a stored record; a record of the wrong shape is a ValueError."""
    try:
        return factory(record)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed record {record!r}: {e!r}") from e


class BackingStore(Protocol):
    """Async operations the agenda core consumes from its store."""

    async def get_attendee(self, identity: str) -> Optional[Attendee]: ...

    async def create_attendee(self, attendee: Attendee) -> None: ...

    async def get_all_sessions(self) -> List[Session]: ...

    async def get_all_speakers(self) -> List[Speaker]: ...

    async def add_session_association(self, identity: str, session_id: str) -> None: ...

    async def remove_session_association(self, identity: str, session_id: str) -> None: ...


class JsonBackingStore:
    """
    BackingStore over two JSON files.

    The catalog file holds ``{"speakers": [...], "sessions": [...]}`` and is
    only ever read. The attendees file holds ``{"attendees": [...]}``; every
    write re-reads it under the file lock so check-then-write is atomic across
    processes. Blocking file work runs in a worker thread.
    """

    def __init__(self, catalog_file: str, attendees_file: str, lock_timeout: float = 5.0):
        self.catalog_file = catalog_file
        self.attendees_file = attendees_file
        self.lock_timeout = lock_timeout
        self._catalog_cache: Optional[Tuple[float, Dict[str, Any]]] = None

    async def _call(self, operation: str, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except _BACKEND_FAILURES as e:
            logger.error(f"Backing store {operation} failed: {e}")
            raise BackendError(f"{operation} failed: {e}") from e

    # Catalog

    def _load_catalog(self) -> Dict[str, Any]:
        mtime = os.path.getmtime(self.catalog_file)
        if self._catalog_cache is not None and self._catalog_cache[0] == mtime:
            return self._catalog_cache[1]
        data = load_json(self.catalog_file)
        self._catalog_cache = (mtime, data)
        return data

    def _read_sessions(self) -> List[Session]:
        return [_parse_record(Session.from_dict, item) for item in self._load_catalog().get("sessions", [])]

    def _read_speakers(self) -> List[Speaker]:
        return [_parse_record(Speaker.from_dict, item) for item in self._load_catalog().get("speakers", [])]

    async def get_all_sessions(self) -> List[Session]:
        return await self._call("get_all_sessions", self._read_sessions)

    async def get_all_speakers(self) -> List[Speaker]:
        return await self._call("get_all_speakers", self._read_speakers)

    # Attendees

    def _load_attendees(self) -> Dict[str, Any]:
        return load_json(self.attendees_file, default=EMPTY_ATTENDEES)

    @staticmethod
    def _find(data: Dict[str, Any], identity: str) -> Optional[Dict[str, Any]]:
        for record in data.get("attendees", []):
            if record.get("identity") == identity:
                return record
        return None

    def _read_attendee(self, identity: str) -> Optional[Attendee]:
        record = self._find(self._load_attendees(), identity)
        return _parse_record(Attendee.from_dict, record) if record is not None else None

    def _write_attendee(self, attendee: Attendee) -> None:
        with lock_file(self.attendees_file, timeout=self.lock_timeout):
            data = self._load_attendees()
            if self._find(data, attendee.identity) is not None:
                raise AlreadyRegisteredError(attendee.identity)
            data.setdefault("attendees", []).append(attendee.to_dict())
            save_json(self.attendees_file, data)

    def _update_sessions(self, identity: str, session_id: str, add: bool) -> None:
        with lock_file(self.attendees_file, timeout=self.lock_timeout):
            data = self._load_attendees()
            record = self._find(data, identity)
            if record is None:
                if add:
                    raise AttendeeNotFoundError(identity)
                return

            sessions = record.setdefault("sessions", [])
            if add and session_id not in sessions:
                sessions.append(session_id)
            elif not add and session_id in sessions:
                record["sessions"] = [s for s in sessions if s != session_id]
            else:
                return
            save_json(self.attendees_file, data)

    async def get_attendee(self, identity: str) -> Optional[Attendee]:
        return await self._call("get_attendee", self._read_attendee, identity)

    async def create_attendee(self, attendee: Attendee) -> None:
        await self._call("create_attendee", self._write_attendee, attendee)

    async def add_session_association(self, identity: str, session_id: str) -> None:
        await self._call("add_session_association", self._update_sessions, identity, session_id, True)

    async def remove_session_association(self, identity: str, session_id: str) -> None:
        await self._call("remove_session_association", self._update_sessions, identity, session_id, False)
