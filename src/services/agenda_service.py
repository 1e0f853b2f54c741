"""Agenda store: attendee-to-session associations and the agenda join."""
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from src.models.session import Session
from src.models.speaker import Speaker
from src.services.attendee_service import AttendeeDirectory
from src.services.backing_store import BackingStore
from src.utils.exceptions import AttendeeNotFoundError

logger = logging.getLogger(__name__)

# Produces the sessions a schedule page shows for the current identity
SessionSource = Callable[[Optional[str]], Awaitable[List[Session]]]


class AgendaStore:
    """Idempotent add/remove of agenda entries plus the agenda read."""

    def __init__(self, store: BackingStore, directory: AttendeeDirectory):
        self._store = store
        self._directory = directory

    async def add_session(self, identity: str, session_id: str) -> None:
        """
        Put a session on the attendee's agenda. Adding twice is a no-op.

        Raises:
            AttendeeNotFoundError: If no attendee exists for the identity
            BackendError: If the store fails
        """
        if await self._directory.lookup(identity) is None:
            raise AttendeeNotFoundError(identity)

        await self._store.add_session_association(identity, session_id)
        logger.info(f"Added {session_id} to agenda of {identity}")

    async def remove_session(self, identity: str, session_id: str) -> None:
        """
        Take a session off the attendee's agenda. Removing an absent entry
        succeeds without change.

        Raises:
            BackendError: If the store fails
        """
        await self._store.remove_session_association(identity, session_id)
        logger.info(f"Removed {session_id} from agenda of {identity}")

    async def sessions_for_attendee(self, identity: str) -> List[Session]:
        """
        Sessions on the attendee's agenda, in catalog order.

        Fetches the whole catalog and the attendee concurrently and filters
        in memory. This stands in for a dedicated backend query and is the
        slowest read in the app. If either fetch fails the other is
        cancelled and the error propagates.

        Returns:
            List of sessions; empty if the identity has no attendee
        """
        tasks = [
            asyncio.ensure_future(self._store.get_all_sessions()),
            asyncio.ensure_future(self._directory.lookup(identity)),
        ]
        try:
            catalog, attendee = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        if attendee is None:
            return []
        return [session for session in catalog if session.id in attendee.sessions]

    async def get_session_by_id(self, session_id: str) -> Optional[Session]:
        """Find one catalog session, or None."""
        for session in await self._store.get_all_sessions():
            if session.id == session_id:
                return session
        return None

    async def get_speakers_for_session(self, session: Session) -> List[Speaker]:
        """Resolve a session's speaker references, keeping their order."""
        speakers = {speaker.id: speaker for speaker in await self._store.get_all_speakers()}
        resolved = []
        for speaker_id in session.speakers:
            speaker = speakers.get(speaker_id)
            if speaker is None:
                logger.warning(f"Session {session.id} references unknown speaker {speaker_id}")
                continue
            resolved.append(speaker)
        return resolved

    def all_sessions_source(self) -> SessionSource:
        """Source yielding the full catalog regardless of identity."""
        async def source(identity: Optional[str]) -> List[Session]:
            return await self._store.get_all_sessions()

        return source

    def attendee_sessions_source(self) -> SessionSource:
        """Source yielding the current identity's agenda."""
        async def source(identity: Optional[str]) -> List[Session]:
            if identity is None:
                return []
            return await self.sessions_for_attendee(identity)

        return source
