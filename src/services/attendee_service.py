"""Attendee directory: lookup and registration of attendee profiles."""
import logging
from typing import Optional

from src.models.attendee import Attendee
from src.services.backing_store import BackingStore
from src.utils.exceptions import AlreadyRegisteredError

logger = logging.getLogger(__name__)


class AttendeeDirectory:
    """Looks up and creates attendees keyed by authenticated identity."""

    def __init__(self, store: BackingStore):
        self._store = store

    async def lookup(self, identity: str) -> Optional[Attendee]:
        """
        Find the attendee bound to an identity.

        Returns:
            Attendee, or None on a normal miss

        Raises:
            BackendError: If the store fails
        """
        return await self._store.get_attendee(identity)

    async def register(self, attendee: Attendee) -> Attendee:
        """
        Create the attendee for ``attendee.identity``.

        The pre-check gives a cheap early answer; the store repeats the check
        under its write lock, so two concurrent registrations for the same
        identity cannot both succeed.

        Raises:
            AlreadyRegisteredError: If the identity already has an attendee
            BackendError: If the store fails
        """
        if await self._store.get_attendee(attendee.identity) is not None:
            raise AlreadyRegisteredError(attendee.identity)

        await self._store.create_attendee(attendee)
        logger.info(f"Registered attendee {attendee.identity}")
        return attendee
