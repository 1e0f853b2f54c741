"""Unit tests for AttendeeDirectory."""
import asyncio

import pytest

from src.models.attendee import Attendee
from src.services.attendee_service import AttendeeDirectory
from src.utils.exceptions import AlreadyRegisteredError, BackendError


class TestLookup:
    """Test lookup."""

    @pytest.mark.asyncio
    async def test_miss_returns_none(self, memory_store):
        directory = AttendeeDirectory(memory_store)
        assert await directory.lookup("nobody") is None

    @pytest.mark.asyncio
    async def test_backend_failure_propagates(self, memory_store):
        memory_store.fail_on.add("get_attendee")
        directory = AttendeeDirectory(memory_store)
        with pytest.raises(BackendError):
            await directory.lookup("alice")


class TestRegister:
    """Test register."""

    @pytest.mark.asyncio
    async def test_register_then_lookup_returns_same_fields(self, memory_store, alice):
        directory = AttendeeDirectory(memory_store)
        await directory.register(alice)

        loaded = await directory.lookup("alice")

        assert loaded.identity == alice.identity
        assert loaded.first_name == alice.first_name
        assert loaded.last_name == alice.last_name
        assert loaded.email == alice.email
        assert loaded.sessions == set()

    @pytest.mark.asyncio
    async def test_second_register_fails(self, memory_store, alice):
        directory = AttendeeDirectory(memory_store)
        await directory.register(alice)

        with pytest.raises(AlreadyRegisteredError):
            await directory.register(alice)
        assert memory_store.calls.count("create_attendee") == 1

    @pytest.mark.asyncio
    async def test_concurrent_registrations_only_one_wins(self, memory_store, alice):
        directory = AttendeeDirectory(memory_store)
        twin = Attendee(identity="alice", first_name="Other", last_name="Person", email="o@example.com")

        results = await asyncio.gather(
            directory.register(alice),
            directory.register(twin),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, AlreadyRegisteredError)]
        assert len(failures) == 1
        assert len(memory_store.attendees) == 1

    @pytest.mark.asyncio
    async def test_create_failure_propagates(self, memory_store, alice):
        memory_store.fail_on.add("create_attendee")
        directory = AttendeeDirectory(memory_store)
        with pytest.raises(BackendError):
            await directory.register(alice)
        assert await directory.lookup("alice") is None
