"""Tests for Attendee model."""
import pytest

from src.models.attendee import Attendee


class TestAttendeeValidation:
    """Tests for attendee data validation."""

    def test_create_valid_attendee(self):
        """Valid attendee should be created successfully."""
        attendee = Attendee(
            identity="alice",
            first_name="Alice",
            last_name="Wu",
            email="alice@example.com",
        )
        assert attendee.identity == "alice"
        assert attendee.sessions == set()
        assert attendee.display_name == "Alice Wu"

    def test_empty_identity_raises_error(self):
        """Empty identity should raise ValueError."""
        with pytest.raises(ValueError, match="Identity cannot be empty"):
            Attendee(identity="  ", first_name="A", last_name="B", email="a@b.co")

    def test_empty_first_name_raises_error(self):
        with pytest.raises(ValueError, match="First name cannot be empty"):
            Attendee(identity="alice", first_name="", last_name="Wu", email="a@b.co")

    def test_last_name_exceeds_50_chars_raises_error(self):
        with pytest.raises(ValueError, match="Last name cannot exceed 50 characters"):
            Attendee(identity="alice", first_name="Alice", last_name="W" * 51, email="a@b.co")

    def test_invalid_email_raises_error(self):
        with pytest.raises(ValueError, match="Invalid email address"):
            Attendee(identity="alice", first_name="Alice", last_name="Wu", email="not-an-email")

    def test_duplicate_session_ids_collapse(self):
        """Agenda is a set even when built from a list with repeats."""
        attendee = Attendee(
            identity="alice",
            first_name="Alice",
            last_name="Wu",
            email="alice@example.com",
            sessions=["session_001", "session_001", "session_003"],
        )
        assert attendee.sessions == {"session_001", "session_003"}
        assert attendee.has_session("session_003")
        assert not attendee.has_session("session_002")


class TestAttendeeSerialization:
    """Tests for dict conversion used by the JSON store."""

    def test_to_dict_sorts_sessions(self):
        attendee = Attendee(
            identity="alice",
            first_name="Alice",
            last_name="Wu",
            email="alice@example.com",
            sessions={"session_003", "session_001"},
        )
        assert attendee.to_dict()["sessions"] == ["session_001", "session_003"]

    def test_from_dict_defaults_missing_sessions(self):
        attendee = Attendee.from_dict({
            "identity": "bob",
            "first_name": "Bob",
            "last_name": "Lee",
            "email": "bob@example.com",
        })
        assert attendee.sessions == set()

    def test_identity_is_case_sensitive(self):
        upper = Attendee(identity="Alice", first_name="A", last_name="W", email="a@b.co")
        lower = Attendee(identity="alice", first_name="A", last_name="W", email="a@b.co")
        assert upper != lower
