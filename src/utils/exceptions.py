"""Custom exception classes."""


class AgendaError(Exception):
    """Base class for attendee and agenda errors."""
    pass


class AlreadyRegisteredError(AgendaError):
    """Raised when an attendee already exists for an identity."""

    def __init__(self, identity: str):
        super().__init__(f"Attendee already registered: {identity}")
        self.identity = identity


class AttendeeNotFoundError(AgendaError):
    """Raised when an agenda change targets an identity with no attendee."""

    def __init__(self, identity: str):
        super().__init__(f"No attendee registered for: {identity}")
        self.identity = identity


class BackendError(AgendaError):
    """Raised when the backing store fails to read or write."""
    pass

