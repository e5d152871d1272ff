class SessionError(Exception):
    """Base class for session layer failures."""


class BackendError(SessionError):
    """The key-value backend could not complete a command."""


class EnvelopeCorrupt(SessionError):
    """A stored session record is not a valid envelope document."""
