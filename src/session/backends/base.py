from typing import Protocol, runtime_checkable


@runtime_checkable
class SessionBackend(Protocol):
    """
    Key-value store used to persist session envelopes.

    Both commands are awaited by the caller. Failures of the store itself
    must surface as BackendError, a missing record is not a failure.
    """

    async def get(self, key: str) -> str:
        """Return the stored value for `key`, or an empty string if there is none."""
        ...

    async def set_with_expiry(self, key: str, ttl_seconds: int, value: str) -> None:
        """Overwrite `key` with `value` and restart its expiry at `ttl_seconds`."""
        ...
