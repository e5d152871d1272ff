import asyncio
import logging
import time
from typing import Callable, Dict, Tuple

logger = logging.getLogger('sessions.backends.memory')


class InMemorySessionBackend:
    """
    Process-local session store for development and tests.

    Records expire lazily: an expired record reads as absent and is dropped
    when it is next looked up. Nothing is shared across processes.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._store: Dict[str, Tuple[str, float]] = {}
        self._clock = clock
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str:
        async with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return ""

            value, deadline = entry
            if self._clock() >= deadline:
                del self._store[key]
                logger.debug(f"Session {key} expired")
                return ""

            return value

    async def set_with_expiry(self, key: str, ttl_seconds: int, value: str) -> None:
        async with self._lock:
            self._store[key] = (value, self._clock() + ttl_seconds)

    def __len__(self) -> int:
        return len(self._store)
