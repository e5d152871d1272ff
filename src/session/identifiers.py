"""
Session identifier generation.

Identifiers are a configured prefix followed by a random version 4 UUID.
Randomness comes from the operating system CSPRNG through a single
process-wide generator that is created on first use.
"""

import secrets
import threading
import uuid
from typing import Optional


class SessionIdGenerator:
    """Thread-safe source of random UUID tokens."""

    def __init__(self):
        self._random = secrets.SystemRandom()
        self._lock = threading.Lock()

    def new_token(self) -> str:
        with self._lock:
            bits = self._random.getrandbits(128)
        return str(uuid.UUID(int=bits, version=4))

    def new_id(self, prefix: str = "") -> str:
        return f"{prefix}{self.new_token()}"


_generator: Optional[SessionIdGenerator] = None
_generator_lock = threading.Lock()


def get_id_generator() -> SessionIdGenerator:
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                _generator = SessionIdGenerator()
    return _generator


def make_session_id(prefix: str = "") -> str:
    """Return a new session identifier starting with `prefix`."""
    return get_id_generator().new_id(prefix)
