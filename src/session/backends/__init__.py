"""Key-value stores that hold session envelopes."""

from .base import SessionBackend
from .memory_backend import InMemorySessionBackend
from .redis_backend import RedisSessionBackend

__all__ = [
    "SessionBackend",
    "InMemorySessionBackend",
    "RedisSessionBackend",
]
