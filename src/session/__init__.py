"""Cookie-bound server-side sessions backed by a key-value store."""

from .backends import InMemorySessionBackend, RedisSessionBackend, SessionBackend
from .context import SessionContext
from .controller import SESSION_DATA_NAME, Phase, SessionController, SessionOutcome
from .envelope import DecodedEnvelope, decode_envelope, dumps_envelope, encode_envelope, loads_envelope
from .errors import BackendError, EnvelopeCorrupt, SessionError
from .identifiers import make_session_id
from .models import CookieAttributes, SameSite, SessionOptions

__all__ = [
    "SessionBackend",
    "InMemorySessionBackend",
    "RedisSessionBackend",
    "SessionContext",
    "SessionController",
    "SessionOutcome",
    "Phase",
    "SESSION_DATA_NAME",
    "DecodedEnvelope",
    "encode_envelope",
    "decode_envelope",
    "dumps_envelope",
    "loads_envelope",
    "SessionError",
    "BackendError",
    "EnvelopeCorrupt",
    "make_session_id",
    "CookieAttributes",
    "SameSite",
    "SessionOptions",
]
