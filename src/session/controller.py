"""
Session lifecycle controller.

Runs twice per request: once before the endpoint to load (or create) the
session envelope and attach it to the request, and once after the endpoint
to set the session cookie and write the envelope back with a fresh TTL.

The controller keeps no per-request state of its own. Everything it needs
between the two phases is attached to the request context.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from .context import SessionContext
from .envelope import decode_envelope, dumps_envelope, encode_envelope, loads_envelope
from .errors import BackendError, EnvelopeCorrupt
from .identifiers import make_session_id
from .models import CookieAttributes, SessionOptions

logger = logging.getLogger('sessions.controller')

SESSION_DATA_NAME = "session_envelope"

# Stored envelopes are pretty printed so they stay readable in redis-cli
ENVELOPE_INDENT = 4


class Phase(str, Enum):
    REQUEST = "request"
    RESPONSE = "response"


class SessionOutcome(str, Enum):
    SKIPPED = "skipped"
    NEW_SESSION = "new_session"
    EXISTING_SESSION = "existing_session"
    BACKEND_FAILURE = "backend_failure"
    CORRUPT_SESSION = "corrupt_session"
    NOTHING_TO_PERSIST = "nothing_to_persist"
    PERSISTED = "persisted"
    PERSIST_FAILED = "persist_failed"

    @property
    def halts(self) -> bool:
        """True if the dispatcher must stop and answer with an internal error."""
        return self in (
            SessionOutcome.BACKEND_FAILURE,
            SessionOutcome.CORRUPT_SESSION,
            SessionOutcome.PERSIST_FAILED,
        )


class SessionController:
    def __init__(self, options: SessionOptions, data_name: str = SESSION_DATA_NAME):
        self.options = options
        self.data_name = data_name

    async def __call__(self, ctx: SessionContext, phase: Phase) -> SessionOutcome:
        skip_reason = self.skip_reason(ctx)
        if skip_reason:
            logger.debug(f"Session {phase.value} phase skipped for {ctx.path}: {skip_reason}")
            return SessionOutcome.SKIPPED

        if phase == Phase.REQUEST:
            return await self.on_request(ctx)
        return await self.on_response(ctx)

    def skip_reason(self, ctx: SessionContext) -> Optional[str]:
        """Return why sessions do not apply to this request, or None if they do."""
        if not self.options.name:
            return "no cookie name configured"
        if not ctx.path.lower().startswith(self.options.path.lower()):
            return f"path outside {self.options.path!r}"
        if not ctx.has_backend():
            return "no session backend available"
        return None

    def create_new_session(self) -> Dict[str, Any]:
        session_id = make_session_id(self.options.prefix)
        cookie = CookieAttributes.from_options(self.options, session_id)
        return encode_envelope(cookie, {})

    async def on_request(self, ctx: SessionContext) -> SessionOutcome:
        session_id = ctx.get_cookie(self.options.name)

        if not session_id:
            ctx.save_data(self.data_name, self.create_new_session())
            logger.debug("No session cookie, created a new session")
            return SessionOutcome.NEW_SESSION

        try:
            stored = await ctx.backend.get(session_id)
        except BackendError as e:
            logger.error(f"Failed to load session {session_id}: {e}")
            return SessionOutcome.BACKEND_FAILURE

        try:
            document = loads_envelope(stored)
        except EnvelopeCorrupt as e:
            logger.error(f"Corrupted session data for session {session_id}: {e}")
            return SessionOutcome.CORRUPT_SESSION

        if not document:
            ctx.save_data(self.data_name, self.create_new_session())
            logger.debug(f"Session {session_id} not found, created a new session")
            return SessionOutcome.NEW_SESSION

        if not decode_envelope(document).ok:
            ctx.save_data(self.data_name, self.create_new_session())
            logger.warning(f"Discarded incomplete envelope for session {session_id}, created a new session")
            return SessionOutcome.NEW_SESSION

        ctx.save_data(self.data_name, document)
        return SessionOutcome.EXISTING_SESSION

    async def on_response(self, ctx: SessionContext) -> SessionOutcome:
        document = ctx.load_data(self.data_name)

        if not document:
            return SessionOutcome.NOTHING_TO_PERSIST

        cookie, data, ok = decode_envelope(document)
        if not ok:
            logger.debug("Attached session data is not a valid envelope, nothing persisted")
            return SessionOutcome.NOTHING_TO_PERSIST

        ctx.set_cookie(cookie)

        session_value = dumps_envelope(encode_envelope(cookie, data), indent=ENVELOPE_INDENT)

        try:
            await ctx.backend.set_with_expiry(cookie.session_id, cookie.max_age, session_value)
        except BackendError as e:
            logger.error(f"Failed to persist session {cookie.session_id}: {e}")
            return SessionOutcome.PERSIST_FAILED

        return SessionOutcome.PERSISTED
