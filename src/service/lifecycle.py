import logging
from typing import AsyncGenerator, Optional
from fastapi import FastAPI
from contextlib import asynccontextmanager

from session import InMemorySessionBackend, RedisSessionBackend, SessionBackend

from .config import BACKEND_MEMORY, get_session_backend_kind
from .redis_client import get_redis_client, close_redis_clients

logger = logging.getLogger("sessions.service.lifecycle")


def create_session_backend(kind: Optional[str] = None) -> SessionBackend:
    """Build the session backend named by SESSION_BACKEND (or `kind`)."""
    kind = kind or get_session_backend_kind()

    if kind == BACKEND_MEMORY:
        logger.warning("Using InMemorySessionBackend, sessions will not survive a restart")
        return InMemorySessionBackend()

    return RedisSessionBackend(redis_client=get_redis_client())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # A backend supplied when the app was built (tests, embedding) takes precedence
    if getattr(app.state, "session_backend", None) is None:
        app.state.session_backend = create_session_backend()

    logger.info(f"Session backend ready: {type(app.state.session_backend).__name__}")

    try:
        yield
    finally:
        # Cleanup during shutdown
        app.state.session_backend = None
        await close_redis_clients()
