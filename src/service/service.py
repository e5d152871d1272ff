import logging
from typing import Optional

from fastapi import FastAPI

from session import SessionBackend, SessionOptions

from .config import get_session_options
from .lifecycle import lifespan
from .middleware import setup_middleware
from .routers import misc as misc_router, session as session_router

logger = logging.getLogger('sessions.service')


def create_app(options: Optional[SessionOptions] = None, backend: Optional[SessionBackend] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        options: Session options, read from the environment when omitted
        backend: Session backend to use instead of the one chosen from SESSION_BACKEND
    """
    options = options or get_session_options()

    app = FastAPI(lifespan=lifespan)
    app.state.session_backend = backend

    setup_middleware(app, options)

    app.include_router(misc_router.router)
    app.include_router(session_router.router)

    return app
