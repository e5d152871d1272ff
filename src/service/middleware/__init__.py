import logging as log
from fastapi import FastAPI, HTTPException

from session import SessionOptions

from .logging import RequestResponseLoggingMiddleware
from .error_handling import ErrorHandlingMiddleware
from .session import SessionMiddleware, BackendProvider, app_state_backend
from .exception_handlers import custom_http_exception_handler

logger = log.getLogger('sessions.service.middleware')


def setup_middleware(
    app: FastAPI,
    options: SessionOptions,
    backend_provider: BackendProvider = app_state_backend,
):
    """
    Setup all middleware for the FastAPI application.

    Middleware are added in reverse order (last added = first executed).
    Current order of execution:
    1. ErrorHandlingMiddleware (catches unhandled errors)
    2. RequestResponseLoggingMiddleware (logs requests/responses)
    3. SessionMiddleware (loads the session before, persists it after the endpoint)

    Args:
        app: FastAPI application instance
        options: Session cookie options
        backend_provider: Callable returning the session backend for a request, or None
    """
    # Add custom exception handler for HTTPExceptions
    app.add_exception_handler(HTTPException, custom_http_exception_handler)

    # Add session middleware (closest to the endpoints)
    app.add_middleware(SessionMiddleware, options=options, backend_provider=backend_provider)

    # Add comprehensive request/response logging for debugging
    app.add_middleware(RequestResponseLoggingMiddleware, cookie_name=options.name)

    # Add error handling middleware to format unexpected errors
    app.add_middleware(ErrorHandlingMiddleware)

    logger.info(f"Session middleware configured for cookie '{options.name}'")


__all__ = [
    'setup_middleware',
    'RequestResponseLoggingMiddleware',
    'ErrorHandlingMiddleware',
    'SessionMiddleware',
    'app_state_backend',
    'custom_http_exception_handler',
]
