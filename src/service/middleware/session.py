import logging
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from fastapi import Request
from fastapi.responses import JSONResponse

from session import Phase, SessionBackend, SessionContext, SessionController, SessionOptions

logger = logging.getLogger('sessions.service.middleware')

BackendProvider = Callable[[Request], Optional[SessionBackend]]


def app_state_backend(request: Request) -> Optional[SessionBackend]:
    """Default provider: the backend the lifespan attached to the application state, if any."""
    return getattr(request.app.state, "session_backend", None)


def session_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error occurred",
            "error_code": "session_unavailable",
            "message": "Your session could not be loaded or saved. Please try again later.",
            "action_required": "Please refresh the page and try again"
        }
    )


class SessionMiddleware(BaseHTTPMiddleware):
    """Loads the session before the endpoint runs and persists it after the response is ready"""

    def __init__(self, app: ASGIApp, options: SessionOptions, backend_provider: BackendProvider = app_state_backend):
        super().__init__(app)
        self.controller = SessionController(options)
        self.backend_provider = backend_provider

    async def dispatch(self, request: Request, call_next):
        ctx = SessionContext(request, self.backend_provider(request))

        outcome = await self.controller(ctx, Phase.REQUEST)
        logger.debug(f"Session request phase for {request.url.path}: {outcome.value}")
        if outcome.halts:
            return session_error_response()

        response = await call_next(request)

        outcome = await self.controller(ctx, Phase.RESPONSE)
        logger.debug(f"Session response phase for {request.url.path}: {outcome.value}")
        if outcome.halts:
            return session_error_response()

        ctx.apply_cookies(response)
        return response
