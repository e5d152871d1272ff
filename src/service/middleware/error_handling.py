import logging
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from session import SessionError

from .session import session_error_response

logger = logging.getLogger('sessions.service.middleware')


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error occurred",
            "error_code": "internal_error",
            "message": "An unexpected error occurred. Please try again later.",
            "action_required": "Please refresh the page and try again"
        }
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last line of defence for errors raised past the endpoints.

    Session layer failures that escape the session middleware (for example a
    route talking to the backend directly) get the same body as a halted
    session phase; anything else gets the generic internal error body.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except HTTPException:
            # Left to fastapi's handler and custom_http_exception_handler
            raise
        except SessionError as exc:
            logger.error(f"Session error for {request.url}: {type(exc).__name__}: {exc}")
            return session_error_response()
        except Exception as exc:
            logger.error(f"Unexpected error for {request.url}: {str(exc)}", exc_info=True)
            return internal_error_response()
