import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exception_handlers import http_exception_handler

logger = logging.getLogger('sessions.service.middleware')


async def custom_http_exception_handler(request: Request, exc: HTTPException):
    """Custom handler for HTTPExceptions so server-side errors share the middleware's error format"""
    logger.error(f"CUSTOM_EXCEPTION_HANDLER: {exc.status_code} - {exc.detail}")

    if exc.status_code >= 500:
        if isinstance(exc.detail, dict):
            error_response = exc.detail
        else:
            error_response = {
                "error": "Internal server error occurred",
                "error_code": "internal_error",
                "message": str(exc.detail) if exc.detail else "An unexpected error occurred.",
                "action_required": "Please refresh the page and try again"
            }

        return JSONResponse(
            status_code=exc.status_code,
            content=error_response,
            headers={"Content-Type": "application/json"}
        )

    # For other HTTP exceptions, use default handler but log the details
    logger.error(f"OTHER_HTTP_EXCEPTION: {exc.status_code} - {exc.detail}")
    return await http_exception_handler(request, exc)
