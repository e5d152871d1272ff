"""
FastAPI dependencies for the session service.

This module provides reusable dependency functions that can be injected
into route handlers throughout the application.
"""
from typing import Any, Dict

from fastapi import HTTPException, Request

from session import SESSION_DATA_NAME
from session.envelope import DATA_FIELD


def get_session_payload(request: Request) -> Dict[str, Any]:
    """
    Return the mutable session payload attached by SessionMiddleware.

    Changes made to the returned dict are persisted when the response is sent.

    Raises:
        HTTPException: 500 if no session was attached to this request
    """
    envelope = getattr(request.state, SESSION_DATA_NAME, None)
    if not isinstance(envelope, dict) or not isinstance(envelope.get(DATA_FIELD), dict):
        raise HTTPException(status_code=500, detail="No session is available for this request")
    return envelope[DATA_FIELD]
