from typing import Any, Annotated, Dict

from fastapi import APIRouter, Depends
import logging

from schema import SessionPayloadResponse, SessionPayloadUpdate
from service.dependencies import get_session_payload

logger = logging.getLogger('sessions.service.routers.session')

router = APIRouter(
    tags=["session"],
)

SessionPayload = Annotated[Dict[str, Any], Depends(get_session_payload)]


@router.get("/session")
async def read_session(payload: SessionPayload) -> SessionPayloadResponse:
    """Return the data stored in the caller's session."""
    return SessionPayloadResponse(data=payload)


@router.patch("/session")
async def update_session(update: SessionPayloadUpdate, payload: SessionPayload) -> SessionPayloadResponse:
    """
    Merge keys into the caller's session.

    The merged payload is written back to the session backend after the
    response is produced.
    """
    payload.update(update.data)
    logger.debug(f"Session payload updated with keys: {sorted(update.data)}")
    return SessionPayloadResponse(data=payload)


@router.delete("/session/data")
async def clear_session(payload: SessionPayload) -> SessionPayloadResponse:
    """
    Remove every key from the caller's session payload.

    The session record itself stays in the backend until its TTL runs out.
    """
    payload.clear()
    return SessionPayloadResponse(data=payload)
