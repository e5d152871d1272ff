from fastapi import APIRouter
import logging

from schema import StatusResponse

logger = logging.getLogger('sessions.service.routers.misc')

router = APIRouter()


@router.get("/status")
async def get_status() -> StatusResponse:
    """Health check endpoint."""
    return StatusResponse()
