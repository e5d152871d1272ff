from .schema import StatusResponse, SessionPayloadResponse, SessionPayloadUpdate

__all__ = [
    "StatusResponse",
    "SessionPayloadResponse",
    "SessionPayloadUpdate",
]
