from typing import Any, Literal

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    status: Literal["ok"] = Field(
        description="Service health",
        default="ok"
    )


class SessionPayloadResponse(BaseModel):
    """Application data stored in the caller's session."""

    data: dict[str, Any] = Field(
        description="Session payload as currently stored",
        default_factory=dict
    )


class SessionPayloadUpdate(BaseModel):
    """Keys to merge into the session payload."""

    data: dict[str, Any] = Field(
        description="Key/value pairs to set; existing keys are overwritten",
    )
