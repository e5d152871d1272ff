from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SameSite(str, Enum):
    LAX = "lax"
    STRICT = "strict"
    NONE = "none"


class SessionOptions(BaseModel):
    """Cookie and identifier settings, fixed for the lifetime of the process."""
    model_config = ConfigDict(frozen=True)

    name: str = Field("session", description="Cookie name; an empty name disables sessions")
    domain: Optional[str] = Field(None, description="Cookie domain, None for host-only cookies")
    path: str = Field("/", description="Cookie path, also the request path prefix sessions apply to")
    max_age: int = Field(1800, gt=0, description="Cookie max-age and backend TTL in seconds")
    http_only: bool = True
    secure: bool = True
    same_site: SameSite = SameSite.LAX
    prefix: str = Field("", description="Prepended to every generated session id")


class CookieAttributes(BaseModel):
    """The session cookie as it is sent to the browser and stored in the envelope."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: str
    domain: Optional[str] = None
    path: str = "/"
    max_age: int = Field(..., gt=0)
    http_only: bool = True
    secure: bool = True
    same_site: SameSite = Field(SameSite.LAX, alias="samesite")

    @classmethod
    def from_options(cls, options: SessionOptions, session_id: str) -> "CookieAttributes":
        return cls(
            name=options.name,
            value=session_id,
            domain=options.domain,
            path=options.path,
            max_age=options.max_age,
            http_only=options.http_only,
            secure=options.secure,
            same_site=options.same_site,
        )

    @property
    def session_id(self) -> str:
        return self.value
