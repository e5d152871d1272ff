from typing import Any, List, Optional

from starlette.requests import Request
from starlette.responses import Response

from .backends import SessionBackend
from .models import CookieAttributes


class SessionContext:
    """
    Per-request view the session controller works through.

    Data saved here lives on `request.state`, so it is visible to endpoints
    and dependencies for the rest of the request. Cookies are collected and
    written onto the response by the dispatcher once it has one.
    """

    def __init__(self, request: Request, backend: Optional[SessionBackend] = None):
        self.request = request
        self._backend = backend
        self._cookies: List[CookieAttributes] = []

    @property
    def backend(self) -> Optional[SessionBackend]:
        return self._backend

    def has_backend(self) -> bool:
        return self._backend is not None

    @property
    def path(self) -> str:
        return self.request.url.path

    def get_cookie(self, name: str) -> str:
        return self.request.cookies.get(name, "")

    def save_data(self, key: str, document: Any) -> None:
        setattr(self.request.state, key, document)

    def load_data(self, key: str) -> Any:
        return getattr(self.request.state, key, None)

    def set_cookie(self, cookie: CookieAttributes) -> None:
        self._cookies.append(cookie)

    @property
    def cookies(self) -> List[CookieAttributes]:
        return list(self._cookies)

    def apply_cookies(self, response: Response) -> None:
        for cookie in self._cookies:
            response.set_cookie(
                key=cookie.name,
                value=cookie.value,
                max_age=cookie.max_age,
                path=cookie.path,
                domain=cookie.domain,
                secure=cookie.secure,
                httponly=cookie.http_only,
                samesite=cookie.same_site.value,
            )
