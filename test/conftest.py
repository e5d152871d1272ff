from typing import Optional

import pytest
import pytest_asyncio
import logging

from httpx import AsyncClient, ASGITransport

from session import BackendError, SameSite, SessionOptions
from service.service import create_app


class RecordingBackend:
    """In-memory backend that records every command it receives."""

    def __init__(self):
        self.records: dict[str, str] = {}
        self.calls: list[tuple] = []
        self.fail_get: Optional[Exception] = None
        self.fail_set: Optional[Exception] = None

    async def get(self, key: str) -> str:
        self.calls.append(("GET", key))
        if self.fail_get:
            raise self.fail_get
        return self.records.get(key, "")

    async def set_with_expiry(self, key: str, ttl_seconds: int, value: str) -> None:
        self.calls.append(("SETEX", key, ttl_seconds, value))
        if self.fail_set:
            raise self.fail_set
        self.records[key] = value

    @property
    def setex_calls(self) -> list[tuple]:
        return [call for call in self.calls if call[0] == "SETEX"]


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for tests."""
    logging.basicConfig(level=logging.INFO)


@pytest.fixture
def session_options() -> SessionOptions:
    return SessionOptions(
        name="session",
        domain="example.com",
        path="/",
        max_age=900,
        http_only=True,
        secure=False,
        same_site=SameSite.STRICT,
        prefix="test:",
    )


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def failing_backend() -> RecordingBackend:
    backend = RecordingBackend()
    backend.fail_get = BackendError("Database connection error during session read")
    backend.fail_set = BackendError("Database connection error during session write")
    return backend


@pytest.fixture
def app(session_options, backend):
    return create_app(options=session_options, backend=backend)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost:5000") as client:
        yield client
