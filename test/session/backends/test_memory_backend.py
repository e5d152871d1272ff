import pytest

from session.backends import InMemorySessionBackend, SessionBackend


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_memory_backend_satisfies_protocol():
    assert isinstance(InMemorySessionBackend(), SessionBackend)


@pytest.mark.asyncio
async def test_memory_backend_get_missing():
    backend = InMemorySessionBackend()

    assert await backend.get("sess:missing") == ""


@pytest.mark.asyncio
async def test_memory_backend_set_then_get():
    backend = InMemorySessionBackend()

    await backend.set_with_expiry("sess:abc", 60, '{"data": {}}')

    assert await backend.get("sess:abc") == '{"data": {}}'


@pytest.mark.asyncio
async def test_memory_backend_overwrite_restarts_expiry():
    clock = FakeClock()
    backend = InMemorySessionBackend(clock=clock)

    await backend.set_with_expiry("sess:abc", 60, "first")
    clock.now += 50
    await backend.set_with_expiry("sess:abc", 60, "second")
    clock.now += 50

    assert await backend.get("sess:abc") == "second"


@pytest.mark.asyncio
async def test_memory_backend_expired_record_reads_as_missing():
    clock = FakeClock()
    backend = InMemorySessionBackend(clock=clock)

    await backend.set_with_expiry("sess:abc", 60, "value")
    clock.now += 60

    assert await backend.get("sess:abc") == ""
    assert len(backend) == 0
