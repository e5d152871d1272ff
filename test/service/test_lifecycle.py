import pytest
from asgi_lifespan import LifespanManager
from httpx import AsyncClient, ASGITransport

from session import InMemorySessionBackend, RedisSessionBackend
from service import redis_client
from service.lifecycle import create_session_backend
from service.service import create_app


@pytest.fixture(autouse=True)
def reset_redis_clients():
    redis_client.redis_clients.clear()
    yield
    redis_client.redis_clients.clear()


def test_create_memory_backend():
    assert isinstance(create_session_backend("memory"), InMemorySessionBackend)


def test_create_redis_backend(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://redis.internal:6379/2")

    backend = create_session_backend("redis")

    assert isinstance(backend, RedisSessionBackend)
    assert backend.redis_client is redis_client.redis_clients["redis://redis.internal:6379/2"]


def test_redis_client_is_shared_per_url():
    first = redis_client.get_redis_client("redis://localhost:6379/0")

    assert redis_client.get_redis_client("redis://localhost:6379/0") is first
    assert redis_client.get_redis_client("redis://localhost:6379/1") is not first


@pytest.mark.asyncio
async def test_close_redis_clients_empties_registry():
    redis_client.get_redis_client("redis://localhost:6379/0")

    await redis_client.close_redis_clients()

    assert redis_client.redis_clients == {}


@pytest.mark.asyncio
async def test_lifespan_attaches_backend_from_environment(monkeypatch, session_options):
    monkeypatch.setenv("SESSION_BACKEND", "memory")
    app = create_app(options=session_options)

    async with LifespanManager(app):
        backend = app.state.session_backend
        assert isinstance(backend, InMemorySessionBackend)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost:5000") as client:
            response = await client.patch("/session", json={"data": {"step": 1}})

        assert response.status_code == 200
        assert "set-cookie" in response.headers
        assert len(backend) == 1

    assert app.state.session_backend is None


@pytest.mark.asyncio
async def test_lifespan_keeps_supplied_backend(session_options, backend):
    app = create_app(options=session_options, backend=backend)

    async with LifespanManager(app):
        assert app.state.session_backend is backend
