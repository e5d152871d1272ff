import logging

import redis.asyncio as aioredis
from redis import RedisError, ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError

from ..errors import BackendError

logger = logging.getLogger('sessions.backends.redis')


class RedisSessionBackend:
    def __init__(self, redis_client: aioredis.Redis):
        """Initialize the Redis backend with an async Redis client."""
        self.redis_client = redis_client

    def _handle_redis_error(self, operation: str, key: str, error: Exception) -> None:
        """Centralized error handling for Redis operations."""
        if isinstance(error, (RedisConnectionError, RedisTimeoutError)):
            logger.error(f"Redis connection failed during {operation} for session {key}: {error}")
            raise BackendError(f"Database connection error during {operation}") from error
        elif isinstance(error, RedisError):
            logger.error(f"Redis error during {operation} for session {key}: {error}")
            raise BackendError(f"Database error during {operation}") from error
        else:
            logger.error(f"Unexpected error during {operation} for session {key}: {error}")
            raise BackendError(f"Unexpected error during {operation}") from error

    async def get(self, key: str) -> str:
        try:
            value = await self.redis_client.get(key)

            if isinstance(value, bytes):
                # Clients created without decode_responses hand back raw bytes
                value = value.decode("utf-8")
        except Exception as e:
            self._handle_redis_error("session read", key, e)
            raise  # Never reached, but helps type checker

        if value is None:
            logger.debug(f"Session {key} not found")
            return ""

        return value

    async def set_with_expiry(self, key: str, ttl_seconds: int, value: str) -> None:
        try:
            await self.redis_client.setex(key, ttl_seconds, value)
            logger.debug(f"Session {key} stored with TTL {ttl_seconds}s")
        except Exception as e:
            self._handle_redis_error("session write", key, e)
