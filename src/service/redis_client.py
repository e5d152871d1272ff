import redis.asyncio as aioredis
import logging
from typing import Optional

from .config import get_redis_url

logger = logging.getLogger('sessions.service.redis')

redis_clients = {}


def get_redis_client(redis_url: Optional[str] = None) -> aioredis.Redis:
    """Return the shared client for `redis_url` (REDIS_URL by default), creating it on first use."""
    if not redis_url:
        redis_url = get_redis_url()

    if redis_url not in redis_clients:
        logger.info(f"Creating new Redis client with: URL {redis_url}")
        redis_clients[redis_url] = aioredis.from_url(redis_url, decode_responses=True)

    return redis_clients[redis_url]


async def close_redis_clients() -> None:
    while redis_clients:
        redis_url, client = redis_clients.popitem()
        try:
            await client.aclose()
            logger.info(f"Closed Redis client for {redis_url}")
        except Exception as e:
            logger.error(f"Error closing Redis client for {redis_url}: {e}")
