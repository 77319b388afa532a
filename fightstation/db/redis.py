"""Redis async client used as the persistent key-value storage.

Holds the translation cache blob and the saved locale preference.
Provides helper methods wrapping raw Redis commands so callers never need
to handle redis.exceptions directly. All connection/command errors are
caught and re-raised as StorageConnectionError.
"""

import structlog
from redis.asyncio import Redis
from redis.asyncio import from_url as redis_from_url
from redis.exceptions import RedisError

from fightstation.core.config import settings
from fightstation.core.exceptions import StorageConnectionError

logger = structlog.get_logger(__name__)

_client: Redis = redis_from_url(
    settings.redis_url,
    decode_responses=True,
    encoding="utf-8",
)


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------

async def get_redis() -> "RedisClient":
    """Return the singleton RedisClient wrapper."""
    return RedisClient(_client)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

async def close_redis() -> None:
    """Gracefully close the Redis connection pool."""
    logger.info("redis_shutdown")
    await _client.aclose()


# ---------------------------------------------------------------------------
# Helper wrapper
# ---------------------------------------------------------------------------

class RedisClient:
    """Thin wrapper over redis.asyncio.Redis with typed helpers.

    Exposes exactly the get/set/delete surface the translation cache and
    locale preference need. Every public method catches RedisError and
    re-raises as StorageConnectionError.
    """

    def __init__(self, client: Redis) -> None:
        self._r = client

    async def get(self, key: str) -> str | None:
        """GET a key. Returns None if the key does not exist."""
        try:
            return await self._r.get(name=key)
        except RedisError as e:
            logger.error("redis_get_failed", key=key, error=str(e))
            raise StorageConnectionError(f"Redis GET failed: {e}") from e

    async def set(self, key: str, value: str) -> None:
        """SET a key with no expiry. Overwrites any previous value."""
        try:
            await self._r.set(name=key, value=value)
        except RedisError as e:
            logger.error("redis_set_failed", key=key, error=str(e))
            raise StorageConnectionError(f"Redis SET failed: {e}") from e

    async def delete(self, key: str) -> int:
        """DELETE a key. Returns the number of keys removed (0 or 1)."""
        try:
            return await self._r.delete(key)
        except RedisError as e:
            logger.error("redis_delete_failed", key=key, error=str(e))
            raise StorageConnectionError(f"Redis DELETE failed: {e}") from e
