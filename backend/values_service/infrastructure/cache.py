"""Cache Adapter: the "values" hash mapping index -> latest known result.

Invariants:
    - Field name is the stringified index; value is the placeholder or the worker's result
    - set_placeholder upserts; it never deletes or reads
    - read_all on a missing hash returns {}
    - RedisError and socket errors mapped to CacheError (core/errors.py)
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from values_service.core.domain_types import PLACEHOLDER, VALUES_KEY
from values_service.core.errors import CacheError, ErrorContext

logger = logging.getLogger(__name__)


class RedisValueCache:
    """ValueCache backed by a Redis hash."""

    def __init__(self, client: redis.Redis, key: str = VALUES_KEY):
        self._client = client
        self._key = key

    async def ping(self) -> None:
        try:
            await self._client.ping()
        except (RedisError, OSError) as e:
            raise CacheError(str(e), "ping") from e

    async def set_placeholder(self, index: int) -> None:
        try:
            await self._client.hset(self._key, str(index), PLACEHOLDER)
        except (RedisError, OSError) as e:
            raise CacheError(
                str(e), "hset", ErrorContext(index=index),
            ) from e

    async def read_all(self) -> dict[str, str]:
        try:
            values = await self._client.hgetall(self._key)
        except (RedisError, OSError) as e:
            logger.error(f"Cache read failed: {e}", extra={"operation": "hgetall"})
            raise CacheError(str(e), "hgetall") from e
        return dict(values or {})

    async def close(self) -> None:
        await self._client.aclose()
