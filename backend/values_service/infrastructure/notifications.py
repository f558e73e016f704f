"""Notification Channel Adapter: publishes "work pending" messages over Redis pub/sub.

Invariants:
    - Payload is the stringified index; no envelope, no persistence
    - Zero subscribers is a normal outcome, not an error
    - RedisError and socket errors mapped to NotificationError
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from values_service.core.errors import ErrorContext, NotificationError

logger = logging.getLogger(__name__)


class RedisNotificationChannel:
    """NotificationChannel over Redis PUBLISH."""

    def __init__(self, client: redis.Redis):
        self._client = client

    async def publish(self, topic: str, index: int) -> None:
        try:
            receivers = await self._client.publish(topic, str(index))
        except (RedisError, OSError) as e:
            raise NotificationError(
                str(e), topic, ErrorContext(index=index),
            ) from e
        if not receivers:
            logger.debug(
                "Published with no subscribers attached",
                extra={"topic": topic, "index": index},
            )

    async def close(self) -> None:
        await self._client.aclose()
