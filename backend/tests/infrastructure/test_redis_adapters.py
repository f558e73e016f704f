"""Redis cache and channel adapters against AsyncMock clients.

Invariants:
    - Placeholder written as HSET values <index> "Nothing yet!"
    - Publish sends the stringified index on the given topic
    - Redis and socket errors mapped to CacheError / NotificationError
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from values_service.core.errors import CacheError, NotificationError
from values_service.infrastructure.cache import RedisValueCache
from values_service.infrastructure.notifications import RedisNotificationChannel
from values_service.infrastructure.redis_client import create_redis_client


@pytest.fixture
def client():
    return AsyncMock()


async def test_set_placeholder_writes_hash_field(client):
    await RedisValueCache(client).set_placeholder(5)
    client.hset.assert_awaited_once_with("values", "5", "Nothing yet!")


async def test_read_all_returns_mapping(client):
    client.hgetall.return_value = {"5": "Nothing yet!", "3": "3"}
    assert await RedisValueCache(client).read_all() == {
        "5": "Nothing yet!", "3": "3",
    }


async def test_read_all_missing_hash_is_empty(client):
    client.hgetall.return_value = {}
    assert await RedisValueCache(client).read_all() == {}


async def test_read_all_maps_connection_error(client):
    client.hgetall.side_effect = RedisConnectionError("refused")
    with pytest.raises(CacheError) as exc_info:
        await RedisValueCache(client).read_all()
    assert exc_info.value.operation == "hgetall"


async def test_set_placeholder_maps_timeout(client):
    client.hset.side_effect = TimeoutError("timed out")
    with pytest.raises(CacheError) as exc_info:
        await RedisValueCache(client).set_placeholder(2)
    assert exc_info.value.context.index == 2


async def test_ping_maps_error(client):
    client.ping.side_effect = RedisConnectionError("refused")
    with pytest.raises(CacheError):
        await RedisValueCache(client).ping()


async def test_publish_sends_stringified_index(client):
    client.publish.return_value = 1
    await RedisNotificationChannel(client).publish("insert", 12)
    client.publish.assert_awaited_once_with("insert", "12")


async def test_publish_with_no_subscribers_is_not_an_error(client):
    client.publish.return_value = 0
    await RedisNotificationChannel(client).publish("insert", 1)


async def test_publish_maps_redis_error(client):
    client.publish.side_effect = RedisConnectionError("refused")
    with pytest.raises(NotificationError) as exc_info:
        await RedisNotificationChannel(client).publish("insert", 4)
    assert exc_info.value.topic == "insert"
    assert exc_info.value.context.index == 4


async def test_close_releases_clients(client):
    await RedisValueCache(client).close()
    await RedisNotificationChannel(client).close()
    assert client.aclose.await_count == 2


def test_factory_builds_decoding_client_with_timeouts():
    redis_client = create_redis_client("cache.internal", 6380, timeout=3.0)
    kwargs = redis_client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6380
    assert kwargs["decode_responses"] is True
    assert kwargs["socket_timeout"] == 3.0
