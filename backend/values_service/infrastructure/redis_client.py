"""Redis Connection Factory: builds the asyncio clients shared by cache and channel.

Invariants:
    - Clients decode responses to str (hash fields and values are text)
    - Socket connect and read timeouts come from settings
    - Cache and publisher get separate clients, as a subscriber-capable
      connection is never reused for publishing
"""

import redis.asyncio as redis


def create_redis_client(host: str, port: int, timeout: float = 10.0) -> redis.Redis:
    """Create an asyncio Redis client with its own connection pool."""
    return redis.Redis(
        host=host,
        port=port,
        socket_timeout=timeout,
        socket_connect_timeout=timeout,
        decode_responses=True,
    )
