"""Boundary Protocols: contracts between the intake core and the backing services.

Invariants:
    - Services and the startup coordinator depend on these Protocols only
    - Implementations live in infrastructure/ and are injected at startup
    - Every method is async because every implementation does network IO

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes need no base class
"""

from typing import Protocol


class ValueStore(Protocol):
    """Durable, append-only record of every accepted index."""
    async def ping(self) -> None: ...
    async def ensure_schema(self) -> None: ...
    async def record_request(self, index: int) -> None: ...
    async def list_all(self) -> list[dict]: ...


class ValueCache(Protocol):
    """Latest-known value per index, written by intake and by the worker."""
    async def ping(self) -> None: ...
    async def set_placeholder(self, index: int) -> None: ...
    async def read_all(self) -> dict[str, str]: ...


class NotificationChannel(Protocol):
    """Fire-and-forget broadcast to whichever workers are subscribed."""
    async def publish(self, topic: str, index: int) -> None: ...
