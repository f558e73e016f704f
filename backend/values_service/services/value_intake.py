"""Request Intake Service: accepts an index and fans it out to cache, channel and store.

Invariants:
    - Validation is the only blocking step; a rejected index has no side effects
    - Cache placeholder, publish and persist are each spawned as detached tasks
    - submit() returns once all three are initiated, never after they complete
    - A failing side effect is logged and does not roll back the others
    - Read paths pass adapter results through; adapter errors propagate to the caller
"""

import logging

from values_service.core.domain_types import INSERT_TOPIC, Index, parse_index
from values_service.core.repository_protocols import (
    NotificationChannel, ValueCache, ValueStore,
)
from values_service.services.detached_tasks import DetachedTaskSet

logger = logging.getLogger(__name__)


class ValueIntakeService:
    """Composes the three backing-service adapters per submitted index."""

    def __init__(
        self,
        store: ValueStore,
        cache: ValueCache,
        channel: NotificationChannel,
        tasks: DetachedTaskSet | None = None,
    ):
        self.store = store
        self.cache = cache
        self.channel = channel
        self.tasks = tasks if tasks is not None else DetachedTaskSet()

    def submit(self, raw_index: object) -> Index:
        """Validate and start the intake side effects. Raises on rejection only."""
        index = parse_index(raw_index)
        self.tasks.spawn(
            self.cache.set_placeholder(index), name="cache_placeholder", index=index,
        )
        self.tasks.spawn(
            self.channel.publish(INSERT_TOPIC, index), name="publish", index=index,
        )
        self.tasks.spawn(
            self.store.record_request(index), name="persist", index=index,
        )
        logger.info("Index accepted", extra={"index": index})
        return index

    async def all_values(self) -> list[dict]:
        return await self.store.list_all()

    async def current_values(self) -> dict[str, str]:
        return await self.cache.read_all()

    async def drain(self) -> None:
        await self.tasks.drain()
