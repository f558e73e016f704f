"""Startup Resilience Coordinator: gates readiness on a reachable store and an existing table.

Invariants:
    - Liveness is probed at most max_attempts times, with retry_delay between attempts
    - The first successful probe ends the loop; no sleep after the final failure
    - Schema creation runs once after a successful probe and is never retried
    - Any failure ends in StartupError; the caller must not start serving

Design Decisions:
    - sleep is injectable so tests can observe spacing without waiting
"""

import asyncio
import logging
from typing import Awaitable, Callable

from values_service.core.errors import DatabaseError, StartupError
from values_service.core.repository_protocols import ValueStore

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class StartupCoordinator:
    """Blocks until the durable store answers and the values table exists."""

    def __init__(
        self,
        store: ValueStore,
        max_attempts: int = 10,
        retry_delay_ms: int = 2000,
        sleep: Sleep = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.max_attempts = max_attempts
        self.retry_delay_ms = retry_delay_ms
        self._sleep = sleep

    async def run(self) -> int:
        """Wait for the store, then ensure the schema. Returns attempts used."""
        attempts = await self._wait_for_store()
        try:
            await self.store.ensure_schema()
        except DatabaseError as e:
            logger.critical(f"Schema creation failed: {e.message}")
            raise StartupError(
                f"Could not create values table: {e.message}", attempts,
            ) from e
        return attempts

    async def _wait_for_store(self) -> int:
        for attempt in range(1, self.max_attempts + 1):
            try:
                await self.store.ping()
            except DatabaseError as e:
                logger.warning(
                    f"Waiting for Postgres... ({attempt}/{self.max_attempts}): "
                    f"{e.message}",
                    extra={"attempt": attempt, "max_attempts": self.max_attempts},
                )
                if attempt < self.max_attempts:
                    await self._sleep(self.retry_delay_ms / 1000)
                continue
            logger.info("Connected to Postgres", extra={"attempt": attempt})
            return attempt
        logger.critical(
            f"Could not connect to Postgres after {self.max_attempts} attempts",
            extra={"max_attempts": self.max_attempts},
        )
        raise StartupError(
            f"Could not connect to Postgres after {self.max_attempts} attempts",
            self.max_attempts,
        )
