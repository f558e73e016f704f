"""Detached Tasks: fire-and-forget side effects whose outcome is only logged.

Invariants:
    - Every spawned task is strongly referenced until it finishes
    - A failed task is logged with its name and index, never re-raised
    - drain() waits for everything pending at the time of the call

Design Decisions:
    - Done-callback logging over awaiting: the response path never observes results
"""

import asyncio
import logging
from typing import Coroutine

logger = logging.getLogger(__name__)


class DetachedTaskSet:
    """Tracks background coroutines spawned on behalf of already-answered requests."""

    def __init__(self):
        self._tasks: set[asyncio.Task] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def spawn(
        self, coro: Coroutine, *, name: str, index: int | None = None,
    ) -> asyncio.Task:
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(lambda t: self._finish(t, index))
        return task

    def _finish(self, task: asyncio.Task, index: int | None) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning(
                f"Side effect {task.get_name()} cancelled",
                extra={"operation": task.get_name(), "index": index},
            )
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                f"Side effect {task.get_name()} failed: {exc}",
                extra={
                    "operation": task.get_name(),
                    "index": index,
                    "error_code": getattr(exc, "code", None),
                },
                exc_info=exc,
            )

    async def drain(self) -> None:
        """Wait for all pending side effects; their failures are already logged."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
