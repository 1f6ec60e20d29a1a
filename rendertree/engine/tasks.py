"""Task queue - deferred work spawned during one render pass."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from rendertree.engine.context import Context, create_context, use_context
from rendertree.exceptions import DeferredRenderError, MissingContext, RenderError

log = logging.getLogger(__name__)


class TaskQueue:
    """Collects tasks registered while rendering and drains them.

    There is no ordering or throttling: each task closes over the exact slot
    it fills, so settlement order does not affect the output.
    """

    def __init__(self) -> None:
        self._pending: list[asyncio.Task] = []

    def __len__(self) -> int:
        return len(self._pending)

    def enqueue(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        """Schedule ``coro`` on the running loop and track it."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise RenderError(
                "Deferred values require a running event loop; use render_async()"
            ) from None

        task = loop.create_task(coro)
        self._pending.append(task)
        log.debug("Enqueued render task %s (%d outstanding)", task.get_name(), len(self._pending))
        return task

    async def wait(self) -> None:
        """Wait for every task enqueued so far.

        Drains one generation only: tasks enqueued by the completion of
        these tasks stay outstanding. Use settle() to reach a fixed point.

        Raises:
            DeferredRenderError: If any task of the generation failed. Every
                task of the generation has finished by then.
        """
        batch, self._pending = self._pending, []
        if not batch:
            return

        results = await asyncio.gather(*batch, return_exceptions=True)
        errors = [r for r in results if isinstance(r, BaseException)]
        log.debug("Drained %d render task(s), %d failed", len(batch), len(errors))

        if errors:
            log.warning("%d deferred render task(s) failed", len(errors))
            raise DeferredRenderError(errors) from errors[0]

    async def settle(self) -> None:
        """Drain generations until no task is outstanding."""
        generation = 0
        while self._pending:
            generation += 1
            log.debug("Settling generation %d", generation)
            await self.wait()

    async def cancel(self) -> int:
        """Cancel every outstanding task and wait for them to finish.

        Returns:
            Number of tasks cancelled
        """
        count = 0
        while self._pending:
            batch, self._pending = self._pending, []
            for task in batch:
                task.cancel()
            await asyncio.gather(*batch, return_exceptions=True)
            count += len(batch)
        return count


TaskQueueContext: Context[TaskQueue | None] = create_context(None, name="task_queue")


def current_queue() -> TaskQueue:
    """Return the provided task queue, or raise MissingContext."""
    queue = use_context(TaskQueueContext)
    if queue is None:
        raise MissingContext(TaskQueueContext)
    return queue
