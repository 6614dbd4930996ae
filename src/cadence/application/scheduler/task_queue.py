"""Application scheduler – SequentialTaskQueue (single-consumer FIFO executor)."""
from __future__ import annotations

import asyncio
from collections import deque
from typing import Awaitable, Callable

from cadence.observability.logging import Logger, get_logger

__all__ = ["SequentialTaskQueue", "Task"]

Task = Callable[[], Awaitable[None]]


class SequentialTaskQueue:
    """Run queued coroutine functions one at a time, in the order they were added.

    ``add`` never waits for the task.  A task that raises is logged and the
    queue moves on to the next one; nothing is reported back to the caller.
    There is no upper bound on the number of pending tasks.
    """

    def __init__(self, *, logger: Logger | None = None) -> None:
        self._pending: deque[Task] = deque()
        self._processing = False
        self._drain_task: asyncio.Task[None] | None = None
        self._log = logger or get_logger(__name__)

    def add(self, task: Task) -> None:
        """Append *task* and start draining if nothing is draining yet."""
        self._pending.append(task)
        if self._processing:
            return
        # Flag is raised before the drain task first runs, so a second add in
        # the same loop turn joins this drain instead of starting another.
        self._processing = True
        self._drain_task = asyncio.get_running_loop().create_task(self._drain())

    async def _drain(self) -> None:
        try:
            while self._pending:
                task = self._pending.popleft()
                try:
                    await task()
                except Exception:  # noqa: BLE001
                    self._log.exception("queue_task_failed")
        finally:
            self._processing = False

    async def join(self) -> None:
        """Wait until every pending task has run."""
        while self._processing and self._drain_task is not None:
            await asyncio.shield(self._drain_task)

    @property
    def pending(self) -> int:
        """Number of tasks waiting to start (the running one is not counted)."""
        return len(self._pending)

    @property
    def is_processing(self) -> bool:
        return self._processing

    def __len__(self) -> int:
        return len(self._pending)
