"""Kernel time – APSchedulerTimer (requires the ``apscheduler`` extra)."""
from __future__ import annotations

import itertools
from typing import Any, Callable

from cadence.kernel.time.timer import TimerHandle

__all__ = ["APSchedulerTimer"]


def _require_apscheduler() -> Any:
    try:
        import apscheduler  # noqa: PLC0415
        return apscheduler
    except ImportError as exc:
        raise ImportError(
            "APScheduler 3.x is required. "
            "Install it with: pip install 'cadence[apscheduler]'"
        ) from exc


class _APSchedulerHandle(TimerHandle):
    def __init__(self, period_ms: int, callback: Callable[[], None], job: Any) -> None:
        super().__init__(period_ms, callback)
        self.job = job


class APSchedulerTimer:
    """:class:`~cadence.kernel.time.PeriodicTimer` backed by APScheduler's ``AsyncIOScheduler``.

    Each armed callback becomes an interval job with ``coalesce=True``, so
    runs missed while the loop was busy collapse into one.  The callback is
    wrapped in a coroutine function, which the asyncio executor runs on the
    event loop rather than in a worker thread.

    The underlying scheduler is started on the first ``arm`` (an event loop
    must be running) and shut down by :meth:`shutdown`.
    """

    def __init__(self, scheduler: Any | None = None) -> None:
        self._scheduler = scheduler
        self._ids = itertools.count()

    def _get_scheduler(self) -> Any:
        if self._scheduler is None:
            _require_apscheduler()
            from apscheduler.schedulers.asyncio import AsyncIOScheduler  # noqa: PLC0415
            self._scheduler = AsyncIOScheduler()
        if not self._scheduler.running:
            self._scheduler.start()
        return self._scheduler

    def arm(self, period_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        scheduler = self._get_scheduler()
        from apscheduler.triggers.interval import IntervalTrigger  # noqa: PLC0415

        async def _tick() -> None:
            callback()

        job = scheduler.add_job(
            _tick,
            IntervalTrigger(seconds=period_ms / 1000),
            id=f"cadence-timer-{next(self._ids)}",
            coalesce=True,
            max_instances=1,
            misfire_grace_time=None,
        )
        return _APSchedulerHandle(period_ms, callback, job)

    def cancel(self, handle: TimerHandle) -> None:
        if handle.cancelled:
            return
        handle.cancelled = True
        if isinstance(handle, _APSchedulerHandle) and self._scheduler is not None:
            self._scheduler.remove_job(handle.job.id)

    def shutdown(self) -> None:
        """Stop the underlying scheduler without waiting for running jobs."""
        if self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
