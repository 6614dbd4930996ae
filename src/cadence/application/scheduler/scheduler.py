"""Application scheduler – JobScheduler, JobExecutedEvent and the Scheduler protocol."""
from __future__ import annotations

import asyncio
import functools
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

from cadence.application.scheduler.errors import DuplicateJobError, SchedulerAlreadyStartedError
from cadence.application.scheduler.interval import convert_interval_to_ms
from cadence.application.scheduler.job import ExecutionMode, Job
from cadence.application.scheduler.task_queue import SequentialTaskQueue
from cadence.kernel.time import AsyncioTimer, Clock, PeriodicTimer, SystemClock, TimerHandle
from cadence.observability.logging import Logger, get_logger

if TYPE_CHECKING:
    from cadence.config.settings import SchedulerSettings

__all__ = ["JobExecutedEvent", "JobScheduler", "Scheduler"]


@dataclass(frozen=True)
class JobExecutedEvent:
    """Event recorded after a job completes (successfully or not)."""

    job_name: str
    started_at: datetime
    duration_ms: float
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@runtime_checkable
class Scheduler(Protocol):
    """Port: run a fixed set of jobs on their intervals."""

    def start(self) -> None: ...
    def stop(self) -> None: ...
    def get_active_jobs(self) -> list[str]: ...


class JobScheduler:
    """Fire every job on its own period without ever overlapping a job with itself.

    Each job is either *idle* or *running*.  A tick on a running job is
    dropped.  A tick on an idle job marks it running at once and then, in
    ``parallel`` mode, starts it as a separate asyncio task, or, in
    ``sequential`` mode, appends it to a queue shared by all jobs.  The job
    goes back to idle when its ``execute()`` returns or raises.

    Parameters
    ----------
    jobs:
        Jobs to schedule; names must be unique.
    execution_mode:
        ``"parallel"`` (default) or ``"sequential"``; fixed for the lifetime
        of the scheduler.
    timer:
        :class:`~cadence.kernel.time.PeriodicTimer` that produces ticks.
        Defaults to :class:`~cadence.kernel.time.AsyncioTimer`.
    clock:
        Source of ``started_at`` timestamps for :class:`JobExecutedEvent`.
    logger:
        Structured logger; defaults to a structlog logger for this module.
    run_on_start:
        Also dispatch every job once as soon as ``start()`` arms its timer.
    history_size:
        How many :class:`JobExecutedEvent` records ``execution_log`` keeps.

    Raises
    ------
    DuplicateJobError
        Two jobs share a name.
    """

    def __init__(
        self,
        jobs: Sequence[Job],
        execution_mode: ExecutionMode | str = ExecutionMode.PARALLEL,
        *,
        timer: PeriodicTimer | None = None,
        clock: Clock | None = None,
        logger: Logger | None = None,
        run_on_start: bool = False,
        history_size: int = 100,
    ) -> None:
        self._jobs: tuple[Job, ...] = tuple(jobs)
        self._mode = ExecutionMode(execution_mode)
        self._timer: PeriodicTimer = timer or AsyncioTimer()
        self._clock: Clock = clock or SystemClock()
        self._log: Logger = logger or get_logger(__name__)
        self._run_on_start = run_on_start

        self._job_states: dict[str, bool] = {}
        for job in self._jobs:
            if job.name in self._job_states:
                raise DuplicateJobError(job.name)
            self._job_states[job.name] = False

        self._queue: SequentialTaskQueue | None = None
        if self._mode is ExecutionMode.SEQUENTIAL:
            self._queue = SequentialTaskQueue(logger=self._log)

        self._handles: list[TimerHandle] = []
        self._started = False
        self._tasks: set[asyncio.Task[None]] = set()
        self.execution_log: deque[JobExecutedEvent] = deque(maxlen=history_size)

    @classmethod
    def from_settings(
        cls,
        jobs: Sequence[Job],
        settings: SchedulerSettings,
        **kwargs: Any,
    ) -> JobScheduler:
        """Build a scheduler from :class:`~cadence.config.SchedulerSettings`."""
        return cls(
            jobs,
            settings.execution_mode,
            run_on_start=settings.run_on_start,
            history_size=settings.history_size,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Arm one repeating timer per job.

        Every interval is converted before any timer is armed, so an invalid
        interval raises here and leaves the scheduler stopped.
        """
        if self._started:
            raise SchedulerAlreadyStartedError()
        periods = [(job, convert_interval_to_ms(job.interval)) for job in self._jobs]
        self._log.info("scheduler_started", mode=self._mode.value, jobs=len(self._jobs))
        self._started = True
        for job, period_ms in periods:
            handle = self._timer.arm(period_ms, functools.partial(self._dispatch, job))
            self._handles.append(handle)
            if self._run_on_start:
                self._dispatch(job)

    def stop(self) -> None:
        """Cancel every timer.  Work already running or queued is left to finish."""
        for handle in self._handles:
            self._timer.cancel(handle)
        self._handles.clear()
        self._started = False
        self._log.info("scheduler_stopped")

    async def join(self) -> None:
        """Wait for every running and queued execution to finish."""
        while self._tasks or (self._queue is not None and self._queue.is_processing):
            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)
            if self._queue is not None:
                await self._queue.join()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_active_jobs(self) -> list[str]:
        """Names of jobs currently running or waiting in the queue."""
        return [name for name, running in self._job_states.items() if running]

    @property
    def is_running(self) -> bool:
        """True between ``start()`` and ``stop()``."""
        return self._started

    @property
    def execution_mode(self) -> ExecutionMode:
        return self._mode

    @property
    def jobs(self) -> tuple[Job, ...]:
        return self._jobs

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, job: Job) -> None:
        # Synchronous check-and-set: no other tick can run in between.
        if self._job_states[job.name]:
            self._log.warning("job_skipped_already_running", job=job.name)
            return
        self._job_states[job.name] = True

        if self._queue is None:
            self._log.info("job_dispatched", job=job.name, mode=self._mode.value)
            task = asyncio.get_running_loop().create_task(
                self._run(job), name=f"cadence-job:{job.name}"
            )
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        else:
            self._log.info("job_enqueued", job=job.name, mode=self._mode.value)
            self._queue.add(functools.partial(self._run, job))

    async def _run(self, job: Job) -> None:
        try:
            started_at = self._clock.now()
            t0 = self._clock.monotonic()
            error: str | None = None
            try:
                await job.execute()
            except Exception as exc:  # noqa: BLE001
                error = str(exc) or type(exc).__name__
                self._log.exception("job_failed", job=job.name)
            self.execution_log.append(
                JobExecutedEvent(
                    job_name=job.name,
                    started_at=started_at,
                    duration_ms=(self._clock.monotonic() - t0) * 1000,
                    error=error,
                )
            )
        except Exception:  # noqa: BLE001
            self._log.exception("job_bookkeeping_failed", job=job.name)
        finally:
            self._job_states[job.name] = False
