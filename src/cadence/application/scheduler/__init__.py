"""Application scheduler – recurring jobs, interval parsing and the sequential queue."""
from cadence.application.scheduler.errors import (
    DuplicateJobError,
    InvalidIntervalError,
    SchedulerAlreadyStartedError,
    SchedulerError,
    UnknownIntervalUnitError,
)
from cadence.application.scheduler.interval import IntervalToken, convert_interval_to_ms
from cadence.application.scheduler.job import ExecutionMode, Job
from cadence.application.scheduler.scheduler import JobExecutedEvent, JobScheduler, Scheduler
from cadence.application.scheduler.task_queue import SequentialTaskQueue, Task

__all__ = [
    "DuplicateJobError",
    "ExecutionMode",
    "IntervalToken",
    "InvalidIntervalError",
    "Job",
    "JobExecutedEvent",
    "JobScheduler",
    "Scheduler",
    "SchedulerAlreadyStartedError",
    "SchedulerError",
    "SequentialTaskQueue",
    "Task",
    "UnknownIntervalUnitError",
    "convert_interval_to_ms",
]
