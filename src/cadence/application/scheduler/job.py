"""Application scheduler – Job dataclass and ExecutionMode."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Awaitable, Callable

if TYPE_CHECKING:
    from cadence.application.scheduler.interval import IntervalToken

__all__ = ["ExecutionMode", "Job"]


class ExecutionMode(str, Enum):
    """How a scheduler runs the jobs whose ticks it accepts."""

    PARALLEL = "parallel"      # each job as its own asyncio task
    SEQUENTIAL = "sequential"  # one shared FIFO queue for every job


@dataclass(frozen=True)
class Job:
    """A named unit of asynchronous work run every ``interval``.

    The interval is only parsed when the scheduler starts, so a bad token
    surfaces from ``start()`` rather than from here.
    """

    name: str
    interval: IntervalToken | str
    execute: Callable[[], Awaitable[None]]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Job name must not be empty")
