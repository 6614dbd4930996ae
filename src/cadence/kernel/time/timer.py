"""Kernel time – PeriodicTimer port and the asyncio-backed implementation.

A periodic timer fires a plain (synchronous) callback every ``period_ms``
milliseconds until its handle is cancelled.  The callback runs as a discrete
event-loop turn, so whatever it does before its first ``await`` cannot be
interleaved with another callback.
"""
from __future__ import annotations

import asyncio
import math
from typing import Callable, Protocol, runtime_checkable


class TimerHandle:
    """Token returned by :meth:`PeriodicTimer.arm`; pass it back to ``cancel``."""

    def __init__(self, period_ms: int, callback: Callable[[], None]) -> None:
        self.period_ms = period_ms
        self.callback = callback
        self.cancelled = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(period_ms={self.period_ms}, cancelled={self.cancelled})"


@runtime_checkable
class PeriodicTimer(Protocol):
    """Port: arm and cancel repeating callbacks."""

    def arm(self, period_ms: int, callback: Callable[[], None]) -> TimerHandle: ...
    def cancel(self, handle: TimerHandle) -> None: ...


class _AsyncioTimerHandle(TimerHandle):
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        period_ms: int,
        callback: Callable[[], None],
    ) -> None:
        super().__init__(period_ms, callback)
        self._loop = loop
        self._period_s = period_ms / 1000
        self._deadline = loop.time()
        self._scheduled: asyncio.TimerHandle | None = None

    def schedule_next(self) -> None:
        # Deadlines advance by whole periods so late wake-ups do not drift;
        # periods missed while the loop was blocked collapse into one firing.
        self._deadline += self._period_s
        now = self._loop.time()
        if self._deadline <= now:
            missed = math.floor((now - self._deadline) / self._period_s) + 1
            self._deadline += missed * self._period_s
        self._scheduled = self._loop.call_at(self._deadline, self._fire)

    def _fire(self) -> None:
        if self.cancelled:
            return
        self.schedule_next()
        self.callback()

    def cancel(self) -> None:
        self.cancelled = True
        if self._scheduled is not None:
            self._scheduled.cancel()
            self._scheduled = None


class AsyncioTimer:
    """:class:`PeriodicTimer` built on ``loop.call_at``.

    ``arm`` must be called while an event loop is running; the first firing
    happens one full period after arming.
    """

    def arm(self, period_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        loop = asyncio.get_running_loop()
        handle = _AsyncioTimerHandle(loop, period_ms, callback)
        handle.schedule_next()
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        if isinstance(handle, _AsyncioTimerHandle):
            handle.cancel()
        else:
            handle.cancelled = True


__all__ = ["AsyncioTimer", "PeriodicTimer", "TimerHandle"]
