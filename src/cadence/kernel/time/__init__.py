"""Kernel time – Clock and PeriodicTimer ports + implementations."""
from cadence.kernel.time.apscheduler import APSchedulerTimer
from cadence.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now
from cadence.kernel.time.timer import AsyncioTimer, PeriodicTimer, TimerHandle

__all__ = [
    "APSchedulerTimer",
    "AsyncioTimer",
    "Clock",
    "FrozenClock",
    "PeriodicTimer",
    "SystemClock",
    "TimerHandle",
    "utc_now",
]
