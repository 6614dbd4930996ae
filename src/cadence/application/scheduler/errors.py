"""Application scheduler – error types."""
from __future__ import annotations

from cadence.config.validation import ConfigError
from cadence.kernel.errors import ApplicationError, ConflictError


class InvalidIntervalError(ConfigError):
    """An interval token cannot be turned into a positive period."""
    default_code = "invalid_interval"

    def __init__(self, interval: object, reason: str) -> None:
        super().__init__(
            f"Invalid interval {interval!r}: {reason}",
            detail={"interval": repr(interval)},
        )
        self.interval = interval
        self.reason = reason


class UnknownIntervalUnitError(InvalidIntervalError):
    """The interval's unit character is not one of ``m``, ``h`` or ``d``."""
    default_code = "unknown_interval_unit"

    def __init__(self, interval: object, unit: str) -> None:
        super().__init__(interval, f"unknown interval unit {unit!r}")
        self.unit = unit


class DuplicateJobError(ConflictError):
    """Two jobs handed to the same scheduler share a name."""
    default_code = "duplicate_job"

    def __init__(self, name: str) -> None:
        super().__init__(f"Job name '{name}' is used more than once", detail={"job": name})
        self.name = name


class SchedulerError(ApplicationError):
    """The scheduler was driven through an invalid lifecycle transition."""
    default_code = "scheduler_error"


class SchedulerAlreadyStartedError(SchedulerError):
    """``start()`` was called again without an intervening ``stop()``."""
    default_code = "scheduler_already_started"

    def __init__(self) -> None:
        super().__init__("Scheduler is already started; call stop() first")


__all__ = [
    "DuplicateJobError",
    "InvalidIntervalError",
    "SchedulerAlreadyStartedError",
    "SchedulerError",
    "UnknownIntervalUnitError",
]
