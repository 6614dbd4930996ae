"""Config settings – SchedulerSettings."""
from __future__ import annotations

import dataclasses
import logging

from cadence.config.settings.base import Settings
from cadence.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class SchedulerSettings(Settings):
    """Runtime knobs for :class:`~cadence.application.scheduler.JobScheduler`.

    Loaded from ``CADENCE_*`` environment variables by
    :class:`~cadence.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "CADENCE"

    execution_mode: str = "parallel"
    run_on_start: bool = False
    history_size: int = 100
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        from cadence.application.scheduler.job import ExecutionMode

        valid_modes = [mode.value for mode in ExecutionMode]
        if self.execution_mode not in valid_modes:
            raise InvalidSettingValueError(
                "execution_mode", self.execution_mode, f"expected one of {valid_modes}"
            )
        if self.history_size < 0:
            raise InvalidSettingValueError(
                "history_size", self.history_size, "must not be negative"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "unknown logging level"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["SchedulerSettings"]
