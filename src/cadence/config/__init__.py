"""Config – 12-factor settings, loaders, and validation errors."""

from cadence.config.settings import EnvSettingsLoader, SchedulerSettings, Settings, SettingsLoader
from cadence.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SchedulerSettings",
    "Settings",
    "SettingsLoader",
]
