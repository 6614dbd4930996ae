"""Config settings – 12-factor env-based configuration."""
from cadence.config.settings.base import Settings
from cadence.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from cadence.config.settings.scheduler import SchedulerSettings

__all__ = ["EnvSettingsLoader", "SchedulerSettings", "Settings", "SettingsLoader"]
