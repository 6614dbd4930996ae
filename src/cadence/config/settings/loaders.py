"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from cadence.config.settings.base import Settings
from cadence.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    A field ``history_size`` on a class with ``_prefix = "CADENCE"`` is read
    from ``CADENCE_HISTORY_SIZE``.  Fields without a default must be present.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            lowered = value.strip().lower()
            if lowered in _TRUTHY:
                return True
            if lowered in _FALSY:
                return False
            raise InvalidSettingValueError(key, value, "expected a boolean")
        if type_hint is int or type_hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(key, value, "expected an integer") from exc
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
