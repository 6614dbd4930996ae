"""Testing fakes – RecordingLogger."""
from __future__ import annotations

import dataclasses
import sys
from typing import Any


@dataclasses.dataclass(frozen=True)
class RecordedLog:
    level: str
    event: str
    fields: dict[str, Any]
    exc_info: BaseException | None = None


class RecordingLogger:
    """In-memory :class:`~cadence.observability.logging.Logger` that keeps every call."""

    def __init__(self) -> None:
        self.records: list[RecordedLog] = []

    def _record(self, level: str, event: str, kw: dict[str, Any], exc: BaseException | None = None) -> None:
        self.records.append(RecordedLog(level=level, event=event, fields=dict(kw), exc_info=exc))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, kw)

    def exception(self, event: str, **kw: Any) -> None:
        self._record("error", event, kw, sys.exc_info()[1])

    def critical(self, event: str, **kw: Any) -> None:
        self._record("critical", event, kw)

    def events(self, level: str | None = None) -> list[str]:
        """Event names in call order, optionally only those at *level*."""
        return [r.event for r in self.records if level is None or r.level == level]


__all__ = ["RecordedLog", "RecordingLogger"]
