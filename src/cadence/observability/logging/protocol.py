"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """Minimal logger protocol – satisfied by a structlog bound logger."""

    def debug(self, event: str, **kw: Any) -> Any: ...
    def info(self, event: str, **kw: Any) -> Any: ...
    def warning(self, event: str, **kw: Any) -> Any: ...
    def error(self, event: str, **kw: Any) -> Any: ...
    def exception(self, event: str, **kw: Any) -> Any: ...
    def critical(self, event: str, **kw: Any) -> Any: ...


__all__ = ["Logger"]
