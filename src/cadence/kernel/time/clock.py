"""Kernel time – Clock protocol + implementations.

``now()`` stamps when something happened; ``monotonic()`` measures how long
it took and never goes backwards.
"""
from __future__ import annotations

import time
from datetime import UTC, date, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def today(self) -> date: ...
    def timestamp(self) -> float: ...
    def monotonic(self) -> float: ...


class SystemClock:
    """Production clock backed by ``datetime.now(UTC)`` and ``time.monotonic``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        return datetime.now(UTC).date()

    def timestamp(self) -> float:
        return datetime.now(UTC).timestamp()

    def monotonic(self) -> float:
        return time.monotonic()


class FrozenClock:
    """Test clock pinned to a fixed point in time; only :meth:`advance` moves it."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed
        self._elapsed = 0.0

    def now(self) -> datetime:
        return self._fixed

    def today(self) -> date:
        return self._fixed.date()

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def monotonic(self) -> float:
        return self._elapsed

    def advance(self, **kwargs: int | float) -> None:
        """Advance both readings by the given ``timedelta`` kwargs."""
        delta = timedelta(**kwargs)
        self._fixed += delta
        self._elapsed += delta.total_seconds()


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
