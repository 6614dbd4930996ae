"""Unit tests for kernel clock utilities."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from cadence.kernel.time import (
    Clock,
    FrozenClock,
    SystemClock,
    utc_now,
)


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        clk = SystemClock()
        result = clk.now()
        assert isinstance(result, datetime)
        assert result.utcoffset().total_seconds() == 0  # type: ignore[union-attr]

    def test_today_returns_date(self) -> None:
        result = SystemClock().today()
        assert isinstance(result, date)
        assert not isinstance(result, datetime)

    def test_timestamp_close_to_now(self) -> None:
        expected = datetime.now(UTC).timestamp()
        assert abs(SystemClock().timestamp() - expected) < 1.0


# ---------------------------------------------------------------------------
# FrozenClock
# ---------------------------------------------------------------------------


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def test_now_returns_fixed_time(self) -> None:
        clk = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()
        assert clk.now() == clk.now()

    def test_today_and_timestamp(self) -> None:
        clk = FrozenClock(self._fixed())
        assert clk.today() == date(2024, 6, 15)
        assert clk.timestamp() == self._fixed().timestamp()

    def test_advance_combined(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(days=1, hours=2, minutes=3)
        assert clk.now() == datetime(2024, 6, 16, 14, 3, 0, tzinfo=UTC)

    def test_multiple_advances_are_cumulative(self) -> None:
        clk = FrozenClock(self._fixed())
        before = clk.timestamp()
        clk.advance(seconds=10)
        clk.advance(seconds=20)
        assert clk.timestamp() == pytest.approx(before + 30)

    def test_frozen_clock_is_clock(self) -> None:
        clk: Clock = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()


class TestUtcNow:
    def test_close_to_system_time(self) -> None:
        now = datetime.now(UTC)
        result = utc_now()
        assert result.tzinfo is not None
        assert abs((result - now).total_seconds()) < 1.0


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("cadence.kernel.time")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing from cadence.kernel.time"


class TestMonotonic:
    def test_system_clock_never_goes_backwards(self) -> None:
        clk = SystemClock()
        first = clk.monotonic()
        assert clk.monotonic() >= first

    def test_frozen_clock_monotonic_follows_advance(self) -> None:
        clk = FrozenClock(datetime(2024, 6, 15, tzinfo=UTC))
        assert clk.monotonic() == 0.0
        clk.advance(seconds=1, milliseconds=500)
        assert clk.monotonic() == pytest.approx(1.5)
