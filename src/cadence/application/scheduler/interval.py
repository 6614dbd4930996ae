"""Application scheduler – interval tokens and their conversion to milliseconds."""
from __future__ import annotations

from enum import Enum

from cadence.application.scheduler.errors import InvalidIntervalError, UnknownIntervalUnitError

__all__ = ["IntervalToken", "convert_interval_to_ms"]

_UNIT_MS: dict[str, int] = {
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}


class IntervalToken(str, Enum):
    """Supported job periods: integer magnitude followed by ``m``, ``h`` or ``d``."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    ONE_HOUR = "1h"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"


def convert_interval_to_ms(interval: IntervalToken | str) -> int:
    """Convert an interval such as ``"5m"``, ``"1h"`` or ``"2d"`` into milliseconds.

    Raises
    ------
    UnknownIntervalUnitError
        The last character is not ``m``, ``h`` or ``d``.
    InvalidIntervalError
        The input is not a string, or its magnitude is not a positive integer.
    """
    if isinstance(interval, IntervalToken):
        token = interval.value
    elif isinstance(interval, str):
        token = interval
    else:
        raise InvalidIntervalError(interval, "expected a string such as '5m'")

    unit, magnitude = token[-1:], token[:-1]
    if unit not in _UNIT_MS:
        raise UnknownIntervalUnitError(interval, unit)
    if not (magnitude.isascii() and magnitude.isdigit()):
        raise InvalidIntervalError(interval, f"magnitude {magnitude!r} is not an integer")
    value = int(magnitude)
    if value == 0:
        raise InvalidIntervalError(interval, "period must be greater than zero")
    return value * _UNIT_MS[unit]
