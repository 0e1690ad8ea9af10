"""Wall-clock and monotonic clock access.

The runner never calls ``time``/``datetime`` directly; it goes through a
``Clock`` so tests can drive the timing loop deterministically.
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Protocol


def current_wall_clock() -> datetime:
    """Return the current local wall-clock time."""
    return datetime.now()


def current_second_of_minute() -> int:
    """Return the seconds field (0-59) of the local wall-clock time."""
    return time.localtime().tm_sec % 60


class Clock(Protocol):
    """Time source used by the cycle runner."""

    def now(self) -> datetime: ...
    def monotonic(self) -> float: ...
    def second_of_minute(self) -> int: ...
    def sleep_ms(self, milliseconds: int) -> None: ...


class SystemClock:
    """Clock backed by the host's wall and monotonic clocks."""

    def now(self) -> datetime:
        return current_wall_clock()

    def monotonic(self) -> float:
        return time.monotonic()

    def second_of_minute(self) -> int:
        return current_second_of_minute()

    def sleep_ms(self, milliseconds: int) -> None:
        if milliseconds > 0:
            time.sleep(milliseconds / 1000.0)
