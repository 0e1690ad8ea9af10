"""Alignment pause taken before each counting window.

Avoids starting a measurement on a second-of-minute that is a multiple of
``PAUSE_SECOND_MODULUS``. The sleep length is derived from the sampled
second itself, so the total delay is intentionally approximate: each sleep
moves the clock, the clock is re-sampled, and the loop repeats until the
second is no longer a multiple. A sample at second 0 yields a zero-length
sleep, which degrades into polling until the second advances.
"""

from __future__ import annotations

import logging
from typing import Callable

from ib_common.clock import Clock
from ib_runner.models.results import PauseRecord

logger = logging.getLogger(__name__)

PAUSE_SECOND_MODULUS = 8
PAUSE_MS_PER_SECOND = 100


def pause_duration_ms(second_of_minute: int) -> int | None:
    """Return the sleep length for ``second_of_minute`` or None when no pause is due."""
    if second_of_minute % PAUSE_SECOND_MODULUS != 0:
        return None
    return second_of_minute * PAUSE_MS_PER_SECOND


def align_start(
    clock: Clock,
    on_pause: Callable[[PauseRecord], None] | None = None,
) -> list[PauseRecord]:
    """Sleep until the current second is not a multiple of the modulus.

    Every pause is reported to ``on_pause`` before sleeping and returned in
    chronological order.
    """
    pauses: list[PauseRecord] = []
    while True:
        second = clock.second_of_minute()
        sleep_ms = pause_duration_ms(second)
        if sleep_ms is None:
            return pauses
        record = PauseRecord(second_of_minute=second, sleep_ms=sleep_ms)
        pauses.append(record)
        logger.debug("Alignment pause at second %d for %dms", second, sleep_ms)
        if on_pause is not None:
            on_pause(record)
        clock.sleep_ms(sleep_ms)
