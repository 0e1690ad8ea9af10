"""The timed counting loop measured by each cycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ib_common.clock import Clock
from ib_runner.models.results import ProgressSample


@dataclass(frozen=True)
class CountingWindow:
    """Raw output of one counting window."""

    start: datetime
    end: datetime
    iterations: int
    samples: list[ProgressSample]


def count_for_window(
    clock: Clock,
    window_seconds: float,
    sample_interval: int,
) -> CountingWindow:
    """Increment a counter until ``window_seconds`` of monotonic time elapse.

    The deadline is computed once from the monotonic clock, so wall-clock
    adjustments during the window do not stretch or shrink it. Every
    ``sample_interval``-th iteration records the count and the wall-clock
    time.
    """
    if window_seconds <= 0:
        raise ValueError("window_seconds must be positive")
    if sample_interval <= 0:
        raise ValueError("sample_interval must be positive")

    samples: list[ProgressSample] = []
    monotonic = clock.monotonic
    start = clock.now()
    deadline = monotonic() + window_seconds

    iterations = 0
    while True:
        iterations += 1
        if iterations % sample_interval == 0:
            samples.append(ProgressSample(iterations=iterations, timestamp=clock.now()))
        if monotonic() >= deadline:
            break

    end = clock.now()
    return CountingWindow(start=start, end=end, iterations=iterations, samples=samples)
