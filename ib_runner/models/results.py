"""Result records produced by the cycle runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class ProgressSample:
    """Iteration count observed at a point inside the counting window."""

    iterations: int
    timestamp: datetime


@dataclass(frozen=True)
class PauseRecord:
    """One alignment sleep taken before a cycle."""

    second_of_minute: int
    sleep_ms: int


@dataclass
class CycleResult:
    """Outcome of a single timed cycle."""

    cycle_index: int
    cycle_count: int
    start: datetime
    end: datetime
    iteration_count: int = 0
    samples: list[ProgressSample] = field(default_factory=list)
    pauses: list[PauseRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ElapsedBreakdown:
    """Elapsed time split into days, hours, minutes, seconds and milliseconds."""

    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_milliseconds(cls, total_ms: int) -> "ElapsedBreakdown":
        if total_ms < 0:
            raise ValueError("elapsed milliseconds must be non-negative")
        days, rem = divmod(total_ms, MS_PER_DAY)
        hours, rem = divmod(rem, MS_PER_HOUR)
        minutes, rem = divmod(rem, MS_PER_MINUTE)
        seconds, ms = divmod(rem, MS_PER_SECOND)
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds, milliseconds=ms)

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "ElapsedBreakdown":
        # Clamp: a wall-clock step backwards must not produce negative fields.
        delta = end - start
        total_ms = max(0, delta // _ONE_MS)
        return cls.from_milliseconds(total_ms)

    @property
    def total_milliseconds(self) -> int:
        return (
            self.days * MS_PER_DAY
            + self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )


@dataclass(frozen=True)
class RunSummary:
    """Aggregate of all cycles in one invocation."""

    total_iterations: int
    cycle_count: int
    run_start: datetime
    run_end: datetime

    @property
    def average_iterations_per_cycle(self) -> int:
        if self.cycle_count <= 0:
            return 0
        return self.total_iterations // self.cycle_count

    @property
    def elapsed(self) -> ElapsedBreakdown:
        return ElapsedBreakdown.between(self.run_start, self.run_end)
