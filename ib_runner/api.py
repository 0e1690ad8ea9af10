"""Stable runner API surface."""

from ib_runner.engine.counting import CountingWindow, count_for_window
from ib_runner.engine.pause import align_start, pause_duration_ms
from ib_runner.engine.runner import CycleRunner
from ib_runner.interfaces import RunReporter
from ib_runner.models.config import RunConfig
from ib_runner.models.results import (
    CycleResult,
    ElapsedBreakdown,
    PauseRecord,
    ProgressSample,
    RunSummary,
)
from ib_runner.noop_reporter import NullReporter
from ib_runner.services.log_dirs import ensure_log_dirs
from ib_runner.services.log_writer import CycleLogWriter

__all__ = [
    "CountingWindow",
    "CycleLogWriter",
    "CycleResult",
    "CycleRunner",
    "ElapsedBreakdown",
    "NullReporter",
    "PauseRecord",
    "ProgressSample",
    "RunConfig",
    "RunReporter",
    "RunSummary",
    "align_start",
    "count_for_window",
    "ensure_log_dirs",
    "pause_duration_ms",
]
