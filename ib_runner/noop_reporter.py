"""No-op implementation of RunReporter for headless execution."""

from __future__ import annotations

from pathlib import Path

from ib_runner.interfaces import RunReporter
from ib_runner.models.results import CycleResult, PauseRecord, RunSummary


class NullReporter(RunReporter):
    """Reporter that discards all output."""

    def cycle_started(self, cycle_index: int, cycle_count: int) -> None:
        pass

    def paused(self, pause: PauseRecord) -> None:
        pass

    def ready(self, cycle_index: int, timestamp_text: str) -> None:
        pass

    def cycle_finished(self, result: CycleResult, detail_path: Path, detail_text: str) -> None:
        pass

    def run_finished(self, summary: RunSummary) -> None:
        pass
