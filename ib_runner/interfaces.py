"""Interfaces the runner uses to talk to presentation layers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ib_runner.models.results import CycleResult, PauseRecord, RunSummary


class RunReporter(Protocol):
    """Callbacks invoked by the cycle runner to surface progress."""

    def cycle_started(self, cycle_index: int, cycle_count: int) -> None: ...
    def paused(self, pause: PauseRecord) -> None: ...
    def ready(self, cycle_index: int, timestamp_text: str) -> None: ...
    def cycle_finished(self, result: CycleResult, detail_path: Path, detail_text: str) -> None: ...
    def run_finished(self, summary: RunSummary) -> None: ...
