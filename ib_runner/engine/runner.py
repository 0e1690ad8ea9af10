"""Cycle runner: orchestrates timed cycles and persists their logs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ib_common.clock import Clock, SystemClock
from ib_common.errors import DetailLogError
from ib_common.formatting import format_datetime
from ib_runner.engine.counting import count_for_window
from ib_runner.engine.pause import align_start
from ib_runner.interfaces import RunReporter
from ib_runner.models.config import RunConfig
from ib_runner.models.results import CycleResult, PauseRecord, RunSummary
from ib_runner.noop_reporter import NullReporter
from ib_runner.services.log_writer import CycleLogWriter
from ib_runner.services.records import (
    detail_file_name,
    render_cycle_block,
    render_detail,
    render_run_header,
    render_summary_block,
)


logger = logging.getLogger(__name__)


class CycleRunner:
    """Run ``config.cycle_count`` timed cycles and produce a RunSummary.

    Expects the log directories to exist already (see
    ``ib_runner.services.log_dirs.ensure_log_dirs``).
    """

    def __init__(
        self,
        config: RunConfig,
        *,
        writer: CycleLogWriter | None = None,
        reporter: RunReporter | None = None,
        clock: Clock | None = None,
        on_cycle: Callable[[CycleResult], None] | None = None,
    ) -> None:
        self.config = config
        self.writer = writer or CycleLogWriter(config.detail_dir, config.summary_log_path)
        self.reporter = reporter or NullReporter()
        self.clock = clock or SystemClock()
        self._on_cycle = on_cycle

    def run(self) -> RunSummary:
        """Execute every cycle, then append and report the run summary.

        Raises:
            SummaryLogError: when the summary log cannot be appended; the
                remaining cycles are not run.
        """
        cycle_count = self.config.cycle_count
        run_start = self.clock.now()
        self.writer.append_summary(render_run_header(cycle_count, run_start))
        logger.info("Starting %d cycle(s) of %.3fs", cycle_count, self.config.window_seconds)

        total_iterations = 0
        for cycle_index in range(1, cycle_count + 1):
            result = self.run_cycle(cycle_index)
            total_iterations += result.iteration_count

        summary = RunSummary(
            total_iterations=total_iterations,
            cycle_count=cycle_count,
            run_start=run_start,
            run_end=self.clock.now(),
        )
        self.writer.append_summary(render_summary_block(summary))
        logger.info(
            "Run finished: %d iterations across %d cycle(s)",
            summary.total_iterations,
            summary.cycle_count,
        )
        self.reporter.run_finished(summary)
        return summary

    def run_cycle(self, cycle_index: int) -> CycleResult:
        """Pause for alignment, count for one window, then persist the cycle."""
        cycle_count = self.config.cycle_count
        self.reporter.cycle_started(cycle_index, cycle_count)
        file_name = detail_file_name(self.clock.now(), cycle_count, cycle_index)

        pauses: list[PauseRecord] = []
        if self.config.alignment_pause:
            pauses = align_start(self.clock, on_pause=self.reporter.paused)
        self.reporter.ready(cycle_index, format_datetime(self.clock.now()))

        window = count_for_window(
            self.clock,
            self.config.window_seconds,
            self.config.sample_interval,
        )
        result = CycleResult(
            cycle_index=cycle_index,
            cycle_count=cycle_count,
            start=window.start,
            end=window.end,
            iteration_count=window.iterations,
            samples=window.samples,
            pauses=pauses,
        )

        detail_text = render_detail(result)
        detail_path = self._write_detail(file_name, detail_text)
        self.reporter.cycle_finished(result, detail_path, detail_text)
        self.writer.append_summary(render_cycle_block(result))
        logger.debug(
            "Cycle %d/%d counted %d iterations",
            cycle_index,
            cycle_count,
            result.iteration_count,
        )

        if self._on_cycle is not None:
            self._on_cycle(result)
        return result

    def _write_detail(self, file_name: str, text: str) -> Path:
        try:
            return self.writer.write_detail(file_name, text)
        except DetailLogError as exc:
            # The cycle still counts toward the summary.
            logger.warning("%s; continuing run", exc)
            return self.writer.detail_dir / file_name
