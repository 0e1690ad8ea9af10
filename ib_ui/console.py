"""Rich-based console reporter used for all TTY output."""

from __future__ import annotations

from pathlib import Path
from typing import IO, TextIO

from rich.console import Console
from rich.theme import Theme

from ib_common.formatting import format_datetime, format_grouped
from ib_runner.interfaces import RunReporter
from ib_runner.models.results import CycleResult, PauseRecord, RunSummary
from ib_runner.services.records import render_elapsed

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "accent": "#3ea6ff",
    }
)

BANNER_RULE = "*" * 50
CYCLE_OPEN_RULE = "*" * 76
CYCLE_CLOSE_RULE = "*" * 44

BANNER_LINES = (
    "Iteration Bench",
    "Provides an informal assessment of operations per second on a given system",
    "Essentially how fast can Python code execute today",
    "Helps in building better estimates for capacity planning and design",
)

PROMPT_TEXT = "How many times you want the test to run?\nType number then <enter>:  "


class ConsoleReporter(RunReporter):
    """Plain-text progress on stdout, warnings and errors on stderr.

    Log text is printed with markup and highlighting disabled so what
    appears on screen matches the detail file byte for byte.
    """

    def __init__(self, stream: IO[str] | None = None, error_stream: IO[str] | None = None) -> None:
        self.console = Console(
            theme=THEME,
            file=stream,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        self.err_console = Console(
            theme=THEME,
            file=error_stream,
            stderr=error_stream is None,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _echo(self, text: str, *, end: str = "\n") -> None:
        self.console.print(text, end=end, markup=False)

    def show_warning(self, message: str) -> None:
        self.err_console.print(message, style="warning", markup=False)

    def show_error(self, message: str) -> None:
        self.err_console.print(message, style="error", markup=False)

    def show_banner(self) -> None:
        self._echo(BANNER_RULE)
        for line in BANNER_LINES:
            self._echo(line)
        self._echo(BANNER_RULE)

    def prompt_cycles(self, stdin: TextIO) -> str:
        """Print the cycle-count prompt and read one line from ``stdin``."""
        self._echo(PROMPT_TEXT, end="")
        return stdin.readline()

    def run_planned(self, cycle_count: int) -> None:
        self._echo(f"Running {cycle_count} test runs")

    def show_missing_dirs(self, missing: list[str]) -> None:
        self.show_error("Directories do not exist\nMissing:")
        for path in missing:
            self.show_error(path)

    # RunReporter

    def cycle_started(self, cycle_index: int, cycle_count: int) -> None:
        self._echo(CYCLE_OPEN_RULE)
        self._echo(f"Running Cycle {cycle_index:02d} of {cycle_count:02d}")
        self._echo(CYCLE_CLOSE_RULE)

    def paused(self, pause: PauseRecord) -> None:
        self._echo(f"Pausing for {pause.sleep_ms}ms")

    def ready(self, cycle_index: int, timestamp_text: str) -> None:
        self._echo(f"Ready to go ... {timestamp_text}")

    def cycle_finished(self, result: CycleResult, detail_path: Path, detail_text: str) -> None:
        self._echo(str(detail_path))
        self._echo(detail_text, end="")

    def run_finished(self, summary: RunSummary) -> None:
        self._echo(
            f"******\tSum: {format_grouped(summary.total_iterations)} operations across"
            f" {format_grouped(summary.cycle_count)} cycles *********\n"
        )
        self._echo(
            f"Average: {format_grouped(summary.average_iterations_per_cycle)}"
            " operations per second **********\n"
        )
        self._echo(
            f"Cycle started: {format_datetime(summary.run_start)}"
            f" ... Cycle ended: {format_datetime(summary.run_end)} **********"
        )
        self._echo(f"Time: {render_elapsed(summary.elapsed)}")
