import locale
import logging
from collections import defaultdict
from datetime import datetime, timedelta

import pytest
from rich.console import Console
from rich.table import Table

KNOWN_MARKERS = {"unit_common", "unit_runner", "unit_ui", "e2e", "slow"}

IB_ENV_VARS = (
    "IB_BASE_DIR",
    "IB_WINDOW_SECONDS",
    "IB_SAMPLE_INTERVAL",
    "IB_ALIGNMENT_PAUSE",
    "IB_LOG_LEVEL",
    "IB_LOG_JSON",
    "IB_LOG_FILE",
)


class FakeClock:
    """Deterministic clock for driving the counting loop.

    Every ``monotonic()`` call advances time by ``step`` seconds; ``now()``
    follows the same timeline plus any sleeps. ``seconds`` feeds successive
    ``second_of_minute()`` answers, then ``default_second`` is repeated.
    """

    def __init__(
        self,
        start: datetime = datetime(2025, 3, 16, 7, 14, 3),
        step: float = 1 / 128,
        seconds: list[int] | None = None,
        default_second: int = 3,
    ) -> None:
        self.start = start
        self.step = step
        self.seconds = list(seconds or [])
        self.default_second = default_second
        self.monotonic_calls = 0
        self.sleeps: list[int] = []
        self._slept = timedelta(0)

    def monotonic(self) -> float:
        self.monotonic_calls += 1
        return self.monotonic_calls * self.step

    def now(self) -> datetime:
        return self.start + timedelta(seconds=self.monotonic_calls * self.step) + self._slept

    def second_of_minute(self) -> int:
        if self.seconds:
            return self.seconds.pop(0)
        return self.default_second

    def sleep_ms(self, milliseconds: int) -> None:
        self.sleeps.append(milliseconds)
        self._slept += timedelta(milliseconds=milliseconds)


@pytest.fixture
def fake_clock():
    """Factory fixture building FakeClock instances."""
    return FakeClock


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    for name in IB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def c_numeric_locale():
    """Pin LC_NUMERIC to C so grouped output uses the comma fallback."""
    previous = locale.setlocale(locale.LC_NUMERIC)
    locale.setlocale(locale.LC_NUMERIC, "C")
    yield
    locale.setlocale(locale.LC_NUMERIC, previous)


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Print pass/fail statistics grouped by marker at the end of the session."""
    _ = (exitstatus, config)
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        for report in terminalreporter.stats.get(outcome, []):
            # Count the test call, or setup-time skips.
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
            f"{stats['duration']:.2f}",
        )

    console = Console()
    console.print("\n")
    console.print(table)
