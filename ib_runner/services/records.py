"""Text layouts of the detail and summary logs.

Summary-log blocks carry raw integers so they stay machine-greppable;
grouped numbers appear only in the detail log and on the console.
"""

from __future__ import annotations

from datetime import datetime

from ib_common.formatting import format_datetime, format_file_timestamp, format_grouped
from ib_runner.models.results import (
    CycleResult,
    ElapsedBreakdown,
    PauseRecord,
    ProgressSample,
    RunSummary,
)

RUN_HEADER_RULE = "*" * 33
RUN_HEADER_CLOSE = "*" * 28
CYCLE_BLOCK_RULE = "*" * 60
SUMMARY_SEPARATOR = "_" * 33


def detail_file_name(started: datetime, cycle_count: int, cycle_index: int) -> str:
    """Return ``T <timestamp> <count> - <index>.txt`` with two-digit numbering."""
    return f"T {format_file_timestamp(started)} {cycle_count:02d} - {cycle_index:02d}.txt"


def pause_line(pause: PauseRecord) -> str:
    return f"Paused for {pause.sleep_ms}ms"


def progress_line(cycle_index: int, cycle_count: int, sample: ProgressSample) -> str:
    return (
        f"Cycle {format_grouped(cycle_index)} of {format_grouped(cycle_count)}"
        f" Iteration {format_grouped(sample.iterations)} {format_datetime(sample.timestamp)}"
    )


def iterations_line(result: CycleResult) -> str:
    return (
        f"Iterations {format_grouped(result.iteration_count)}"
        f" Start {format_datetime(result.start)} ... End {format_datetime(result.end)}"
    )


def render_detail(result: CycleResult) -> str:
    """Render a cycle's detail log: pauses, progress samples, then the trailer."""
    lines = [pause_line(pause) for pause in result.pauses]
    lines.extend(
        progress_line(result.cycle_index, result.cycle_count, sample)
        for sample in result.samples
    )
    lines.append(iterations_line(result))
    return "".join(f"{line}\n" for line in lines)


def render_run_header(cycle_count: int, started: datetime) -> str:
    return (
        f"{RUN_HEADER_RULE}\n"
        f"Cycles: {cycle_count}\t{format_datetime(started)}\n"
        f"{RUN_HEADER_CLOSE}\n"
    )


def render_cycle_block(result: CycleResult) -> str:
    return (
        f"***\t{result.cycle_index}\t{CYCLE_BLOCK_RULE}\n"
        f"{format_datetime(result.start)}\n"
        f"{result.iteration_count}\n"
        f"{format_datetime(result.end)}\n"
        "\n"
    )


def render_elapsed(elapsed: ElapsedBreakdown) -> str:
    return (
        f"{elapsed.days} days {elapsed.hours} hrs {elapsed.minutes} min"
        f" {elapsed.seconds} sec {elapsed.milliseconds} ms"
    )


def render_summary_block(summary: RunSummary) -> str:
    return (
        f"******\tSum: {summary.total_iterations} operations across"
        f" {summary.cycle_count} cycles *********\n"
        f"Cycle started: {format_datetime(summary.run_start)}"
        f" ... Cycle ended: {format_datetime(summary.run_end)} **********\n"
        f"Average: {summary.average_iterations_per_cycle} operations per second **********\n"
        f"Time: {render_elapsed(summary.elapsed)}\n"
        f"{SUMMARY_SEPARATOR}\n"
        "\n"
    )
