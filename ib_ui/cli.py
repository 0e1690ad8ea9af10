"""
Command-line interface for iteration-bench.

Runs the timed counting cycles, writing detail logs to ``CycleLogDetail/``
and appending to ``CycleLog/Iteration.txt`` under the base directory.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from ib_common.api import (
    LogDirectoryError,
    SummaryLogError,
    configure_logging,
    use_host_locale,
)
from ib_runner.api import CycleRunner, RunConfig, ensure_log_dirs
from ib_ui.console import ConsoleReporter
from ib_ui.cycle_input import resolve_cycle_count

logger = logging.getLogger(__name__)

app = typer.Typer(help="Estimate single-core operations per second with timed counting cycles.", no_args_is_help=True)


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Render diagnostics as JSON lines."),
) -> None:
    """Global options shared by every command."""
    configure_logging(debug=debug, json=True if json_logs else None, force=True)


@app.command("run")
def run_command(
    cycles: Optional[str] = typer.Option(
        None,
        "--cycles",
        "-n",
        help="Number of cycles; read from standard input when omitted.",
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-d",
        help="Directory that receives CycleLog/ and CycleLogDetail/ (default: cwd).",
    ),
    window: Optional[float] = typer.Option(
        None,
        "--window",
        min=0.001,
        help="Counting window per cycle in seconds.",
    ),
    sample_interval: Optional[int] = typer.Option(
        None,
        "--sample-interval",
        min=1,
        help="Record a progress sample every N iterations.",
    ),
    no_pause: bool = typer.Option(
        False,
        "--no-pause",
        help="Skip the alignment pause before each cycle.",
    ),
) -> None:
    """Run the benchmark and append its results to the summary log."""
    reporter = ConsoleReporter()
    use_host_locale()

    try:
        config = RunConfig.from_env(
            base_dir=base_dir,
            window_seconds=window,
            sample_interval=sample_interval,
            alignment_pause=False if no_pause else None,
        )
    except ValidationError as exc:
        reporter.show_error(f"Invalid configuration: {exc}")
        raise typer.Exit(2)
    try:
        ensure_log_dirs(config)
    except LogDirectoryError as exc:
        reporter.show_missing_dirs(exc.context.get("missing", []))
        raise typer.Exit(exc.exit_code)

    reporter.show_banner()
    raw = cycles if cycles is not None else reporter.prompt_cycles(sys.stdin)
    cycle_count = resolve_cycle_count(raw, reporter.show_warning)
    config = config.model_copy(update={"cycle_count": cycle_count})
    reporter.run_planned(cycle_count)

    runner = CycleRunner(config, reporter=reporter)
    try:
        runner.run()
    except SummaryLogError as exc:
        logger.error("Aborting run: %s", exc)
        reporter.show_error(str(exc))
        raise typer.Exit(exc.exit_code)


@app.command("version")
def version_command() -> None:
    """Print the installed iteration-bench version."""
    try:
        typer.echo(version("iteration-bench"))
    except PackageNotFoundError:
        typer.echo("unknown")


def main() -> None:
    """Invoke the iteration-bench Typer application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
