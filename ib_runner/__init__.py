"""Runner facade for iteration-bench.

Re-exports the types needed to run cycles programmatically without the CLI.
"""

from ib_runner.api import CycleRunner, RunConfig, RunSummary, ensure_log_dirs

__all__ = [
    "CycleRunner",
    "RunConfig",
    "RunSummary",
    "ensure_log_dirs",
]
