"""Persistence of detail and summary logs."""

from __future__ import annotations

import logging
from pathlib import Path

from ib_common.errors import DetailLogError, SummaryLogError, wrap_error


logger = logging.getLogger(__name__)


class CycleLogWriter:
    """Write per-cycle detail files and append to the shared summary log.

    The summary log is opened, appended and closed on every call; no handle
    is held between cycles.
    """

    def __init__(self, detail_dir: Path, summary_log_path: Path) -> None:
        self.detail_dir = detail_dir
        self.summary_log_path = summary_log_path

    def write_detail(self, file_name: str, text: str) -> Path:
        """Write (overwriting) one detail file and return its path."""
        path = self.detail_dir / file_name
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise wrap_error(
                DetailLogError,
                f"Unable to write detail log {path}",
                context={"path": path, "errno": exc.errno},
                cause=exc,
            ) from exc
        logger.debug("Wrote detail log %s", path)
        return path

    def append_summary(self, text: str) -> None:
        try:
            with self.summary_log_path.open("a", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise wrap_error(
                SummaryLogError,
                f"Unable to append to summary log {self.summary_log_path}",
                context={"path": self.summary_log_path, "errno": exc.errno},
                cause=exc,
            ) from exc
