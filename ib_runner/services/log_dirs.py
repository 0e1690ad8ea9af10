"""Creation and verification of the log directories."""

from __future__ import annotations

import logging
from pathlib import Path

from ib_common.errors import LogDirectoryError
from ib_runner.models.config import RunConfig


logger = logging.getLogger(__name__)


def ensure_log_dirs(config: RunConfig) -> tuple[Path, Path]:
    """Create the detail and summary directories and verify they exist.

    Creation errors are logged and the existence check decides the outcome,
    so a directory created concurrently by someone else is still accepted.

    Raises:
        LogDirectoryError: listing every directory that is still missing.
    """
    detail_dir = config.detail_dir
    summary_dir = config.summary_dir
    for path in (detail_dir, summary_dir):
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create log directory %s: %s", path, exc)

    missing = [path for path in (detail_dir, summary_dir) if not path.is_dir()]
    if missing:
        raise LogDirectoryError(
            "Directories do not exist",
            context={"missing": missing},
        )
    return detail_dir, summary_dir
