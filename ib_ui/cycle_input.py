"""Parsing of the cycle count entered by the user."""

from __future__ import annotations

import logging
from typing import Callable

from ib_common.errors import ConfigurationError
from ib_runner.models.config import DEFAULT_CYCLE_COUNT

logger = logging.getLogger(__name__)

INVALID_INPUT_WARNING = f"Invalid input; defaulting to {DEFAULT_CYCLE_COUNT}."


def parse_cycle_count(raw: str | None) -> int:
    """Return the positive integer in ``raw``.

    Raises:
        ConfigurationError: when ``raw`` is missing, non-numeric or below 1.
    """
    text = (raw or "").strip()
    try:
        value = int(text)
    except ValueError as exc:
        raise ConfigurationError(
            "Cycle count must be a whole number",
            context={"input": text},
            cause=exc,
        ) from exc
    if value < 1:
        raise ConfigurationError("Cycle count must be at least 1", context={"input": text})
    return value


def resolve_cycle_count(raw: str | None, warn: Callable[[str], None]) -> int:
    """Parse ``raw``, substituting the default count and warning when invalid."""
    try:
        return parse_cycle_count(raw)
    except ConfigurationError as exc:
        logger.debug("Rejected cycle count: %s", exc.to_dict())
        warn(INVALID_INPUT_WARNING)
        return DEFAULT_CYCLE_COUNT
