"""Human-readable rendering of timestamps and counts."""

from __future__ import annotations

import locale
import logging
from datetime import datetime


logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _local(dt: datetime) -> datetime:
    # Aware values are shifted to local time; naive values are already local.
    if dt.tzinfo is not None:
        return dt.astimezone()
    return dt


def format_datetime(dt: datetime) -> str:
    """Render ``dt`` as ``YYYY-MM-DD HH:MM:SS`` in local time.

    Fields are built numerically so the output is always 19 characters
    regardless of the host locale or strftime padding quirks.
    """
    value = _local(dt)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def format_file_timestamp(dt: datetime) -> str:
    """Render ``dt`` as ``YYYYMMDD_hh_mm_ss`` with a 12-hour ``hh`` (01-12)."""
    value = _local(dt)
    hour12 = value.hour % 12 or 12
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"_{hour12:02d}_{value.minute:02d}_{value.second:02d}"
    )


def format_grouped(value: int) -> str:
    """Render an integer with the active locale's thousands separator.

    Falls back to comma grouping when the active ``LC_NUMERIC`` locale
    defines no separator (the default ``C`` locale). Display only.
    """
    conv = locale.localeconv()
    if conv.get("thousands_sep") and conv.get("grouping"):
        return locale.format_string("%d", value, grouping=True)
    return f"{value:,}"


def use_host_locale() -> bool:
    """Adopt the host's configured numeric locale for grouped output.

    Returns False when the environment names a locale the C library does
    not know; grouping then stays on the comma fallback.
    """
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error as exc:
        logger.warning("Unable to apply host numeric locale: %s", exc)
        return False
    return True
