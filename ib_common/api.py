"""Public API surface for ib_common."""

from ib_common.clock import Clock, SystemClock, current_second_of_minute, current_wall_clock
from ib_common.errors import (
    ConfigurationError,
    DetailLogError,
    IBError,
    LogDirectoryError,
    SummaryLogError,
)
from ib_common.formatting import (
    format_datetime,
    format_file_timestamp,
    format_grouped,
    use_host_locale,
)
from ib_common.logging import configure_logging

__all__ = [
    "Clock",
    "ConfigurationError",
    "DetailLogError",
    "IBError",
    "LogDirectoryError",
    "SummaryLogError",
    "SystemClock",
    "configure_logging",
    "current_second_of_minute",
    "current_wall_clock",
    "format_datetime",
    "format_file_timestamp",
    "format_grouped",
    "use_host_locale",
]
