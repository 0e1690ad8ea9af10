"""Shared helpers for iteration-bench."""

from ib_common.api import SystemClock, configure_logging

__all__ = ["configure_logging", "SystemClock"]
