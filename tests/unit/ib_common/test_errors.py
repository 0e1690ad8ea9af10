"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ib_common.errors import (
    ConfigurationError,
    DetailLogError,
    IBError,
    LogDirectoryError,
    SummaryLogError,
    wrap_error,
)


pytestmark = pytest.mark.unit_common


def test_to_dict_normalizes_context() -> None:
    err = LogDirectoryError(
        "Directories do not exist",
        context={
            "missing": [Path("/tmp/a"), Path("/tmp/b")],
            "nested": {"value": Path("nested")},
            "count": 2,
        },
    )

    payload = err.to_dict()

    assert payload["type"] == "LogDirectoryError"
    assert payload["message"] == "Directories do not exist"
    assert payload["context"]["missing"] == ["/tmp/a", "/tmp/b"]
    assert payload["context"]["nested"]["value"] == "nested"
    assert payload["context"]["count"] == 2


def test_wrap_error_sets_cause() -> None:
    cause = PermissionError("denied")

    err = wrap_error(DetailLogError, "cannot write", context={"path": "x"}, cause=cause)

    assert isinstance(err, IBError)
    assert err.__cause__ is cause
    assert err.context == {"path": "x"}


def test_exit_codes_distinguish_fatal_errors() -> None:
    assert LogDirectoryError("x").exit_code == 1
    assert SummaryLogError("x").exit_code == 2
    assert ConfigurationError("x").error_type == "ConfigurationError"
