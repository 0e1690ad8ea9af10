"""Tests for log directory preparation and log file writes."""

from pathlib import Path

import pytest

from ib_common.errors import DetailLogError, LogDirectoryError, SummaryLogError
from ib_runner.models.config import RunConfig
from ib_runner.services.log_dirs import ensure_log_dirs
from ib_runner.services.log_writer import CycleLogWriter


pytestmark = pytest.mark.unit_runner


def test_ensure_log_dirs_creates_both(tmp_path: Path):
    config = RunConfig(base_dir=tmp_path / "nested" / "root")

    detail_dir, summary_dir = ensure_log_dirs(config)

    assert detail_dir == tmp_path / "nested" / "root" / "CycleLogDetail"
    assert summary_dir == tmp_path / "nested" / "root" / "CycleLog"
    assert detail_dir.is_dir()
    assert summary_dir.is_dir()


def test_ensure_log_dirs_is_idempotent(tmp_path: Path):
    config = RunConfig(base_dir=tmp_path)

    ensure_log_dirs(config)
    ensure_log_dirs(config)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["CycleLog", "CycleLogDetail"]


def test_ensure_log_dirs_reports_missing_path(tmp_path: Path):
    blocker = tmp_path / "CycleLog"
    blocker.write_text("not a directory", encoding="utf-8")
    config = RunConfig(base_dir=tmp_path)

    with pytest.raises(LogDirectoryError) as excinfo:
        ensure_log_dirs(config)

    assert excinfo.value.context["missing"] == [str(blocker)]
    assert excinfo.value.exit_code == 1


def test_write_detail_overwrites_existing_file(tmp_path: Path):
    writer = CycleLogWriter(tmp_path, tmp_path / "Iteration.txt")

    writer.write_detail("T x 01 - 01.txt", "first\n")
    path = writer.write_detail("T x 01 - 01.txt", "second\n")

    assert path.read_text(encoding="utf-8") == "second\n"


def test_append_summary_appends(tmp_path: Path):
    log = tmp_path / "Iteration.txt"
    writer = CycleLogWriter(tmp_path, log)

    writer.append_summary("a\n")
    writer.append_summary("b\n")

    assert log.read_text(encoding="utf-8") == "a\nb\n"


def test_write_failures_raise_typed_errors(tmp_path: Path):
    missing = tmp_path / "missing"
    writer = CycleLogWriter(missing, missing / "Iteration.txt")

    with pytest.raises(DetailLogError) as detail_exc:
        writer.write_detail("T.txt", "x")
    with pytest.raises(SummaryLogError) as summary_exc:
        writer.append_summary("x")

    assert isinstance(detail_exc.value.__cause__, OSError)
    assert summary_exc.value.context["path"] == str(missing / "Iteration.txt")
