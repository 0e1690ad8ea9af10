"""Tests for run summary arithmetic."""

from datetime import datetime, timedelta

import pytest

from ib_runner.models.results import CycleResult, ElapsedBreakdown, RunSummary


pytestmark = pytest.mark.unit_runner

START = datetime(2025, 3, 16, 7, 14, 2)


def test_breakdown_of_mixed_duration():
    total_ms = ((1 * 24 + 2) * 60 + 3) * 60_000 + 4_005

    elapsed = ElapsedBreakdown.from_milliseconds(total_ms)

    assert (elapsed.days, elapsed.hours, elapsed.minutes, elapsed.seconds, elapsed.milliseconds) == (1, 2, 3, 4, 5)
    assert elapsed.total_milliseconds == total_ms


@pytest.mark.parametrize("total_ms", [0, 999, 1_000, 59_999, 3_600_000, 86_399_999, 86_400_000, 987_654_321])
def test_breakdown_fields_in_range_and_reconstructable(total_ms):
    elapsed = ElapsedBreakdown.from_milliseconds(total_ms)

    assert 0 <= elapsed.hours < 24
    assert 0 <= elapsed.minutes < 60
    assert 0 <= elapsed.seconds < 60
    assert 0 <= elapsed.milliseconds < 1000
    assert elapsed.total_milliseconds == total_ms


def test_negative_milliseconds_rejected():
    with pytest.raises(ValueError):
        ElapsedBreakdown.from_milliseconds(-1)


def test_between_truncates_to_whole_milliseconds_and_clamps():
    end = START + timedelta(seconds=2, microseconds=345_678)

    assert ElapsedBreakdown.between(START, end).total_milliseconds == 2_345
    assert ElapsedBreakdown.between(end, START).total_milliseconds == 0


def test_average_uses_integer_division():
    summary = RunSummary(
        total_iterations=5_000_001 + 4_999_999,
        cycle_count=2,
        run_start=START,
        run_end=START + timedelta(seconds=2),
    )

    assert summary.average_iterations_per_cycle == 5_000_000


def test_average_truncates_remainder():
    summary = RunSummary(total_iterations=10, cycle_count=3, run_start=START, run_end=START)

    assert summary.average_iterations_per_cycle == 3
    assert summary.elapsed.total_milliseconds == 0


def test_cycle_result_requires_end():
    with pytest.raises(TypeError):
        CycleResult(cycle_index=1, cycle_count=1, start=START)
