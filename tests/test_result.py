"""
Unit tests for run results.
"""

import dataclasses
import pytest

from dishwasher.control.result import RunResult, Status


class TestStatus:
    """Tests for Status enumeration."""

    def test_all_statuses_defined(self):
        assert {s.name for s in Status} == {
            "SUCCESS", "DOOR_OPEN", "ERROR_FILTER", "ERROR_PROGRAM", "ERROR_PUMP"
        }


class TestRunResult:
    """Tests for RunResult invariants."""

    def test_success(self):
        result = RunResult.success(120)

        assert result.status is Status.SUCCESS
        assert result.run_minutes == 120
        assert result.is_success

    @pytest.mark.parametrize("status", [s for s in Status if s is not Status.SUCCESS])
    def test_error_has_zero_minutes(self, status):
        result = RunResult.error(status)

        assert result.status is status
        assert result.run_minutes == 0
        assert not result.is_success

    def test_success_requires_positive_minutes(self):
        with pytest.raises(ValueError):
            RunResult(Status.SUCCESS, 0)

    def test_error_rejects_minutes(self):
        with pytest.raises(ValueError):
            RunResult(Status.ERROR_PUMP, 5)

    def test_immutable(self):
        result = RunResult.success(12)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.run_minutes = 0
