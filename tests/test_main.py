"""
Unit tests for the command-line cycle runner.
"""

import logging

import pytest

from dishwasher.main import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.program == "eco"
        assert args.fill_level == "full"
        assert args.tablets is True
        assert args.door_open is False
        assert args.pump_fault is None
        assert args.engine_fault is False

    def test_no_tablets(self):
        args = build_parser().parse_args(["--no-tablets"])

        assert args.tablets is False

    def test_invalid_program(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--program", "turbo"])
        assert exc_info.value.code == 2


class TestMain:
    """Tests for running cycles from the command line."""

    def test_successful_run(self, capsys):
        exit_code = main(["--program", "rinse"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Status:  SUCCESS" in out
        assert "Minutes: 12" in out
        assert "  door.unlock" in out

    def test_door_open(self, capsys):
        exit_code = main(["--door-open"])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "DOOR_OPEN" in out
        assert "Minutes: 0" in out

    def test_dirty_filter(self, capsys):
        assert main(["--filter-capacity", "50"]) == 1
        assert "ERROR_FILTER" in capsys.readouterr().out

    def test_pump_fault(self, capsys):
        assert main(["--pump-fault", "pour", "--fill-level", "half"]) == 1
        assert "ERROR_PUMP" in capsys.readouterr().out

    def test_engine_fault(self, capsys):
        assert main(["--engine-fault", "--verbose"]) == 1
        assert "ERROR_PROGRAM" in capsys.readouterr().out

    def test_outcome_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="dishwasher.main"):
            main(["--program", "night"])

        assert "Cycle result: SUCCESS, 240 min" in caplog.text
