"""
Tests for the katas command-line interface.
"""

import logging
from pathlib import Path

import pytest

from katas.cli import main, parse_args
from katas.infrastructure import get_logger, setup_logging

EXPECTED_ALL = [
    "avaj repoleved lluf kcats",
    "{l=1, i=1, s=1, t=1, e=1, n=1}",
    "{s=1, i=1, l=1, e=1, n=1, t=1}",
    "true",
    "1",
    "28 7 30 30 30 30 50 50 50 50 60 60 60 90 90 ",
]


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = parse_args([])

        assert args.program == "all"
        assert args.config is None
        assert args.verbose is False

    def test_rejects_unknown_program(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["fizzbuzz"])
        assert exc_info.value.code == 2


class TestMain:
    """Test main entry point."""

    def test_no_arguments_runs_everything(self, capsys) -> None:
        assert main([]) == 0
        assert capsys.readouterr().out == "\n".join(EXPECTED_ALL) + "\n"

    @pytest.mark.parametrize(
        "program,expected",
        [
            ("reverse", ["avaj repoleved lluf kcats"]),
            ("digit", ["1"]),
            ("propagate", [EXPECTED_ALL[-1]]),
        ],
    )
    def test_single_program(self, capsys, program: str, expected) -> None:
        assert main([program]) == 0
        assert capsys.readouterr().out.splitlines() == expected

    def test_config_override(self, capsys, tmp_path: Path) -> None:
        config = tmp_path / "katas.yaml"
        config.write_text("anagram:\n  first: listen\n  second: listens\n")

        assert main(["anagram", "--config", str(config)]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "false"

    def test_missing_config_fails(self, capsys, tmp_path: Path) -> None:
        assert main(["--config", str(tmp_path / "absent.yaml")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Config file not found" in captured.err

    def test_rejected_input_fails(self, capsys, tmp_path: Path) -> None:
        config = tmp_path / "katas.yaml"
        config.write_text("digit:\n  number: -1\n")

        assert main(["digit", "--config", str(config)]) == 1
        assert "non-negative" in capsys.readouterr().err


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_sets_level(self) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        setup_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_get_logger(self) -> None:
        assert get_logger("katas.test").name == "katas.test"
