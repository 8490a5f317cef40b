"""Tests for the command-line entry point"""
from pathlib import Path
from unittest.mock import patch

import pytest

from git_tidy.cli.args import parse_args
from git_tidy.cli.main import main
from git_tidy.exceptions import CommandExecutionError, NoMergedBranchesError


class TestParseArgs:
    """Test positional argument parsing."""

    def test_no_argument(self):
        assert parse_args([]).command is None

    def test_fetch(self):
        assert parse_args(["fetch"]).command == "fetch"

    def test_extra_arguments_are_ignored(self):
        assert parse_args(["fetch", "now", "--please"]).command == "fetch"

    def test_unknown_option_does_not_exit(self):
        assert parse_args(["-h"]).command is None

    @pytest.mark.parametrize("argv", [["-v", "fetch"], ["--x", "fetch"], ["-h", "fetch"]])
    def test_option_before_fetch_selects_cleanup(self, argv):
        """Only the first token is the command."""
        assert parse_args(argv).command is None

    def test_reads_sys_argv_by_default(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["git-tidy", "fetch"])
        assert parse_args().command == "fetch"


@pytest.fixture
def mock_tidier():
    with patch("git_tidy.cli.main.BranchTidier") as tidier_cls:
        yield tidier_cls


@pytest.fixture(autouse=True)
def mock_setup_logging():
    with patch("git_tidy.cli.main.setup_logging") as setup:
        yield setup


class TestMain:
    """Test main() dispatch and error reporting."""

    @pytest.mark.parametrize("argv, command", [([], None), (["fetch"], "fetch"), (["other"], "other")])
    def test_dispatches_first_argument(self, argv, command, mock_tidier, monkeypatch):
        monkeypatch.delenv("GIT_TIDY_DEBUG", raising=False)

        assert main(argv) == 0
        mock_tidier.return_value.run.assert_called_once_with(command)

    def test_config_comes_from_environment(self, mock_tidier, mock_setup_logging, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("GIT_TIDY_VERBOSE", "1")
        monkeypatch.setenv("GIT_TIDY_REMOTE", "upstream")
        monkeypatch.delenv("GIT_TIDY_DEBUG", raising=False)

        main([])

        config = mock_tidier.call_args.args[0]
        assert config.remote_name == "upstream"
        assert Path(config.repo_path).resolve() == temp_dir.resolve()
        mock_setup_logging.assert_called_once_with(verbose=True, debug=False)

    def test_error_printed_to_stderr(self, mock_tidier, capsys, monkeypatch):
        monkeypatch.delenv("GIT_TIDY_DEBUG", raising=False)
        mock_tidier.return_value.run.side_effect = NoMergedBranchesError()

        assert main([]) == 1

        captured = capsys.readouterr()
        assert "There are no branches to delete" in captured.err
        assert captured.out == ""

    def test_command_error_message(self, mock_tidier, capsys, monkeypatch):
        monkeypatch.delenv("GIT_TIDY_DEBUG", raising=False)
        mock_tidier.return_value.run.side_effect = CommandExecutionError(
            "git fetch origin main:main", 128, "fatal: [remote] unreachable"
        )

        assert main(["fetch"]) == 1
        assert "fatal: [remote] unreachable" in capsys.readouterr().err

    @patch("git_tidy.cli.main.error_console")
    def test_error_is_styled_red(self, mock_error_console, mock_tidier, monkeypatch):
        monkeypatch.delenv("GIT_TIDY_DEBUG", raising=False)
        mock_tidier.return_value.run.side_effect = NoMergedBranchesError()

        assert main([]) == 1

        printed = [call.args[0] for call in mock_error_console.print.call_args_list]
        assert printed == ["[red]There are no branches to delete[/red]"]

    def test_keyboard_interrupt(self, mock_tidier, capsys, monkeypatch):
        monkeypatch.delenv("GIT_TIDY_DEBUG", raising=False)
        mock_tidier.return_value.run.side_effect = KeyboardInterrupt()

        assert main([]) == 1
        assert "Operation cancelled by user" in capsys.readouterr().err

    def test_debug_prints_configuration(self, mock_tidier, capsys, monkeypatch):
        monkeypatch.setenv("GIT_TIDY_DEBUG", "1")

        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Debug mode enabled" in out
        assert "remote_name: origin" in out
