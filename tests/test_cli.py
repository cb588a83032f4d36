"""Tests for the command-line interface"""
import os
import signal
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from git_healthcheck.cli import main, parse_args
from git_healthcheck.core import HealthChecker
from git_healthcheck.core.health_checker import _signal_handler
from git_healthcheck.exceptions import FatalCheckError
from git_healthcheck.models.check import HealthReport, Severity, Stage, StageResult


@pytest.fixture
def in_repo(git_repo_with_upstream):
    previous = os.getcwd()
    os.chdir(git_repo_with_upstream.working_dir)
    yield git_repo_with_upstream
    os.chdir(previous)


class TestArgs:
    """Test argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.default_remote == "origin"
        assert args.strict is False
        assert args.no_fetch is False
        assert args.max_added_lines == 100000

    def test_positional_remote(self):
        assert parse_args(["upstream"]).default_remote == "upstream"

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "git-healthcheck" in capsys.readouterr().out


class TestMain:
    """Test exit codes of main()."""

    def test_healthy_repo_exits_zero(self, in_repo):
        assert main([]) == 0

    def test_fatal_error_exits_one(self, in_repo):
        with patch.object(HealthChecker, "run",
                          side_effect=FatalCheckError("Fetch from origin", "git fetch origin")):
            assert main([]) == 1

    def test_outside_repository_exits_one(self, temp_dir):
        previous = os.getcwd()
        os.chdir(temp_dir)
        try:
            assert main(["--no-fetch"]) == 1
        finally:
            os.chdir(previous)

    def test_invalid_option_value(self, in_repo):
        assert main(["--max-added-lines", "0"]) == 2

    def test_strict_mode_fails_on_errors(self, in_repo):
        report = HealthReport([StageResult(Stage.REMOTES)])
        report.results[0].add(Severity.ERROR, "origin: could not list remote branches")

        with patch.object(HealthChecker, "run", return_value=report):
            assert main([]) == 0
            assert main(["--strict"]) == 1


class TestFatalOutput:
    """Test what an aborted run prints."""

    def test_fatal_error_names_stage_command_and_stderr(self, in_repo):
        buffer = StringIO()
        error = FatalCheckError(
            "Fetch from origin",
            "git fetch origin",
            "fatal: 'origin' does not appear to be a git repository",
        )

        with patch("git_healthcheck.services.display_service.console",
                   Console(file=buffer, width=200, color_system=None)):
            with patch.object(HealthChecker, "run", side_effect=error):
                assert main([]) == 1

        output = buffer.getvalue()
        assert "❌ Fetch from origin failed" in output
        assert "command: git fetch origin" in output
        assert "fatal: 'origin' does not appear to be a git repository" in output

    def test_interrupt_exits_one_with_message(self):
        buffer = StringIO()

        with patch("git_healthcheck.core.health_checker.console",
                   Console(file=buffer, width=200, color_system=None)):
            with pytest.raises(SystemExit) as exc_info:
                _signal_handler(signal.SIGINT, None)

        assert exc_info.value.code == 1
        assert "Interrupted! Health check aborted." in buffer.getvalue()

    def test_install_signal_handler(self, git_repo, mock_config):
        previous = signal.getsignal(signal.SIGINT)
        try:
            HealthChecker(git_repo.working_dir, mock_config).install_signal_handler()
            assert signal.getsignal(signal.SIGINT) is _signal_handler
        finally:
            signal.signal(signal.SIGINT, previous)
