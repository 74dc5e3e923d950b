"""
Unit tests for timestamped diagnostics and git command logging.
"""

import io
import subprocess
from unittest.mock import Mock, patch

from rich.console import Console

from branch_review._engine.console import custom_theme, log
from branch_review._engine.git.command import run_git_command


def recording_console():
    return Console(
        theme=custom_theme,
        file=io.StringIO(),
        width=200,
        log_time_format="%H:%M:%S",
    )


class TestLog:
    def test_shows_time_and_real_call_site(self):
        console = recording_console()

        with patch("branch_review._engine.console.console", console):
            log("Comparing dev against main")

        out = console.file.getvalue()
        assert "📝 Comparing dev against main" in out
        assert "test_logging.py:" in out
        assert " console.py:" not in out

    def test_error_marker(self):
        console = recording_console()

        with patch("branch_review._engine.console.console", console):
            log("Review failed", error=True)

        assert "❌ Review failed" in console.file.getvalue()


class TestGitCommandLogging:
    def test_command_logged_before_it_runs(self):
        calls = Mock()
        calls.run.return_value = subprocess.CompletedProcess(
            args=["git"], returncode=0, stdout="src/a.ts\n", stderr=""
        )

        with patch("branch_review._engine.git.command.log", calls.log), patch(
            "branch_review._engine.git.command.subprocess.run", calls.run
        ):
            run_git_command(["git", "diff", "--name-only", "main...dev"], "/repo")

        names = [name for name, _, _ in calls.mock_calls]
        assert names[:2] == ["log", "run"]
        assert calls.log.call_args_list[0].args[0] == (
            "Running git command: git diff --name-only main...dev"
        )

    def test_every_invocation_is_logged(self):
        with patch("branch_review._engine.git.command.log") as mock_log, patch(
            "branch_review._engine.git.command.subprocess.run"
        ) as mock_run:
            mock_run.return_value = subprocess.CompletedProcess(
                args=["git"], returncode=0, stdout="x", stderr=""
            )
            run_git_command(["git", "diff", "main...a", "--", "a.ts"], "/repo")
            run_git_command(["git", "diff", "main...a", "--", "b.ts"], "/repo")

        messages = [call.args[0] for call in mock_log.call_args_list]
        assert messages == [
            "Running git command: git diff main...a -- a.ts",
            "Running git command: git diff main...a -- b.ts",
        ]
