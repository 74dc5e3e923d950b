"""
Unit tests for running git as a child process.
"""

import subprocess
import pytest
from unittest.mock import patch

from branch_review._engine.git.command import run_git_command
from branch_review._types.errors import VcsError


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestRunGitCommand:
    @patch("branch_review._engine.git.command.subprocess.run")
    def test_returns_stripped_stdout(self, mock_run):
        mock_run.return_value = completed(stdout="  src/a.ts\nsrc/b.ts\n\n")

        assert run_git_command(["git", "diff"], "/repo") == "src/a.ts\nsrc/b.ts"

    @patch("branch_review._engine.git.command.subprocess.run")
    def test_runs_in_repository(self, mock_run):
        mock_run.return_value = completed(stdout="ok")

        run_git_command(["git", "diff", "--name-only", "main...dev"], "/some/repo")

        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "diff", "--name-only", "main...dev"]
        assert kwargs["cwd"] == "/some/repo"
        assert kwargs["capture_output"] is True

    @patch("branch_review._engine.git.command.subprocess.run")
    def test_stderr_without_stdout_fails(self, mock_run):
        mock_run.return_value = completed(
            stderr="fatal: ambiguous argument 'main...nope'\n", returncode=128
        )

        with pytest.raises(VcsError) as exc_info:
            run_git_command(["git", "diff", "main...nope"], "/repo")

        assert "ambiguous argument" in str(exc_info.value)
        assert exc_info.value.command == ["git", "diff", "main...nope"]

    @patch("branch_review._engine.git.command.subprocess.run")
    def test_stderr_with_stdout_is_tolerated(self, mock_run):
        mock_run.return_value = completed(
            stdout="diff --git a/x b/x\n", stderr="warning: CRLF will be replaced\n"
        )

        assert run_git_command(["git", "diff"], "/repo") == "diff --git a/x b/x"

    @patch("branch_review._engine.git.command.subprocess.run")
    def test_empty_output_is_not_an_error(self, mock_run):
        mock_run.return_value = completed()

        assert run_git_command(["git", "diff"], "/repo") == ""

    @patch("branch_review._engine.git.command.subprocess.run")
    def test_missing_git_binary(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")

        with pytest.raises(VcsError):
            run_git_command(["git", "diff"], "/repo")

    @patch("branch_review._engine.git.command.subprocess.run")
    def test_unusable_directory(self, mock_run):
        mock_run.side_effect = NotADirectoryError("/repo/file.txt")

        with pytest.raises(VcsError):
            run_git_command(["git", "diff"], "/repo/file.txt")
