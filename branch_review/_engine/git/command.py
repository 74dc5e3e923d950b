import subprocess
from typing import List

from branch_review._engine.console import log
from branch_review._types.errors import VcsError


def run_git_command(command: List[str], cwd: str) -> str:
    """
    Runs a git command inside a repository and returns its stripped stdout.

    Git writes informational messages to stderr, so stderr alone is not a
    failure: the command only fails when stderr has content and stdout is
    empty. The exit code is not consulted.

    Args:
        command (List[str]): The git command and its arguments as a list of strings.
                             Example: ["git", "diff", "--name-only", "main...feature"]
        cwd (str): Directory to run the command in.

    Returns:
        str: stdout with surrounding whitespace removed.

    Raises:
        VcsError: If git only produced error output, is not installed, or
                  the directory cannot be used.
    """
    log(f"Running git command: {' '.join(command)}")

    try:
        # errors="replace" keeps binary hunks from aborting the decode
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        # Raised for both a missing git binary and a missing cwd
        error_msg = f"Git command not found or repository path missing: {e}"
        log(f"Git command failed: {error_msg}", error=True)
        raise VcsError(error_msg, command) from e
    except OSError as e:
        error_msg = f"Exception running command {' '.join(command)}: {e}"
        log(f"Git command failed: {error_msg}", error=True)
        raise VcsError(error_msg, command) from e

    stdout = result.stdout or ""
    stderr = result.stderr or ""

    if stderr and not stdout:
        log(f"Git command failed: {stderr.strip()}", error=True)
        raise VcsError(stderr.strip(), command)

    if stderr.strip():
        log(f"Git reported warnings (output kept): {stderr.strip()}")

    return stdout.strip()
