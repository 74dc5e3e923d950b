import re
from re import Pattern
from typing import List, Tuple

from branch_review._engine.git.command import run_git_command

# Files that never take part in a review. Matching is case-sensitive and
# directory rules need the slashes on both sides, so a bare "generated"
# path is still reviewed.
EXCLUDE_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    ("graphql schema", re.compile(r"\.graphql$")),
    ("test-utils folder", re.compile(r"/test-utils/")),
    ("generated folder", re.compile(r"/generated/")),
    ("changelog", re.compile(r"CHANGELOG\.md$")),
    ("release manifest", re.compile(r"\.release-manifest\.json$")),
]


def should_include_file(file_path: str) -> bool:
    """Return True when no exclusion pattern matches the path."""
    return not any(pattern.search(file_path) for _, pattern in EXCLUDE_PATTERNS)


def filter_files(files: List[str]) -> List[str]:
    """Keep the reviewable paths, preserving git's listing order."""
    return [file_path for file_path in files if should_include_file(file_path)]


def list_changed_files(repo_path: str, base: str, branch: str) -> List[str]:
    """
    Get the paths that differ between two refs.

    Uses the three-dot form, so the listing is relative to the merge base of
    `base` and `branch` rather than to the tip of `base`.

    Args:
        repo_path (str): Repository directory, already expanded.
        base (str): The ref to compare against.
        branch (str): The ref under review.

    Returns:
        List[str]: Changed paths relative to the repository root, in git's order.

    Raises:
        VcsError: If git fails.
    """
    stdout = run_git_command(
        ["git", "diff", "--name-only", f"{base}...{branch}"], repo_path
    )
    return [line for line in stdout.split("\n") if line]
