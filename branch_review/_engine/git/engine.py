# Standard Library Imports
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

# Third-Party Library Imports
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TimeElapsedColumn,
)

# Build-in Functions And Class Import
from branch_review._data.ollama import DEFAULT_MAX_WORKERS
from branch_review._engine.console import console
from .command import run_git_command


def fetch_diff(repo_path: str, base: str, branch: str, file_path: str) -> str:
    """
    Get the unified diff of a single file between two refs.

    Args:
        repo_path (str): Repository directory, already expanded.
        base (str): The ref to compare against.
        branch (str): The ref under review.
        file_path (str): Path relative to the repository root.

    Returns:
        str: The stripped diff text. Empty when git reports no textual change.

    Raises:
        VcsError: If git fails.
    """
    return run_git_command(
        ["git", "diff", f"{base}...{branch}", "--", file_path], repo_path
    )


def fetch_all_diffs(
    repo_path: str,
    base: str,
    branch: str,
    files: List[str],
    max_workers: Optional[int] = None,
) -> List[str]:
    """
    Fetch the diff of every file in parallel.

    Each worker runs its own read-only git process. Results are slotted back
    by input position, so result[i] is always the diff of files[i] whatever
    order the workers finish in. The first failure aborts the batch: queued
    fetches are cancelled and the error propagates once running ones return.

    Args:
        repo_path (str): Repository directory, already expanded.
        base (str): The ref to compare against.
        branch (str): The ref under review.
        files (List[str]): Paths to diff, in review order.
        max_workers (int, optional): Thread pool size. Defaults to the CPU count.

    Returns:
        List[str]: One diff per input file, in input order.

    Raises:
        VcsError: If any single fetch fails.
    """
    if not files:
        return []

    diffs: List[str] = [""] * len(files)

    export_progress = Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TextColumn("•"),
        TextColumn("Fetched {task.completed} of {task.total}"),
        TextColumn("•"),
        TimeElapsedColumn(),
        SpinnerColumn("simpleDots"),
        console=console,
        transient=True,
    )

    with export_progress as progress:
        task_id = progress.add_task("[cyan]Fetching diffs[/cyan]...", total=len(files))

        with ThreadPoolExecutor(max_workers=max_workers or DEFAULT_MAX_WORKERS) as executor:
            # Map futures back to their position in the input list
            future_to_index: Dict[Future, int] = {
                executor.submit(fetch_diff, repo_path, base, branch, file_path): index
                for index, file_path in enumerate(files)
            }

            try:
                for future in as_completed(future_to_index):
                    diffs[future_to_index[future]] = future.result()
                    progress.update(task_id, advance=1)
            except Exception:
                for pending in future_to_index:
                    pending.cancel()
                raise

    return diffs
