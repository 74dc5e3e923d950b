from pathlib import Path

from branch_review._data.ollama import NO_CHANGES_REVIEW, NO_RELEVANT_FILES_REVIEW
from branch_review._engine.console import log
from branch_review._engine.ollama.model import generate_review
from branch_review._types.errors import ReviewFailedError
from branch_review._types.model import ReviewRequest, ReviewResult

from .engine import fetch_all_diffs
from .files_controller import filter_files, list_changed_files


def resolve_repo_path(repo_path: str) -> str:
    """Replace a leading "~" with the user's home directory."""
    if repo_path.startswith("~"):
        return str(Path.home()) + repo_path[1:]
    return repo_path


def review_branch(request: ReviewRequest) -> ReviewResult:
    """
    Review every relevant change on `request.branch` since it left `request.base`.

    Runs list -> filter -> fetch diffs -> generate. The model is only called
    when there is diff text to send; otherwise a fixed sentinel review is
    returned. Any failure is logged once and re-raised as ReviewFailedError.

    Args:
        request (ReviewRequest): Repository, refs, model and worker settings.

    Returns:
        ReviewResult: The reviewed files and the review text.

    Raises:
        ReviewFailedError: If git or the Ollama server fails.
    """
    full_path = resolve_repo_path(request.repo_path)
    log(f"Reviewing repository at: {full_path}")
    log(f"Comparing {request.branch} against {request.base}")

    try:
        all_files = list_changed_files(full_path, request.base, request.branch)
        files = filter_files(all_files)

        log(
            f"Found {len(files)} relevant files "
            f"({len(all_files) - len(files)} files excluded)"
        )

        if not files:
            return ReviewResult(files=[], review=NO_RELEVANT_FILES_REVIEW)

        diffs = fetch_all_diffs(
            full_path, request.base, request.branch, files, request.max_workers
        )
        combined_diff = "\n\n".join(diffs)

        # The separators alone are not a change
        if not any(diffs):
            log(NO_CHANGES_REVIEW)
            return ReviewResult(files=files, review=NO_CHANGES_REVIEW)

        log(f"Generated diff ({len(combined_diff)} characters)")
        review = generate_review(combined_diff, request.model, request.base_url)
        return ReviewResult(files=files, review=review)
    except Exception as e:
        log(f"Review failed: {e}", error=True)
        raise ReviewFailedError(e) from e
