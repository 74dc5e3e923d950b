# Standard Library Imports
import sys
import argparse
from typing import List, Optional

# Third-Party Library Imports
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel

# Internal Module Imports
from branch_review._data.ollama import (
    BASE_URL,
    DEFAULT_BASE_BRANCH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_MODEL,
    EXCLUDED_FILE_DESCRIPTIONS,
)
from branch_review._engine.console import console, err_console, log
from branch_review._engine.git import review_branch
from branch_review._engine.ollama import display_models, get_models
from branch_review._types.errors import ConfigurationError, ReviewError
from branch_review._types.model import ReviewRequest, ReviewResult

PROG = "branch-review"


def usage_text() -> str:
    excluded = "\n".join(f"- {description}" for description in EXCLUDED_FILE_DESCRIPTIONS)
    return f"""
📋 Usage: {PROG} --repo=<path> --branch=<branch> [--base=<base-branch>] [--model=<model>]

Examples:
    {PROG} --repo=~/Projects/myapp --branch=feature/new-feature
    {PROG} --repo=~/Projects/myapp --branch=feature/new-feature --base=develop
    {PROG} --repo=~/Projects/myapp --branch=feature/new-feature --model=llama2:3b

Note: The following files are automatically excluded:
{excluded}
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Review the changes between two git branches with a local Ollama model.",
    )
    # --repo and --branch are checked by hand so a missing one prints the
    # full usage text and exits 1 instead of argparse's exit 2
    parser.add_argument("--repo", help="Path to the repository. A leading '~' is expanded.")
    parser.add_argument("--branch", help="Branch or ref to review.")
    parser.add_argument(
        "--base",
        default=DEFAULT_BASE_BRANCH,
        help="Branch or ref to compare against. Default: '%(default)s'",
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help="Ollama model name. Default: '%(default)s'",
    )
    parser.add_argument(
        "--ollama-url",
        default=BASE_URL,
        help="Ollama API root. Default: '%(default)s'",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=DEFAULT_MAX_WORKERS,
        help="Number of parallel git processes for fetching diffs. Default: %(default)s",
    )
    parser.add_argument(
        "--list-models",
        action="store_true",
        help="List the models installed on the Ollama server and exit.",
    )
    return parser


def build_request(args: argparse.Namespace) -> ReviewRequest:
    """
    Turn parsed arguments into a ReviewRequest.

    Raises:
        ConfigurationError: With an empty message when --repo or --branch is
                            missing, or with the validation details otherwise.
    """
    if not args.repo or not args.branch:
        raise ConfigurationError()

    try:
        return ReviewRequest(
            repo_path=args.repo,
            branch=args.branch,
            base=args.base,
            model=args.model,
            base_url=args.ollama_url,
            max_workers=args.threads,
        )
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def print_result(result: ReviewResult) -> None:
    console.print("\n" + "=" * 50, markup=False)
    console.print("📄 Files Changed:")
    console.print("-" * 20, markup=False)
    for file_path in result.files:
        console.print(f"  • {file_path}", markup=False, highlight=False, soft_wrap=True)

    console.print("\n📊 Review Results:")
    console.print("-" * 20, markup=False)
    console.print(result.review, markup=False, highlight=False, soft_wrap=True)
    console.print("=" * 50 + "\n", markup=False)

    console.print("[success]✅ Review completed successfully![/success]\n")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run the review and print it.

    Returns:
        int: Process exit status.
    """
    args, unknown = build_parser().parse_known_args(argv)

    if unknown:
        log(f"Ignoring unrecognized arguments: {' '.join(unknown)}")

    if args.list_models:
        models = get_models(args.ollama_url)
        display_models(models)
        return 0 if models else 1

    console.print("\n🔍 Starting code review process...\n")

    try:
        request = build_request(args)
    except ConfigurationError as e:
        if str(e):
            err_console.print(f"[error]Invalid arguments:[/error] {escape(str(e))}")
        console.print(usage_text(), markup=False, highlight=False)
        return 1

    console.print(f"🤖 Initializing code reviewer with model: {request.model}", markup=False)

    try:
        result = review_branch(request)
    except ReviewError as e:
        err_console.print(f"\n❌ Error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1

    print_result(result)
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n[bold yellow]✋ Operation cancelled by user.[/bold yellow]")
        sys.exit(0)
    except Exception as e:
        err_console.print(
            Panel(
                f"[bold red]An unexpected error occurred:[/bold red]\n[yellow]{escape(str(e))}[/yellow]",
                title="[bold red]Fatal Error[/bold red]",
                border_style="red",
            )
        )
        sys.exit(1)


# --- Entry Point ---
if __name__ == "__main__":
    run()
