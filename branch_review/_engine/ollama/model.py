import requests
from rich.panel import Panel
from rich.table import Table
from branch_review._data.ollama import BASE_URL, REVIEW_ERROR_PREFIX, REVIEW_PROMPT
from branch_review._engine.console import console, log
from branch_review._types.errors import GenerationError


def get_models(base_url: str = BASE_URL) -> list:
    """Get all models installed on the Ollama server. Empty on any failure."""
    try:
        with console.status("[bold blue]Loading models...", spinner="moon"):
            response = requests.get(f"{base_url}/tags")

        if response.status_code == 200:
            return response.json().get("models", [])
        else:
            log(f"Failed to list models: HTTP status {response.status_code}", error=True)
            return []
    except requests.exceptions.RequestException as e:
        log(f"Unable to connect to Ollama server at {base_url}: {e}", error=True)
        return []


def display_models(models) -> None:
    """Display models in table format"""
    if not models:
        console.print(
            Panel(
                "[italic yellow]No models installed on the system",
                title="[bold red]Warning",
                border_style="red",
            )
        )
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("No.", style="dim", width=6, justify="center")
    table.add_column("Model Name", style="cyan", min_width=20)
    table.add_column("Size", style="green", justify="right")

    for i, model in enumerate(models, 1):
        name = model.get("name", "")
        size = f"{model.get('size', 0) / 1_000_000_000:.2f} GB"
        table.add_row(str(i), name, size)

    console.print(
        Panel(table, title="[bold cyan]Installed Models", border_style="cyan")
    )


def build_review_prompt(diff: str) -> str:
    return REVIEW_PROMPT.format(diff=diff)


def generate_review(diff: str, model_name: str, base_url: str = BASE_URL) -> str:
    """
    Ask the model for a code review of a combined diff.

    A non-success HTTP status is fatal. Anything that goes wrong on the way
    to a parsed answer (connection refused, broken JSON, no `response`
    field) is returned as review text starting with "Error generating review: ",
    so the caller always has something to print.

    Args:
        diff (str): The combined diff of every reviewed file.
        model_name (str): Name of the Ollama model to use.
        base_url (str): Ollama API root, e.g. "http://localhost:11434/api".

    Returns:
        str: The model's `response` text, verbatim, or the error placeholder.

    Raises:
        GenerationError: If the server answers with a non-2xx status.
    """
    data = {
        "model": model_name,
        "prompt": build_review_prompt(diff),
        "stream": False,
    }

    log(f"Generating review using {model_name}...")

    try:
        with console.status(f"[bold blue]Thinking ({model_name})...", spinner="moon"):
            response = requests.post(f"{base_url}/generate", json=data)

        if not 200 <= response.status_code < 300:
            log(f"Failed to generate review: HTTP status {response.status_code}", error=True)
            raise GenerationError(response.status_code, response.text)

        review = response.json()["response"]
        if not isinstance(review, str):
            raise TypeError(f"expected a string response, got {type(review).__name__}")
    except (requests.exceptions.RequestException, ValueError, KeyError, TypeError) as e:
        # requests' JSONDecodeError is a ValueError
        log(f"Failed to generate review: {e}", error=True)
        return f"{REVIEW_ERROR_PREFIX}{e}"

    log("Review generated successfully")
    return review
