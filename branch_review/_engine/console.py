from rich.console import Console
from rich.theme import Theme

# Custom theme for consistent styling
custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "highlight": "magenta",
    }
)

console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)


def log(message: str, error: bool = False) -> None:
    """
    Write a timestamped diagnostic line.

    Args:
        message (str): Text to log. Rich markup is not interpreted, so git
                       output and file paths containing brackets print as-is.
        error (bool): Mark the line as a failure.
    """
    if error:
        console.log(f"❌ {message}", style="error", markup=False, highlight=False, _stack_offset=2)
    else:
        console.log(f"📝 {message}", markup=False, highlight=False, _stack_offset=2)
