from typing import List, Optional


class ReviewError(Exception):
    """Base class for every failure the CLI reports to the user."""


class VcsError(ReviewError):
    """Git produced only error output, or could not be run at all."""

    def __init__(self, message: str, command: Optional[List[str]] = None):
        super().__init__(message)
        self.command = command or []


class GenerationError(ReviewError):
    """The Ollama server answered with a non-success HTTP status."""

    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code
        self.detail = detail


class ConfigurationError(ReviewError):
    pass


class ReviewFailedError(ReviewError):
    PREFIX = "Failed to review code: "

    def __init__(self, cause: Exception):
        super().__init__(f"{self.PREFIX}{cause}")
