"""Review the changes on a git branch with a local Ollama model."""

__version__ = "0.1.0"
