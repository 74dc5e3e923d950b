from .errors import (
    ConfigurationError,
    GenerationError,
    ReviewError,
    ReviewFailedError,
    VcsError,
)
from .model import ReviewRequest, ReviewResult
