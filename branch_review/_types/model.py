from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List

from branch_review._data.ollama import (
    BASE_URL,
    DEFAULT_BASE_BRANCH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_MODEL,
)


class ReviewRequest(BaseModel):
    """Everything one review run needs, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    repo_path: str
    branch: str
    base: str = DEFAULT_BASE_BRANCH
    model: str = DEFAULT_MODEL
    base_url: str = BASE_URL
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, gt=0)

    @field_validator("repo_path", "branch", "base", "model", "base_url")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ReviewResult(BaseModel):
    files: List[str]
    review: str
