import os
from typing import List

BASE_URL: str = "http://localhost:11434/api"

DEFAULT_MODEL: str = "llama3.2"
DEFAULT_BASE_BRANCH: str = "main"

# Default number of worker threads for the per-file diff fan-out
DEFAULT_MAX_WORKERS: int = os.cpu_count() or 4

NO_RELEVANT_FILES_REVIEW: str = (
    "No relevant files to review (all changed files were excluded by filters)"
)
NO_CHANGES_REVIEW: str = "No changes detected in relevant files"
REVIEW_ERROR_PREFIX: str = "Error generating review: "

# Shown in the usage text; keep in sync with EXCLUDE_PATTERNS in files_controller
EXCLUDED_FILE_DESCRIPTIONS: List[str] = [
    ".graphql files",
    "Files in test-utils folders",
    "Generated files",
    "CHANGELOG.md",
    ".release-manifest.json",
]

REVIEW_PROMPT: str = """You are an expert code reviewer conversant in React, Tailwind css and web development. Review the following code changes in the context of the project.

Focus your analysis on:
1. Code correctness and potential bugs
2. Design patterns and architectural choices
3. Performance implications
4. Security vulnerabilities
5. Testing requirements
6. Code maintainability and readability

For each issue found:
- Specify the exact location
- Explain the problem
- Provide a concrete suggestion for improvement
- Rate the severity (Low/Medium/High)

Here's the diff:
{diff}

Format your response as:
### Summary
[Brief overview of changes]

### Critical Issues
[High severity issues]

### Improvements Needed
[Medium/Low severity issues]

### Best Practices
[Style and convention suggestions]

### Security & Performance
[Security and performance considerations]"""
