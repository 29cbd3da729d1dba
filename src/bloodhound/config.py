import os

TOP_K: int = 5

# Candidate keys (and queries) are casefolded unless this is set.
CASE_SENSITIVE: bool = False

# Glob patterns (gitignore syntax) applied by the CLI and web UI unless
# --no-default-excludes is given. Engine.build() itself filters nothing
# unless exclusions are passed explicitly.
DEFAULT_EXCLUSIONS: list[str] = [
    "**/.git",
    "**/.hg",
    "**/.svn",
    "**/.idea",
    "**/.vscode",
    "**/node_modules",
    "**/__pycache__",
]

# Progress logging (set BLOODHOUND_VERBOSE=1 to enable)
VERBOSE_ENV = "BLOODHOUND_VERBOSE"
PROGRESS_EVERY_FILES: int = 5_000


def verbose() -> bool:
    return os.environ.get(VERBOSE_ENV) == "1"
