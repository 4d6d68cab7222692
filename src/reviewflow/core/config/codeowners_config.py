"""
CODEOWNERS lookup configuration.
"""

from dataclasses import dataclass, field

DEFAULT_CODEOWNERS_PATHS = [
    "CODEOWNERS",
    ".github/CODEOWNERS",
    ".gitlab/CODEOWNERS",
    "docs/CODEOWNERS",
]


@dataclass
class CodeOwnersConfig:
    """Where to look for the CODEOWNERS file and which dialect to parse it with."""

    file_paths: list[str] = field(default_factory=lambda: list(DEFAULT_CODEOWNERS_PATHS))
    dialect: str = "default"
