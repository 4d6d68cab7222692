"""
GitHub configuration.
"""

from dataclasses import dataclass


@dataclass
class GitHubConfig:
    """GitHub configuration."""

    token: str = ""
    api_base_url: str = "https://api.github.com"
    timeout: float = 30.0
