from reviewflow.integrations.github.adapter import GitHubRepositoryAdapter
from reviewflow.integrations.github.client import GitHubClient

__all__ = ["GitHubClient", "GitHubRepositoryAdapter"]
