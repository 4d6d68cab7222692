from reviewflow.integrations.github.client import GitHubClient

# --- Service Dependencies ---


def get_github_client() -> GitHubClient:
    """
    Injects GitHubClient built from the global config; overridden in tests.
    """
    return GitHubClient()
