"""
Core error classes for the Reviewflow application.
"""


class CodeOwnersError(Exception):
    """Base class for errors raised while gathering CODEOWNERS inputs."""

    pass


class GitHubResourceNotFoundError(CodeOwnersError):
    """Raised when a specific GitHub resource is not found."""

    pass


class GitHubRateLimitError(CodeOwnersError):
    """Raised when GitHub API rate limit is exceeded."""

    pass
