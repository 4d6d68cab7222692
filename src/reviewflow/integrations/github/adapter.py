import structlog

from reviewflow.integrations.github.client import GitHubClient
from reviewflow.integrations.github.schemas import PullRequestFile

logger = structlog.get_logger(__name__)


def file_paths(files: list[PullRequestFile]) -> list[str]:
    """
    Flatten changed-file entries into paths.

    Renamed files are listed under both names, since owners of either path
    are affected by the move.
    """
    paths: list[str] = []
    for file in files:
        for path in (file.filename, file.previous_filename):
            if path and path not in paths:
                paths.append(path)
    return paths


class GitHubRepositoryAdapter:
    """
    Exposes one GitHub pull request through the file reader and
    changed-files interfaces of the resolution engine.
    """

    def __init__(self, client: GitHubClient, repo_full_name: str, pr_number: int, ref: str | None = None):
        self.client = client
        self.repo_full_name = repo_full_name
        self.pr_number = pr_number
        self.ref = ref

    async def read_local_file(self, path: str) -> str | None:
        return await self.client.get_file_content(self.repo_full_name, path, ref=self.ref)

    async def get_branch_files(self) -> list[str] | None:
        files = await self.client.get_pull_request_files(self.repo_full_name, self.pr_number)
        return file_paths(files)

    async def get_branch_files_from_commit(self, sha: str) -> list[str] | None:
        logger.debug("Listing files from commit", repo=self.repo_full_name, sha=sha)
        files = await self.client.get_commit_files(self.repo_full_name, sha)
        return file_paths(files)
