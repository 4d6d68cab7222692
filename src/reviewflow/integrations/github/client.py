from typing import Any

import httpx
import structlog
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from reviewflow.core.config import config
from reviewflow.core.errors import GitHubRateLimitError, GitHubResourceNotFoundError
from reviewflow.integrations.github.schemas import CommitDetails, PullRequestDetails, PullRequestFile

logger = structlog.get_logger(__name__)

# GitHub stops listing pull request files after 3000 entries
MAX_FILE_PAGES = 30
PER_PAGE = 100


class GitHubClient:
    """
    A small REST client for the GitHub endpoints needed to resolve review owners.

    Authenticates with a personal access or installation token when one is
    configured; anonymous requests work for public repositories.
    """

    def __init__(self, token: str | None = None, base_url: str | None = None, timeout: float | None = None):
        self.token = token if token is not None else config.github.token
        self.base_url = (base_url or config.github.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.github.timeout

    def _headers(self, accept: str = "application/vnd.github.v3+json") -> dict[str, str]:
        headers = {"Accept": accept}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get(
        self, path: str, params: dict[str, Any] | None = None, accept: str = "application/vnd.github.v3+json"
    ) -> httpx.Response:
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
            response = await client.get(path, params=params, headers=self._headers(accept))

        if response.status_code in (403, 429) and response.headers.get("x-ratelimit-remaining") == "0":
            logger.error("GitHub rate limit exceeded", path=path, reset=response.headers.get("x-ratelimit-reset"))
            raise GitHubRateLimitError(f"GitHub rate limit exceeded while requesting {path}")
        return response

    async def get_file_content(self, repo_full_name: str, file_path: str, ref: str | None = None) -> str | None:
        """
        Fetches the raw content of a file from a repository.

        Returns:
            The file content, or None if the file does not exist
        """
        params = {"ref": ref} if ref else None
        response = await self._get(
            f"/repos/{repo_full_name}/contents/{file_path}", params=params, accept="application/vnd.github.raw"
        )

        if response.status_code == 404:
            logger.debug("File not found", repo=repo_full_name, path=file_path, ref=ref)
            return None

        response.raise_for_status()
        logger.info("Fetched file", repo=repo_full_name, path=file_path, ref=ref)
        return response.text

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def get_pull_request(self, repo_full_name: str, pr_number: int) -> PullRequestDetails:
        response = await self._get(f"/repos/{repo_full_name}/pulls/{pr_number}")
        if response.status_code == 404:
            raise GitHubResourceNotFoundError(f"Pull request {repo_full_name}#{pr_number} not found.")
        response.raise_for_status()
        return PullRequestDetails.model_validate(response.json())

    async def get_pull_request_files(self, repo_full_name: str, pr_number: int) -> list[PullRequestFile]:
        """
        Fetch the list of files changed in a pull request, following pagination.
        """
        files: list[PullRequestFile] = []

        for page in range(1, MAX_FILE_PAGES + 1):
            response = await self._get(
                f"/repos/{repo_full_name}/pulls/{pr_number}/files",
                params={"per_page": PER_PAGE, "page": page},
            )
            if response.status_code == 404:
                raise GitHubResourceNotFoundError(f"Pull request {repo_full_name}#{pr_number} not found.")
            response.raise_for_status()

            batch = [PullRequestFile.model_validate(item) for item in response.json()]
            files.extend(batch)
            if len(batch) < PER_PAGE:
                break

        logger.debug("Fetched pull request files", repo=repo_full_name, pr=pr_number, count=len(files))
        return files

    async def get_commit_files(self, repo_full_name: str, sha: str) -> list[PullRequestFile]:
        """
        Fetch the list of files changed by a single commit.
        """
        response = await self._get(f"/repos/{repo_full_name}/commits/{sha}")
        if response.status_code in (404, 422):
            raise GitHubResourceNotFoundError(f"Commit {sha} not found in {repo_full_name}.")
        response.raise_for_status()

        commit = CommitDetails.model_validate(response.json())
        return commit.files
