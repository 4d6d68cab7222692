from typing import Literal

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from reviewflow.api.dependencies import get_github_client
from reviewflow.codeowners.engine import CodeOwnersResolver
from reviewflow.codeowners.lookup import owners_by_file
from reviewflow.codeowners.models import PullRequest
from reviewflow.codeowners.parser import get_dialect
from reviewflow.core.config import config
from reviewflow.integrations.github.adapter import GitHubRepositoryAdapter
from reviewflow.integrations.github.client import GitHubClient
from reviewflow.integrations.local import InMemoryRepository

logger = structlog.get_logger(__name__)

router = APIRouter()

Dialect = Literal["default", "sectioned"]


class CodeOwnersRequest(BaseModel):
    repository: str = Field(pattern=r"^[\w.-]+/[\w.-]+$", description="Repository as 'owner/repo'")
    pull_request_number: int = Field(gt=0)
    sha: str | None = Field(
        default=None, min_length=7, max_length=40, description="Take changed files from this commit instead of the PR"
    )
    dialect: Dialect | None = None


class CodeOwnersPreviewRequest(BaseModel):
    codeowners: str
    files: list[str]
    dialect: Dialect | None = None


class CodeOwnersResponse(BaseModel):
    owners: list[str]


class CodeOwnersPreviewResponse(CodeOwnersResponse):
    files: dict[str, list[str]] = Field(default_factory=dict)


@router.post("/code-owners", response_model=CodeOwnersResponse)
async def resolve_code_owners(
    request: CodeOwnersRequest,
    github_client: GitHubClient = Depends(get_github_client),
) -> CodeOwnersResponse:
    """Resolve the review owners of a GitHub pull request from its CODEOWNERS file."""
    try:
        details = await github_client.get_pull_request(request.repository, request.pull_request_number)
    except Exception as e:
        logger.warning(
            "Could not load pull request", repo=request.repository, pr=request.pull_request_number, error=str(e)
        )
        return CodeOwnersResponse(owners=[])

    adapter = GitHubRepositoryAdapter(
        github_client, request.repository, request.pull_request_number, ref=request.sha or details.head.sha
    )
    dialect = get_dialect(request.dialect or config.codeowners.dialect)
    resolver = CodeOwnersResolver(adapter, adapter, dialect=dialect)
    pull_request = PullRequest(number=details.number, source_branch=details.head.ref, sha=request.sha)

    owners = await resolver.code_owners_for(pull_request)
    return CodeOwnersResponse(owners=owners)


@router.post("/code-owners/preview", response_model=CodeOwnersPreviewResponse)
async def preview_code_owners(request: CodeOwnersPreviewRequest) -> CodeOwnersPreviewResponse:
    """Resolve owners for inline CODEOWNERS content and a list of paths, without touching GitHub."""
    repository = InMemoryRepository({"CODEOWNERS": request.codeowners}, request.files)
    dialect = get_dialect(request.dialect or config.codeowners.dialect)
    resolver = CodeOwnersResolver(repository, repository, dialect=dialect, file_paths=["CODEOWNERS"])

    owners = await resolver.code_owners_for(PullRequest())
    return CodeOwnersPreviewResponse(
        owners=owners,
        files=owners_by_file(request.codeowners, request.files, dialect),
    )
