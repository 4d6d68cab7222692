from pydantic import BaseModel, ConfigDict, Field


class PullRequestFile(BaseModel):
    """Schema for a file entry of the pull request files endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    status: str = "modified"
    previous_filename: str | None = None
    additions: int = 0
    deletions: int = 0


class GitRef(BaseModel):
    ref: str
    sha: str


class PullRequestDetails(BaseModel):
    """Schema for the subset of a pull request response used for owner resolution."""

    number: int
    state: str = "open"
    head: GitRef
    base: GitRef


class CommitDetails(BaseModel):
    """Schema for a single commit response."""

    sha: str
    files: list[PullRequestFile] = Field(default_factory=list)
