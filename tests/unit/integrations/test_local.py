import pytest

from reviewflow.codeowners.engine import CodeOwnersResolver
from reviewflow.codeowners.models import PullRequest
from reviewflow.core.config.codeowners_config import DEFAULT_CODEOWNERS_PATHS
from reviewflow.integrations.local import InMemoryRepository, LocalFileReader


@pytest.mark.asyncio
async def test_reads_file_relative_to_checkout(tmp_path) -> None:
    (tmp_path / ".github").mkdir()
    (tmp_path / ".github" / "CODEOWNERS").write_text("* @octocat\n", encoding="utf-8")
    reader = LocalFileReader(tmp_path)

    assert await reader.read_local_file(".github/CODEOWNERS") == "* @octocat\n"


@pytest.mark.asyncio
async def test_missing_file_and_directories_return_none(tmp_path) -> None:
    (tmp_path / "docs").mkdir()
    reader = LocalFileReader(tmp_path)

    assert await reader.read_local_file("CODEOWNERS") is None
    assert await reader.read_local_file("docs") is None


@pytest.mark.asyncio
async def test_refuses_paths_outside_checkout(tmp_path) -> None:
    checkout = tmp_path / "repo"
    checkout.mkdir()
    (tmp_path / "secret").write_text("nope", encoding="utf-8")

    assert await LocalFileReader(checkout).read_local_file("../secret") is None


@pytest.mark.asyncio
async def test_in_memory_repository() -> None:
    repository = InMemoryRepository({"CODEOWNERS": "* @octocat"}, ["README.md"])

    assert await repository.read_local_file("CODEOWNERS") == "* @octocat"
    assert await repository.read_local_file("docs/CODEOWNERS") is None
    assert await repository.get_branch_files() == ["README.md"]
    assert await repository.get_branch_files_from_commit("f7374c2") == ["README.md"]


@pytest.mark.asyncio
async def test_resolves_owners_from_local_checkout(tmp_path) -> None:
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "CODEOWNERS").write_text("* @octocat\nsrc/ @backend\n", encoding="utf-8")
    changes = InMemoryRepository({}, ["src/app.py", "README.md"])

    resolver = CodeOwnersResolver(LocalFileReader(tmp_path), changes, file_paths=list(DEFAULT_CODEOWNERS_PATHS))
    owners = await resolver.code_owners_for(PullRequest(source_branch="feature"))

    assert owners == ["@backend", "@octocat"]
