import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileReader:
    """
    Reads repository files from a local checkout.

    Meant for running the resolver in-process next to a cloned repository
    (CI jobs, scripts); the HTTP API reads through GitHub instead.
    """

    def __init__(self, repo_path: str | Path = "."):
        self.repo_path = Path(repo_path).resolve()

    async def read_local_file(self, path: str) -> str | None:
        """
        Read a file relative to the checkout root.

        Args:
            path: Path relative to the repository root

        Returns:
            File content, or None if the file does not exist or lies outside the checkout
        """
        file_path = (self.repo_path / path).resolve()

        if not file_path.is_relative_to(self.repo_path):
            logger.warning(f"Refusing to read {path}: outside of {self.repo_path}")
            return None

        if not file_path.is_file():
            return None

        return await asyncio.to_thread(file_path.read_text, encoding="utf-8")


class InMemoryRepository:
    """Serves file contents and a changed-file list held in memory."""

    def __init__(self, files: dict[str, str], changed_files: list[str]):
        self.files = files
        self.changed_files = changed_files

    async def read_local_file(self, path: str) -> str | None:
        return self.files.get(path)

    async def get_branch_files(self) -> list[str] | None:
        return list(self.changed_files)

    async def get_branch_files_from_commit(self, sha: str) -> list[str] | None:
        return list(self.changed_files)
