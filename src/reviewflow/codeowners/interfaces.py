"""
Collaborator interfaces consumed by the resolution engine.
"""

from collections.abc import Callable
from typing import Protocol

from reviewflow.codeowners.models import ParsedDocument

ExtractRules = Callable[[list[str]], ParsedDocument]
"""Turns cleaned CODEOWNERS lines into sections, for dialects that define them."""


class FileReader(Protocol):
    """Reads a file from the repository under review."""

    async def read_local_file(self, path: str) -> str | None: ...


class ChangedFilesSource(Protocol):
    """Enumerates the paths touched by the change under review."""

    async def get_branch_files(self) -> list[str] | None: ...

    async def get_branch_files_from_commit(self, sha: str) -> list[str] | None: ...
