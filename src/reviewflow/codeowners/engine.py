"""
Review-owner resolution for a pull request.

Reads the CODEOWNERS file, enumerates the changed files, and ranks the
owners of every section. Resolution is advisory: any failure yields an empty
owner list instead of an error.
"""

import structlog

from reviewflow.codeowners.interfaces import ChangedFilesSource, FileReader
from reviewflow.codeowners.models import ParsedDocument, PullRequest
from reviewflow.codeowners.parser import CodeOwnersDialect, DefaultDialect
from reviewflow.codeowners.ranker import rank_section_owners
from reviewflow.core.config import config
from reviewflow.core.utils.logging import log_operation

logger = structlog.get_logger(__name__)


def merge_section_owners(changed_files: list[str], sections: ParsedDocument) -> list[str]:
    """
    Rank every section and concatenate the results.

    Sections are evaluated from the last declared to the first, so the
    implicit section contributes last. Owners already listed by an earlier
    evaluated section are not repeated.
    """
    owners: list[str] = []
    for section in reversed(sections):
        for owner in rank_section_owners(changed_files, section):
            if owner not in owners:
                owners.append(owner)
    return owners


class CodeOwnersResolver:
    """
    Computes the owners to request reviews from for a pull request.

    Each call parses the CODEOWNERS file afresh; instances hold no state
    between calls beyond their collaborators.
    """

    def __init__(
        self,
        file_reader: FileReader,
        change_source: ChangedFilesSource,
        dialect: CodeOwnersDialect | None = None,
        file_paths: list[str] | None = None,
    ):
        self.file_reader = file_reader
        self.change_source = change_source
        self.dialect = dialect or DefaultDialect()
        self.file_paths = file_paths if file_paths is not None else config.codeowners.file_paths

    async def code_owners_for(self, pull_request: PullRequest) -> list[str]:
        """
        Get the ordered, deduplicated review owners for a pull request.

        Args:
            pull_request: The change to resolve owners for

        Returns:
            Owner handles (e.g. "@octocat"), possibly empty, never None
        """
        subject_ids = {"pr": str(pull_request.number)} if pull_request.number is not None else None
        try:
            async with log_operation("code_owners_resolution", subject_ids, dialect=self.dialect.name):
                return await self._resolve(pull_request)
        except Exception as e:
            logger.warning("code_owners_resolution_failed", error=str(e), pr=pull_request.number)
            return []

    async def _resolve(self, pull_request: PullRequest) -> list[str]:
        content = await self.find_codeowners_file()
        if not content:
            logger.debug("codeowners_file_not_found", paths=self.file_paths)
            return []

        changed_files = await self.get_changed_files(pull_request)
        if not changed_files:
            logger.debug("pull_request_has_no_files", pr=pull_request.number)
            return []

        sections = self.dialect.parse(content)
        owners = merge_section_owners(changed_files, sections)

        logger.debug(
            "code_owners_resolved",
            owners=owners,
            sections=len(sections),
            files=len(changed_files),
        )
        return owners

    async def find_codeowners_file(self) -> str | None:
        """Return the content of the first non-empty CODEOWNERS file found."""
        for path in self.file_paths:
            content = await self.file_reader.read_local_file(path)
            if content:
                logger.debug("codeowners_file_found", path=path)
                return content
        return None

    async def get_changed_files(self, pull_request: PullRequest) -> list[str]:
        if pull_request.sha:
            files = await self.change_source.get_branch_files_from_commit(pull_request.sha)
        else:
            files = await self.change_source.get_branch_files()
        return list(files or [])
