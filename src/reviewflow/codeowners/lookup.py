"""
Single-file owner lookups on CODEOWNERS content already in memory.
"""

import logging

from reviewflow.codeowners.engine import merge_section_owners
from reviewflow.codeowners.parser import CodeOwnersDialect, DefaultDialect

logger = logging.getLogger(__name__)


def owners_for_file(codeowners_content: str, file_path: str, dialect: CodeOwnersDialect | None = None) -> list[str]:
    """
    Get the owners that would be requested for a change touching one file.

    Args:
        codeowners_content: Raw content of the CODEOWNERS file
        file_path: Path to the file relative to repository root
        dialect: Dialect to parse the content with (plain dialect if None)

    Returns:
        List of owner handles
    """
    sections = (dialect or DefaultDialect()).parse(codeowners_content)
    return merge_section_owners([file_path], sections)


def path_has_owner(codeowners_content: str, file_path: str, dialect: CodeOwnersDialect | None = None) -> bool:
    """
    Check if a path has any code owner defined using CODEOWNERS content (no disk read).

    Orphaned paths and paths no rule matches have no owner.
    """
    return len(owners_for_file(codeowners_content, file_path, dialect)) > 0


def owners_by_file(
    codeowners_content: str, file_paths: list[str], dialect: CodeOwnersDialect | None = None
) -> dict[str, list[str]]:
    """Map each path to its own owners, parsing the content once."""
    sections = (dialect or DefaultDialect()).parse(codeowners_content)
    result = {file_path: merge_section_owners([file_path], sections) for file_path in file_paths}
    logger.debug(f"Resolved owners for {len(result)} files")
    return result
