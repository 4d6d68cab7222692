"""
Cross-file owner ranking for one section.
"""

from dataclasses import dataclass

from reviewflow.codeowners.models import Section
from reviewflow.codeowners.resolver import resolve_contribution


@dataclass
class OwnerScore:
    """Number of changed files an owner is responsible for, and where it was first seen."""

    files: int
    first_seen: tuple[int, int]


def rank_section_owners(changed_files: list[str], section: Section) -> list[str]:
    """
    Rank the owners of a section for a set of changed files.

    Owners responsible for more files come first; ties keep the order in
    which owners were first encountered. The section's global owners follow
    when any file fell back to them.

    Args:
        changed_files: Paths changed by the pull request, in order
        section: Section to rank

    Returns:
        Distinct owners, specific owners first
    """
    scores: dict[str, OwnerScore] = {}
    fallback = False

    for file_index, file_path in enumerate(changed_files):
        contribution = resolve_contribution(file_path, section)
        fallback = fallback or contribution.triggers_fallback

        counted: set[str] = set()
        for position, owner in enumerate(contribution.specific_owners):
            if owner in counted:
                continue
            counted.add(owner)

            if owner in scores:
                scores[owner].files += 1
            else:
                scores[owner] = OwnerScore(files=1, first_seen=(file_index, position))

    ranked = sorted(scores, key=lambda owner: (-scores[owner].files, scores[owner].first_seen))

    global_rule = section.global_rule
    if fallback and global_rule is not None:
        for owner in global_rule.owners:
            if owner not in ranked:
                ranked.append(owner)

    return ranked
