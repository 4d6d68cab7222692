"""
Per-file rule resolution within one section.
"""

from reviewflow.codeowners.matcher import matches
from reviewflow.codeowners.models import Contribution, Rule, Section


def find_winning_rule(file_path: str, section: Section) -> Rule | None:
    """Return the last rule of the section whose pattern matches the file."""
    for rule in reversed(section.rules):
        if matches(rule.pattern, file_path):
            return rule
    return None


def resolve_contribution(file_path: str, section: Section) -> Contribution:
    """
    Compute what a changed file contributes to its section's owner list.

    Args:
        file_path: Path to the file relative to repository root
        section: Section whose rules are evaluated

    Returns:
        The file's specific owners and whether it pulls in the section's
        global owners. The global rule's owners are never returned as
        specific owners; an orphan rule contributes nothing at all.
    """
    rule = find_winning_rule(file_path, section)

    if rule is None:
        return Contribution()

    if rule.is_global:
        return Contribution(triggers_fallback=True)

    if rule.is_orphan:
        return Contribution()

    return Contribution(specific_owners=list(rule.owners), triggers_fallback=True)
