"""
CODEOWNERS parsing and review-owner resolution.

The engine accepts a plain dialect (GitHub, Gitea, Bitbucket) and the
sectioned GitLab dialect; callers pick one and inject the file reader and
changed-file source for the pull request under review.
"""

from reviewflow.codeowners.engine import CodeOwnersResolver, merge_section_owners
from reviewflow.codeowners.lookup import owners_by_file, owners_for_file, path_has_owner
from reviewflow.codeowners.matcher import matches
from reviewflow.codeowners.models import Contribution, ParsedDocument, PullRequest, Rule, Section
from reviewflow.codeowners.parser import (
    CodeOwnersDialect,
    DefaultDialect,
    SectionedDialect,
    extract_gitlab_rules,
    get_dialect,
)
from reviewflow.codeowners.ranker import rank_section_owners
from reviewflow.codeowners.resolver import resolve_contribution

__all__ = [
    "CodeOwnersDialect",
    "CodeOwnersResolver",
    "Contribution",
    "DefaultDialect",
    "ParsedDocument",
    "PullRequest",
    "Rule",
    "Section",
    "SectionedDialect",
    "extract_gitlab_rules",
    "get_dialect",
    "matches",
    "merge_section_owners",
    "owners_by_file",
    "owners_for_file",
    "path_has_owner",
    "rank_section_owners",
    "resolve_contribution",
]
