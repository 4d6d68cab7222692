from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

GLOBAL_PATTERN = "*"


class Rule(BaseModel):
    """A single CODEOWNERS line: a path pattern and the owners it assigns.

    An empty ``owners`` list marks an orphan rule, which explicitly
    disclaims ownership of the matching paths.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str
    owners: tuple[str, ...] = ()

    @property
    def is_global(self) -> bool:
        return self.pattern == GLOBAL_PATTERN

    @property
    def is_orphan(self) -> bool:
        return not self.owners


class Section(BaseModel):
    """An independently ranked group of rules.

    The implicit section holding rules declared outside any header has
    ``name=None``.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    default_owners: tuple[str, ...] = ()
    optional: bool = False
    required_approvals: int | None = None
    rules: tuple[Rule, ...] = ()

    @property
    def is_default(self) -> bool:
        return self.name is None

    @property
    def global_rule(self) -> Rule | None:
        """The last ``*`` rule of the section, if any."""
        for rule in reversed(self.rules):
            if rule.is_global:
                return rule
        return None


ParsedDocument = list[Section]


@dataclass
class Contribution:
    """What one changed file contributes to a section's ranking."""

    specific_owners: list[str] = field(default_factory=list)
    triggers_fallback: bool = False


class PullRequest(BaseModel):
    """The change being reviewed.

    When ``sha`` is set the changed files are taken from that commit rather
    than from the source branch.
    """

    number: int | None = None
    source_branch: str | None = None
    sha: str | None = Field(default=None, min_length=7, max_length=40)
