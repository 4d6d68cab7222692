"""
CODEOWNERS dialect parsers.

The plain dialect (GitHub, Gitea, Bitbucket) is a flat list of rules. The
sectioned dialect (GitLab) groups rules under ``[Section]`` headers that can
carry default owners, an optional marker and a required approval count.
"""

import logging
import re
from abc import ABC, abstractmethod

from reviewflow.codeowners.interfaces import ExtractRules
from reviewflow.codeowners.models import ParsedDocument, Rule, Section

logger = logging.getLogger(__name__)

SECTION_HEADER = re.compile(
    r"^(?P<optional>\^)?\[(?P<name>[^\]]+)\](?:\[(?P<approvals>\d+)\])?(?:\s+(?P<owners>.*))?$"
)


def clean_lines(content: str) -> list[str]:
    """
    Strip comments and surrounding whitespace, dropping lines left empty.

    Args:
        content: Raw CODEOWNERS content

    Returns:
        The meaningful lines, in document order
    """
    lines = []
    for line in content.splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            lines.append(line)
    return lines


def parse_rule_line(line: str, default_owners: tuple[str, ...] = ()) -> Rule | None:
    """Split a rule line into its pattern and owners, falling back to the section defaults."""
    tokens = line.split()
    if not tokens:
        return None

    pattern, *owners = tokens
    return Rule(pattern=pattern, owners=tuple(owners) or default_owners)


def extract_default_rules(lines: list[str]) -> ParsedDocument:
    rules = []
    for line in lines:
        rule = parse_rule_line(line)
        if rule is None:
            logger.debug(f"Skipping CODEOWNERS line: {line!r}")
            continue
        rules.append(rule)

    if not rules:
        return []
    return [Section(rules=tuple(rules))]


def extract_gitlab_rules(lines: list[str]) -> ParsedDocument:
    """
    Group cleaned lines into GitLab sections.

    A header is only recognised at the start of a line, e.g.
    ``[Docs] @docs-team``, ``^[Optional] @team`` or ``[Database][2] @dba``.
    Rules declared before the first header belong to the implicit section.
    Rules without owners inherit the owners of their section header.
    """
    sections: ParsedDocument = []
    header = Section()
    rules: list[Rule] = []

    for line in lines:
        match = SECTION_HEADER.match(line)
        if match:
            _append_section(sections, header, rules)
            header = _parse_section_header(match)
            rules = []
            continue

        rule = parse_rule_line(line, header.default_owners)
        if rule is None:
            logger.debug(f"Skipping CODEOWNERS line: {line!r}")
            continue
        rules.append(rule)

    _append_section(sections, header, rules)
    return sections


def _parse_section_header(match: re.Match[str]) -> Section:
    approvals = match.group("approvals")
    owners = match.group("owners") or ""
    return Section(
        name=match.group("name").strip(),
        default_owners=tuple(owners.split()),
        optional=match.group("optional") is not None,
        required_approvals=int(approvals) if approvals else None,
    )


def _append_section(sections: ParsedDocument, header: Section, rules: list[Rule]) -> None:
    # The implicit section only exists when rules precede the first header
    if header.is_default and not rules:
        return
    sections.append(header.model_copy(update={"rules": tuple(rules)}))


class CodeOwnersDialect(ABC):
    """Strategy turning CODEOWNERS content into sections."""

    name: str = ""

    @abstractmethod
    def extract(self, lines: list[str]) -> ParsedDocument:
        """Build sections from lines already stripped of comments and blanks."""
        pass

    def parse(self, content: str) -> ParsedDocument:
        sections = self.extract(clean_lines(content))
        logger.debug(
            f"Parsed CODEOWNERS ({self.name}): {len(sections)} sections, "
            f"{sum(len(section.rules) for section in sections)} rules"
        )
        return sections


class DefaultDialect(CodeOwnersDialect):
    """Flat dialect: every line is ``pattern owner*`` in one implicit section."""

    name = "default"

    def extract(self, lines: list[str]) -> ParsedDocument:
        return extract_default_rules(lines)


class SectionedDialect(CodeOwnersDialect):
    """Dialect with named sections, supplied by the hosting platform."""

    name = "sectioned"

    def __init__(self, extract_rules: ExtractRules = extract_gitlab_rules):
        self.extract_rules = extract_rules

    def extract(self, lines: list[str]) -> ParsedDocument:
        return self.extract_rules(lines)


DIALECTS: dict[str, type[CodeOwnersDialect]] = {
    DefaultDialect.name: DefaultDialect,
    SectionedDialect.name: SectionedDialect,
}


def get_dialect(name: str | None) -> CodeOwnersDialect:
    """
    Look up a dialect by name.

    Raises:
        ValueError: If the name is unknown
    """
    if not name:
        return DefaultDialect()
    try:
        return DIALECTS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown CODEOWNERS dialect: {name}. Available: {', '.join(DIALECTS)}") from None
