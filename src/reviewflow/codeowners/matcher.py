"""
Gitignore-style path matching for CODEOWNERS patterns.

Patterns are translated to regular expressions once and memoised; matching
itself is a pure function with no error outcomes.
"""

import logging
import re
from functools import lru_cache

from reviewflow.codeowners.models import GLOBAL_PATTERN

logger = logging.getLogger(__name__)


def matches(pattern: str, file_path: str) -> bool:
    """
    Check if a file path matches a CODEOWNERS pattern.

    Args:
        pattern: CODEOWNERS pattern (e.g. "*", "*.py", "/docs/", "src/app.py")
        file_path: Path relative to the repository root

    Returns:
        True if the pattern matches the file or one of its parent directories
    """
    if pattern == GLOBAL_PATTERN:
        return True

    regex = compile_pattern(pattern)
    if regex is None:
        return False

    return regex.match(normalize_path(file_path)) is not None


def normalize_path(file_path: str) -> str:
    """Strip leading "./" and "/" so paths compare relative to the root."""
    path = file_path.strip()
    while path.startswith("./"):
        path = path[2:]
    return path.lstrip("/")


@lru_cache(maxsize=2048)
def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """
    Convert a CODEOWNERS pattern to a compiled regex.

    A pattern containing a "/" (other than a trailing one) is anchored at the
    repository root; otherwise it may match a name at any depth. Every
    pattern also matches everything beneath the path it names.

    Returns:
        The compiled regex, or None when the pattern can never match
    """
    # Negation is a gitignore feature with no meaning in CODEOWNERS
    if pattern.startswith("!"):
        logger.debug(f"Ignoring negated CODEOWNERS pattern: {pattern}")
        return None

    body = pattern.rstrip("/")
    anchored = "/" in body
    body = body.lstrip("/")
    if not body:
        return None

    prefix = "^" if anchored else "^(?:.*/)?"
    regex_pattern = f"{prefix}{_glob_to_regex(body)}(?:/.*)?$"

    try:
        return re.compile(regex_pattern)
    except re.error:
        logger.debug(f"Invalid CODEOWNERS pattern {pattern!r} (regex: {regex_pattern})")
        return None


def _glob_to_regex(glob: str) -> str:
    parts: list[str] = []
    i = 0
    length = len(glob)

    while i < length:
        char = glob[i]
        at_segment_start = i == 0 or glob[i - 1] == "/"

        if glob.startswith("**/", i) and at_segment_start:
            parts.append("(?:.*/)?")
            i += 3
        elif glob.startswith("**", i) and at_segment_start and i + 2 == length:
            parts.append(".*")
            i += 2
        elif char == "*":
            parts.append("[^/]*")
            i += 1
        elif char == "?":
            parts.append("[^/]")
            i += 1
        elif char == "[":
            end = glob.find("]", i + 1)
            if end == -1:
                parts.append(re.escape(char))
                i += 1
                continue
            char_class = glob[i + 1 : end]
            if char_class.startswith("!"):
                char_class = "^" + char_class[1:]
            parts.append(f"[{char_class}]")
            i = end + 1
        elif char == "\\" and i + 1 < length:
            parts.append(re.escape(glob[i + 1]))
            i += 2
        else:
            parts.append(re.escape(char))
            i += 1

    return "".join(parts)
