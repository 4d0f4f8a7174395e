"""Locate the '# <Name> Mode' title heading."""

from __future__ import annotations

import re

from modegen.parser.document import ModeParseError

_TITLE_RE = re.compile(r"^# ([^\n]+) Mode", re.MULTILINE)
# Heading line plus any whitespace after it, removed from the body once
_TITLE_LINE_RE = re.compile(r"^# [^\n]+ Mode\s*", re.MULTILINE)


def extract_heading(text: str) -> tuple[str, str]:
    """Extract the display name and the body without its title heading.

    Args:
        text: Frontmatter-stripped document text.

    Returns:
        (name, body) tuple. Both are trimmed.

    Raises:
        ModeParseError: If no '# <Name> Mode' line exists.
    """
    match = _TITLE_RE.search(text)
    if not match:
        raise ModeParseError("Could not find mode name in markdown file")
    name = match.group(1).strip()
    body = _TITLE_LINE_RE.sub("", text, count=1).strip()
    return name, body
