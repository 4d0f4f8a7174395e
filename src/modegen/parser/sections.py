"""Split a mode body into role definition and custom instructions.

Two dialects are understood (see ``modegen.mode_config.DIALECTS``):

- default: everything before ``## Custom Instructions`` is the role
  definition, everything after it the custom instructions.
- role-section: the role definition is the content of an explicit
  ``## Role Definition`` section, up to the next level-2 heading.
  Without that section the default split applies.
"""

from __future__ import annotations

import re

from modegen.mode_config import DIALECT_DEFAULT, DIALECT_ROLE_SECTION, VALID_DIALECTS

CUSTOM_INSTRUCTIONS_HEADING = "## Custom Instructions"

_CUSTOM_INSTRUCTIONS_RE = re.compile(r"## Custom Instructions[\r\n]+(.*)", re.DOTALL)
_ROLE_DEFINITION_RE = re.compile(r"## Role Definition[\r\n]+(.*?)(?=\n## |\Z)", re.DOTALL)


def split_sections(body: str, dialect: str = DIALECT_DEFAULT) -> tuple[str, str | None]:
    """Split a body into (role_definition, custom_instructions).

    Args:
        body: Document body with frontmatter and title heading removed.
        dialect: One of ``VALID_DIALECTS``.

    Returns:
        (role_definition, custom_instructions) tuple. custom_instructions
        is None when the section is missing or empty.
    """
    if dialect not in VALID_DIALECTS:
        raise ValueError(f"Unknown dialect: {dialect}. Valid: {', '.join(sorted(VALID_DIALECTS))}")

    instructions = _custom_instructions(body)

    if dialect == DIALECT_ROLE_SECTION:
        match = _ROLE_DEFINITION_RE.search(body)
        if match:
            return match.group(1).strip(), instructions
        return _role_before_instructions(body), instructions

    if _CUSTOM_INSTRUCTIONS_RE.search(body):
        return _role_before_instructions(body), instructions
    return body.strip(), None


def _custom_instructions(body: str) -> str | None:
    match = _CUSTOM_INSTRUCTIONS_RE.search(body)
    if not match:
        return None
    return match.group(1).strip() or None


def _role_before_instructions(body: str) -> str:
    """Fallback role text: everything before the instructions heading."""
    index = body.find(CUSTOM_INSTRUCTIONS_HEADING)
    if index != -1:
        return body[:index].strip()
    return body.strip()
