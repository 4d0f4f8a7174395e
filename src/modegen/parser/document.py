"""Mode document types and the single-file parse pipeline.

    raw text → strip frontmatter → title heading → sections → slug

Each step is pure; a document either yields one ParsedMode or raises
ModeParseError for that file alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from modegen.mode_config import GROUPS, SOURCE


class ModeParseError(ValueError):
    """A single mode document could not be parsed."""


@dataclass(frozen=True)
class ModeDocument:
    """A discovered mode file and its raw text."""

    filename: str
    raw_text: str


@dataclass(frozen=True)
class ParsedMode:
    """One mode extracted from a document."""

    name: str
    slug: str
    role_definition: str
    custom_instructions: str | None = None

    def to_entry(self) -> dict[str, Any]:
        """Serializable .roomodes entry.

        customInstructions is omitted entirely (not null) when absent.
        """
        entry: dict[str, Any] = {
            "slug": self.slug,
            "name": self.name,
            "roleDefinition": self.role_definition,
            "groups": list(GROUPS),
            "source": SOURCE,
        }
        if self.custom_instructions:
            entry["customInstructions"] = self.custom_instructions
        return entry


def parse_mode(document: ModeDocument) -> ParsedMode:
    """Run the full parse pipeline over one document.

    Raises:
        ModeParseError: Missing title heading or empty role definition.
    """
    from modegen.mode_config import resolve_dialect
    from modegen.parser.frontmatter import has_unterminated_frontmatter, strip_frontmatter
    from modegen.parser.heading import extract_heading
    from modegen.parser.sections import split_sections
    from modegen.parser.slug import normalize_slug

    text = strip_frontmatter(document.raw_text)
    try:
        name, body = extract_heading(text)
    except ModeParseError as e:
        if has_unterminated_frontmatter(document.raw_text):
            raise ModeParseError(f"{e} (frontmatter opened with '---' is never closed)") from e
        raise

    role_definition, custom_instructions = split_sections(body, resolve_dialect(document.filename))
    if not role_definition:
        raise ModeParseError(f"Mode '{name}' has an empty role definition")

    return ParsedMode(
        name=name,
        slug=normalize_slug(name),
        role_definition=role_definition,
        custom_instructions=custom_instructions,
    )
