"""Canonical mode constants — single source of truth.

File naming, the fixed capability groups, provenance, and the document
dialect table all live here. No other module should define its own copy.
"""

from __future__ import annotations

MODE_SUFFIX = "-mode.md"
OUTPUT_FILENAME = ".roomodes"
CONFIG_KEY = "customModes"

# Every generated entry carries the same capabilities and provenance
GROUPS: tuple[str, ...] = ("read", "edit", "browser", "command", "mcp")
SOURCE = "project"

# Document dialects: how a body is split into role definition / instructions
DIALECT_DEFAULT = "default"
DIALECT_ROLE_SECTION = "role-section"
VALID_DIALECTS = {DIALECT_DEFAULT, DIALECT_ROLE_SECTION}

# Lowercased filename → dialect. Anything not listed uses DIALECT_DEFAULT.
DIALECTS: dict[str, str] = {
    "maestro-mode.md": DIALECT_ROLE_SECTION,
}

OUTPUT_FORMATS = ("json", "yaml")


def resolve_dialect(filename: str) -> str:
    """Map a document filename to its dialect (case-insensitive)."""
    return DIALECTS.get(filename.lower(), DIALECT_DEFAULT)
