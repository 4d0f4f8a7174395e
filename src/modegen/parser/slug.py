"""Display name → identifier-safe slug."""

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_slug(name: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to '-', trim dashes."""
    return _NON_ALNUM_RE.sub("-", name.lower()).strip("-")
