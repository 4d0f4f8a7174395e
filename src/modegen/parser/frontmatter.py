"""Strip a leading --- frontmatter block from markdown text."""

from __future__ import annotations

DELIMITER = "---"


def strip_frontmatter(text: str) -> str:
    """Remove a leading frontmatter block.

    The block opens with ``---`` at offset 0 and closes at the next ``---``.
    The remainder after the closing delimiter is returned trimmed. Text
    without a leading delimiter, or with no closing one, is returned as is.
    """
    if text.startswith(DELIMITER):
        end = text.find(DELIMITER, len(DELIMITER))
        if end != -1:
            return text[end + len(DELIMITER):].strip()
    return text


def has_unterminated_frontmatter(text: str) -> bool:
    """True when text opens a frontmatter block that never closes."""
    return text.startswith(DELIMITER) and text.find(DELIMITER, len(DELIMITER)) == -1
