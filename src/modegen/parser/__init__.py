"""Parser module — turn one mode document into a ParsedMode."""

from modegen.parser.document import ModeDocument, ModeParseError, ParsedMode, parse_mode
from modegen.parser.frontmatter import strip_frontmatter
from modegen.parser.heading import extract_heading
from modegen.parser.sections import split_sections
from modegen.parser.slug import normalize_slug

__all__ = [
    "ModeDocument",
    "ModeParseError",
    "ParsedMode",
    "parse_mode",
    "strip_frontmatter",
    "extract_heading",
    "split_sections",
    "normalize_slug",
]
