"""Tests for the mode document parser."""

from pathlib import Path

import pytest

from modegen.mode_config import DIALECT_DEFAULT, DIALECT_ROLE_SECTION, resolve_dialect
from modegen.parser.document import ModeDocument, ModeParseError, ParsedMode, parse_mode
from modegen.parser.frontmatter import has_unterminated_frontmatter, strip_frontmatter
from modegen.parser.heading import extract_heading
from modegen.parser.sections import split_sections
from modegen.parser.slug import normalize_slug

MODES_FIXTURES = Path(__file__).parent / "fixtures" / "modes"


class TestFrontmatter:
    def test_strips_block(self):
        assert strip_frontmatter("---\nfoo: bar\n---\nBODY") == "BODY"

    def test_no_frontmatter_unchanged(self):
        text = "# Coder Mode\n\nBody\n"
        assert strip_frontmatter(text) is text

    def test_unterminated_passed_through(self):
        text = "---\ntitle: x\n# Coder Mode\nBody"
        assert strip_frontmatter(text) == text
        assert has_unterminated_frontmatter(text)

    def test_delimiter_not_at_start(self):
        text = "Intro\n---\nfoo\n---\nrest"
        assert strip_frontmatter(text) == text
        assert not has_unterminated_frontmatter(text)


class TestHeading:
    def test_extracts_name(self):
        name, body = extract_heading("# Backend Developer Mode\n\nBuild services.")
        assert name == "Backend Developer"
        assert body == "Build services."

    def test_heading_after_intro(self):
        name, body = extract_heading("Intro\n# Coder Mode\nText")
        assert name == "Coder"
        assert body == "Intro\nText"

    def test_removes_heading_once(self):
        _, body = extract_heading("# A Mode\nfirst\n# B Mode\nsecond")
        assert body == "first\n# B Mode\nsecond"

    def test_level_two_heading_ignored(self):
        with pytest.raises(ModeParseError):
            extract_heading("## Helper Mode\n\nText")

    def test_missing_heading_raises(self):
        with pytest.raises(ModeParseError, match="Could not find mode name"):
            extract_heading("# Release notes\n\nNothing here.")


class TestSlug:
    def test_basic(self):
        assert normalize_slug("Architecture Designer") == "architecture-designer"

    def test_punctuation_runs(self):
        assert normalize_slug("  A!!B??C  ") == "a-b-c"

    def test_symbols(self):
        assert normalize_slug("C++ / Rust Expert") == "c-rust-expert"

    @pytest.mark.parametrize("name", [
        "Backend Developer",
        "  A!!B??C  ",
        "--already-a-slug--",
        "Ünïcode Näme",
        "",
    ])
    def test_idempotent(self, name):
        once = normalize_slug(name)
        assert normalize_slug(once) == once


class TestSections:
    def test_default_split(self):
        role, instructions = split_sections("Role text\n\n## Custom Instructions\n\nInstr text")
        assert role == "Role text"
        assert instructions == "Instr text"

    def test_default_without_instructions(self):
        role, instructions = split_sections("  Whole body\n\n## Notes\nmore  ")
        assert role == "Whole body\n\n## Notes\nmore"
        assert instructions is None

    def test_empty_instructions_is_none(self):
        role, instructions = split_sections("Role\n## Custom Instructions\n\n   ")
        assert role == "Role"
        assert instructions is None

    def test_role_section(self):
        body = (
            "Intro.\n\n## Role Definition\n\nThe role.\n\n## Workflow\n\nSteps\n\n"
            "## Custom Instructions\n\nBe careful."
        )
        role, instructions = split_sections(body, DIALECT_ROLE_SECTION)
        assert role == "The role."
        assert instructions == "Be careful."

    def test_role_section_to_end(self):
        role, instructions = split_sections("## Role Definition\nOnly role", DIALECT_ROLE_SECTION)
        assert role == "Only role"
        assert instructions is None

    def test_role_section_fallback(self):
        role, instructions = split_sections(
            "Intro\n\n## Custom Instructions\nDo it", DIALECT_ROLE_SECTION,
        )
        assert role == "Intro"
        assert instructions == "Do it"

    def test_default_ignores_role_heading(self):
        role, _ = split_sections("Intro\n\n## Role Definition\nThe role.")
        assert role == "Intro\n\n## Role Definition\nThe role."

    @pytest.mark.parametrize("dialect", [DIALECT_DEFAULT, DIALECT_ROLE_SECTION])
    def test_splits_at_first_instructions_heading(self, dialect):
        body = "Intro\n## Custom Instructions (legacy)\nold\n\n## Custom Instructions\nNew"
        role, instructions = split_sections(body, dialect)
        assert role == "Intro"
        assert instructions == "New"

    def test_unknown_dialect(self):
        with pytest.raises(ValueError, match="Unknown dialect"):
            split_sections("body", "nonexistent")


class TestDialects:
    def test_default(self):
        assert resolve_dialect("coder-mode.md") == DIALECT_DEFAULT

    @pytest.mark.parametrize("filename", ["maestro-mode.md", "Maestro-Mode.md", "MAESTRO-MODE.MD"])
    def test_role_section_case_insensitive(self, filename):
        assert resolve_dialect(filename) == DIALECT_ROLE_SECTION


class TestParseMode:
    def _fixture(self, filename):
        return ModeDocument(filename, (MODES_FIXTURES / filename).read_text(encoding="utf-8"))

    def test_frontmatter_and_instructions(self):
        mode = parse_mode(self._fixture("backend-developer-mode.md"))
        assert mode.name == "Backend Developer"
        assert mode.slug == "backend-developer"
        assert mode.role_definition == "You are a backend developer who designs services and data models."
        assert mode.custom_instructions == "Prefer small, well-tested modules."

    def test_maestro_dialect(self):
        mode = parse_mode(self._fixture("maestro-mode.md"))
        assert mode.name == "Maestro"
        assert mode.role_definition == (
            "You are Maestro, the orchestrator that delegates work to specialist modes."
        )
        assert mode.custom_instructions == "Always confirm the plan before delegating."

    def test_same_body_other_filename_uses_default(self):
        raw = (MODES_FIXTURES / "maestro-mode.md").read_text(encoding="utf-8")
        mode = parse_mode(ModeDocument("conductor-mode.md", raw))
        assert mode.role_definition.startswith("Maestro coordinates the other modes.")
        assert "## Workflow" in mode.role_definition

    def test_missing_heading(self):
        with pytest.raises(ModeParseError, match="Could not find mode name"):
            parse_mode(self._fixture("notes-mode.md"))

    def test_unterminated_frontmatter_named_in_error(self):
        doc = ModeDocument("broken-mode.md", "---\ntitle: broken\n\nCoder Mode text")
        with pytest.raises(ModeParseError, match="never closed"):
            parse_mode(doc)

    def test_empty_role_definition(self):
        doc = ModeDocument("empty-mode.md", "# Empty Mode\n\n## Custom Instructions\nSomething")
        with pytest.raises(ModeParseError, match="empty role definition"):
            parse_mode(doc)


class TestEntry:
    def test_entry_without_instructions_omits_key(self):
        entry = ParsedMode("Code Reviewer", "code-reviewer", "Review.").to_entry()
        assert "customInstructions" not in entry
        assert list(entry) == ["slug", "name", "roleDefinition", "groups", "source"]

    def test_entry_with_instructions(self):
        entry = ParsedMode("Coder", "coder", "Code.", "Test first.").to_entry()
        assert entry["customInstructions"] == "Test first."
        assert entry["groups"] == ["read", "edit", "browser", "command", "mcp"]
        assert entry["source"] == "project"
