"""Assemble parsed modes from a set of document paths.

Per-file failures are isolated: a document that cannot be read or parsed
is recorded in ``AssemblyResult.errors`` and the remaining files are still
processed. Nothing here raises for a single bad document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from modegen.parser.document import ModeDocument, ModeParseError, ParsedMode, parse_mode


@dataclass
class AssemblyResult:
    """Outcome of parsing every discovered mode document."""

    modes: list[ParsedMode] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)
    sources: dict[str, str] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Modes: {len(self.modes)} parsed, {len(self.errors)} skipped"]
        for e in self.errors:
            lines.append(f"  {e['path']}: {e['error']}")
        return "\n".join(lines)


def read_mode_document(path: Path | str) -> ModeDocument:
    """Read a mode file as UTF-8.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    mode_path = Path(path)
    return ModeDocument(filename=mode_path.name, raw_text=mode_path.read_text(encoding="utf-8"))


def parse_one(path: Path) -> ParsedMode | str:
    """Parse a single file, returning the mode or an error message."""
    try:
        return parse_mode(read_mode_document(path))
    except (ModeParseError, OSError, UnicodeDecodeError) as e:
        return str(e)


def assemble_modes(
    paths: Iterable[Path | str],
    on_file: Callable[[Path], None] | None = None,
) -> AssemblyResult:
    """Parse every path and fold the outcomes into one result.

    Paths are processed in filename order. When two documents normalize
    to the same slug, the first keeps it and the later one is rejected.

    Args:
        paths: Mode document paths.
        on_file: Optional callback invoked before each file is parsed.

    Returns:
        AssemblyResult with parsed modes, per-file errors, and a
        slug → filename map of the accepted modes.
    """
    result = AssemblyResult()
    for path in sorted((Path(p) for p in paths), key=lambda p: p.name):
        if on_file:
            on_file(path)
        outcome = parse_one(path)
        if isinstance(outcome, str):
            result.errors.append({"path": path.name, "error": outcome})
            continue
        owner = result.sources.get(outcome.slug)
        if owner:
            result.errors.append({
                "path": path.name,
                "error": f"Slug '{outcome.slug}' already produced by {owner}",
            })
            continue
        result.sources[outcome.slug] = path.name
        result.modes.append(outcome)
    return result
