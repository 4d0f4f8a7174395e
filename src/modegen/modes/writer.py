"""Sort, serialize, and write the .roomodes configuration.

The whole file is rendered in memory before the single write, so a run
that fails before writing leaves any previous output untouched.
"""

from __future__ import annotations

import json
import unicodedata
from pathlib import Path
from typing import Any, Iterable

import yaml

from modegen.mode_config import CONFIG_KEY, OUTPUT_FORMATS
from modegen.paths import output_path as _default_output_path
from modegen.parser.document import ParsedMode


def _name_key(name: str) -> tuple[str, str, str]:
    # Base letters ignoring case and accents decide; accents, then case, break ties
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name.casefold(), name.swapcase()


def sort_modes(modes: Iterable[ParsedMode]) -> list[ParsedMode]:
    """Sort modes ascending by display name."""
    return sorted(modes, key=lambda m: _name_key(m.name))


def build_config(modes: Iterable[ParsedMode]) -> dict[str, list[dict[str, Any]]]:
    """Wrap sorted mode entries under the top-level config key."""
    return {CONFIG_KEY: [m.to_entry() for m in sort_modes(modes)]}


def render_config(config: dict, fmt: str = "json") -> str:
    """Serialize a config dict as JSON (2-space indent) or YAML."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown format: {fmt}. Valid: {', '.join(OUTPUT_FORMATS)}")
    if fmt == "yaml":
        return yaml.safe_dump(
            config,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=4096,
        )
    return json.dumps(config, indent=2, ensure_ascii=False) + "\n"


def write_config(
    config: dict,
    path: Path | str | None = None,
    fmt: str = "json",
    dry_run: bool = False,
) -> str:
    """Write the rendered config, replacing any previous file.

    Args:
        config: Config dict from build_config().
        path: Output path. Defaults to MODEGEN_OUTPUT or <modes dir>/.roomodes.
        fmt: "json" or "yaml".
        dry_run: Report the action without writing.

    Returns:
        "created", "updated", or "unchanged".

    Raises:
        OSError: If the file cannot be written.
    """
    out = Path(path) if path else _default_output_path()
    content = render_config(config, fmt)

    if not out.exists():
        action = "created"
    elif out.is_file() and out.read_bytes() == content.encode("utf-8"):
        return "unchanged"
    else:
        action = "updated"

    if not dry_run:
        out.write_text(content, encoding="utf-8")
    return action


def generate(
    modes_dir: Path | str | None = None,
    output: Path | str | None = None,
    fmt: str = "json",
    dry_run: bool = False,
    on_discover=None,
    on_file=None,
) -> dict[str, Any]:
    """Discover, parse, and write all modes in one run.

    Discovery and write failures propagate (OSError); per-file parse
    failures are returned under "errors". on_discover receives the
    discovered paths, on_file each path just before it is parsed.
    """
    from modegen.modes.assembler import assemble_modes
    from modegen.modes.discover import discover_modes
    from modegen.paths import modes_dir as _default_modes_dir

    root = Path(modes_dir) if modes_dir else _default_modes_dir()
    paths = discover_modes(root)
    if on_discover:
        on_discover(paths)
    result = assemble_modes(paths, on_file=on_file)

    out = Path(output) if output else _default_output_path(root)
    config = build_config(result.modes)
    action = write_config(config, out, fmt=fmt, dry_run=dry_run)

    return {
        "modes": sort_modes(result.modes),
        "errors": result.errors,
        "output": str(out),
        "action": action,
        "found": len(paths),
        "dry_run": dry_run,
    }
